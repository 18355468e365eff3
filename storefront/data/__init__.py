from storefront.data.db import db_connection
from storefront.data.seed import init_db, seed_catalog

__all__ = ["db_connection", "init_db", "seed_catalog"]
