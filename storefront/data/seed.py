"""Create the schema and load the reference catalog."""
import asyncio
import json
import os

from storefront.data.db.connection import db_connection
from storefront.data.db.product_ops import count_products
from storefront.data.models.db_entity.product import Product
from storefront.data.models.db_entity.product_detail import ProductDetail
from storefront.utils.logger import get_current_logger

BASE_DIR = os.path.dirname(__file__)
DATA_PATH = os.path.join(BASE_DIR, "catalog.json")


def load_catalog(path: str = DATA_PATH) -> list[dict]:
    with open(path, "r", encoding="utf-8") as file:
        return json.load(file)


async def seed_catalog(entries: list[dict] = None) -> int:
    """
    Insert catalog entries when the products table is empty.

    Returns:
        Number of products inserted (0 if the catalog already had rows)
    """
    logger = get_current_logger()
    if await count_products() > 0:
        logger.info("Catalog already seeded, skipping")
        return 0

    entries = load_catalog() if entries is None else entries
    session = db_connection.get_session()
    async with session:
        try:
            for entry in entries:
                session.add(
                    Product(
                        id=entry.get("id"),
                        name=entry["name"],
                        price=entry["price"],
                        detail=ProductDetail(
                            category=entry["category"],
                            description=entry.get("description", ""),
                            stock=entry.get("stock", 0),
                        ),
                    )
                )
            await session.commit()
        except Exception as e:
            logger.error(f"Failed to seed catalog: {e}")
            await session.rollback()
            raise
    logger.info(f"Seeded {len(entries)} products")
    return len(entries)


async def init_db(seed: bool = True) -> None:
    await db_connection.create_all()
    if seed:
        await seed_catalog()


if __name__ == "__main__":
    asyncio.run(init_db())
