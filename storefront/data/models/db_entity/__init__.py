from storefront.data.models.db_entity.user import User
from storefront.data.models.db_entity.product import Product
from storefront.data.models.db_entity.product_detail import ProductDetail
from storefront.data.models.db_entity.transaction import Transaction

__all__ = ["User", "Product", "ProductDetail", "Transaction"]
