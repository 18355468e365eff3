"""Read-only catalog queries over products joined with their details."""
from sqlalchemy import select, or_, func

from storefront.data.db.connection import db_connection
from storefront.data.models.db_entity.product import Product
from storefront.data.models.db_entity.product_detail import ProductDetail
from storefront.utils.logger import get_current_logger


async def get_all_products() -> list[Product]:
    """
    Get every product ordered by ascending id.

    Returns:
        List of Product objects
    """
    logger = get_current_logger()
    session = db_connection.get_session()
    try:
        async with session:
            result = await session.execute(
                select(Product).order_by(Product.id)
            )
            return list(result.scalars().all())
    except Exception as e:
        logger.error(f"Error getting all products: {e}")
        raise


async def get_product_detail(product_id: int) -> dict | None:
    """
    Get a product merged with its detail row.

    Args:
        product_id: Product id to look up

    Returns:
        Dict with id, name, price, category, description and stock,
        or None when either row is missing
    """
    logger = get_current_logger()
    session = db_connection.get_session()
    try:
        async with session:
            result = await session.execute(
                select(Product, ProductDetail)
                .join(ProductDetail, ProductDetail.id == Product.id)
                .filter(Product.id == product_id)
            )
            row = result.one_or_none()
            if row is None:
                return None

            product, detail = row
            return {**product.to_dict(), **detail.to_dict()}
    except Exception as e:
        logger.error(f"Error getting product detail {product_id}: {e}")
        raise


async def search_products(term: str) -> list[dict]:
    """
    Find products whose name, description or category contains ``term``.

    Matching is case-insensitive; ``%`` and ``_`` in the term match literally.

    Returns:
        List of ``{"id": ...}`` ordered by ascending id
    """
    logger = get_current_logger()
    session = db_connection.get_session()
    try:
        async with session:
            result = await session.execute(
                select(Product.id)
                .join(ProductDetail, ProductDetail.id == Product.id)
                .filter(
                    or_(
                        Product.name.icontains(term, autoescape=True),
                        ProductDetail.description.icontains(term, autoescape=True),
                        ProductDetail.category.icontains(term, autoescape=True),
                    )
                )
                .order_by(Product.id)
            )
            ids = result.scalars().all()
            logger.debug(f"Search '{term}' matched {len(ids)} products")
            return [{"id": product_id} for product_id in ids]
    except Exception as e:
        logger.error(f"Error searching products for '{term}': {e}")
        raise


async def filter_products_by_category(category: str) -> list[dict]:
    """
    Get the ids of products in exactly this category, ascending.
    """
    logger = get_current_logger()
    session = db_connection.get_session()
    try:
        async with session:
            result = await session.execute(
                select(Product.id)
                .join(ProductDetail, ProductDetail.id == Product.id)
                .filter(ProductDetail.category == category)
                .order_by(Product.id)
            )
            return [{"id": product_id} for product_id in result.scalars().all()]
    except Exception as e:
        logger.error(f"Error filtering products by category {category}: {e}")
        raise


async def get_categories() -> list[str]:
    """Distinct product categories in alphabetical order."""
    logger = get_current_logger()
    session = db_connection.get_session()
    try:
        async with session:
            result = await session.execute(
                select(ProductDetail.category).distinct().order_by(ProductDetail.category)
            )
            return list(result.scalars().all())
    except Exception as e:
        logger.error(f"Error getting categories: {e}")
        raise


async def count_products() -> int:
    logger = get_current_logger()
    session = db_connection.get_session()
    try:
        async with session:
            result = await session.execute(select(func.count()).select_from(Product))
            return result.scalar_one()
    except Exception as e:
        logger.error(f"Error counting products: {e}")
        raise
