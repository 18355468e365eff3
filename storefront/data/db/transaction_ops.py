"""Database operations for the Transaction model."""
from sqlalchemy import select, update

from storefront.data.db.connection import db_connection
from storefront.data.models.db_entity.product import Product
from storefront.data.models.db_entity.product_detail import ProductDetail
from storefront.data.models.db_entity.transaction import Transaction
from storefront.utils.errors import OutOfStock, ProductNotFound
from storefront.utils.logger import get_current_logger


async def commit_purchase(username: str, product_id: int) -> int:
    """
    Take one unit of stock and record the sale in a single database transaction.

    The decrement only applies while stock is positive, so of two buyers racing
    for the last unit exactly one gets a row back. The product name and price
    are copied onto the transaction as they are at this moment.

    Args:
        username: Buyer, already authenticated
        product_id: Product being bought

    Returns:
        The transactionID generated for the new row

    Raises:
        OutOfStock: Stock reached zero before this purchase could take it
        ProductNotFound: Product row vanished after the detail row was updated
    """
    logger = get_current_logger()
    session = db_connection.get_session()
    async with session:
        try:
            async with session.begin():
                result = await session.execute(
                    update(ProductDetail)
                    .where(ProductDetail.id == product_id, ProductDetail.stock > 0)
                    .values(stock=ProductDetail.stock - 1)
                    .execution_options(synchronize_session=False)
                )
                if result.rowcount != 1:
                    logger.info(f"Stock exhausted for product {product_id} during commit")
                    raise OutOfStock()

                product = (
                    await session.execute(select(Product).filter(Product.id == product_id))
                ).scalar_one_or_none()
                if product is None:
                    raise ProductNotFound()

                transaction = Transaction(
                    username=username,
                    product_id=product.id,
                    product_name=product.name,
                    price=product.price,
                )
                session.add(transaction)
                # Flush assigns the primary key from this insert
                await session.flush()
                transaction_id = transaction.transaction_id

            logger.info(
                f"Recorded transaction {transaction_id}: {username} bought product {product_id}"
            )
            return transaction_id
        except (OutOfStock, ProductNotFound):
            raise
        except Exception as e:
            logger.error(f"Failed to commit purchase of {product_id} for {username}: {e}")
            raise


async def get_transactions_by_username(username: str) -> list[Transaction]:
    """
    Get a user's transactions ordered by ascending transactionID.
    """
    logger = get_current_logger()
    session = db_connection.get_session()
    try:
        async with session:
            result = await session.execute(
                select(Transaction)
                .filter(Transaction.username == username)
                .order_by(Transaction.transaction_id)
            )
            return list(result.scalars().all())
    except Exception as e:
        logger.error(f"Error getting transactions for {username}: {e}")
        raise


async def get_transaction_by_id(transaction_id: int) -> Transaction | None:
    logger = get_current_logger()
    session = db_connection.get_session()
    try:
        async with session:
            result = await session.execute(
                select(Transaction).filter(Transaction.transaction_id == transaction_id)
            )
            return result.scalar_one_or_none()
    except Exception as e:
        logger.error(f"Error getting transaction {transaction_id}: {e}")
        raise


async def get_stock(product_id: int) -> int | None:
    """Current stock for a product, or None if it has no detail row."""
    logger = get_current_logger()
    session = db_connection.get_session()
    try:
        async with session:
            result = await session.execute(
                select(ProductDetail.stock).filter(ProductDetail.id == product_id)
            )
            return result.scalar_one_or_none()
    except Exception as e:
        logger.error(f"Error getting stock for product {product_id}: {e}")
        raise
