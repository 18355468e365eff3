from storefront.data.db.product_ops import get_product_detail
from storefront.data.db.transaction_ops import commit_purchase, get_transactions_by_username
from storefront.data.db.user_ops import authenticate
from storefront.data.models.db_entity.transaction import Transaction
from storefront.utils.errors import ProductNotFound, OutOfStock, TransactionFailed
from storefront.utils.failure import FailureInjector
from storefront.api import api_logger as logger


async def purchase(
    username: str,
    password: str,
    product_id: int,
    injector: FailureInjector,
) -> int:
    """
    Buy one unit of a product and return the new transactionID.

    Steps run in order and the first failure ends the attempt: authenticate,
    resolve the product, check stock, draw the simulated decline, then take
    the stock and record the transaction atomically. Nothing is written
    unless the last step runs.

    Raises:
        UserNotFound, LoginFailed: Bad credentials
        ProductNotFound: No such product
        OutOfStock: Stock is zero, or ran out while committing
        TransactionFailed: Simulated decline
    """
    await authenticate(username, password)

    if product_id is None:
        raise ProductNotFound()
    product = await get_product_detail(product_id)
    if product is None:
        raise ProductNotFound()

    if product["stock"] <= 0:
        raise OutOfStock()

    if injector.should_fail():
        logger.info(f"Simulated decline for {username} on product {product_id}")
        raise TransactionFailed()

    return await commit_purchase(username, product["id"])


async def transaction_history(username: str, password: str) -> list[Transaction]:
    """Authenticate, then list the user's transactions oldest first."""
    await authenticate(username, password)
    return await get_transactions_by_username(username)
