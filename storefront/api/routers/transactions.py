from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from storefront.api import api_logger as logger
from storefront.api.responses import error_response, server_error_response
from storefront.api.dependencies import login_request, purchase_request
from storefront.api.schemas import LoginRequest, PurchaseRequest, TransactionIdResponse
from storefront.api.services import purchase, transaction_history
from storefront.utils.errors import StorefrontError, LoginFailed, UserNotFound
from storefront.utils.failure import FailureInjector, get_failure_injector

router = APIRouter(tags=["Transactions"])


@router.post("/validateTransaction")
async def validate_transaction_endpoint(
    request: PurchaseRequest = Depends(purchase_request),
    injector: FailureInjector = Depends(get_failure_injector),
):
    """Buy one unit of a product. Returns ``{"transactionID": n}``."""
    try:
        transaction_id = await purchase(
            request.username,
            request.password,
            request.product_id,
            injector,
        )
        return JSONResponse(
            content=TransactionIdResponse(transaction_id=transaction_id).model_dump(by_alias=True)
        )
    except StorefrontError as e:
        return error_response(e)
    except Exception:
        logger.exception(f"Purchase of {request.product_id} by {request.username} failed unexpectedly")
        return server_error_response()


@router.post("/transactionHistory")
async def transaction_history_endpoint(request: LoginRequest = Depends(login_request)):
    """List the caller's transactions ordered by transactionID."""
    try:
        transactions = await transaction_history(request.username, request.password)
        return JSONResponse(content=[t.to_dict() for t in transactions])
    except UserNotFound as e:
        return error_response(e)
    except LoginFailed as e:
        return error_response(e, status_code=400)
    except Exception:
        logger.exception(f"Transaction history for {request.username} failed unexpectedly")
        return server_error_response()
