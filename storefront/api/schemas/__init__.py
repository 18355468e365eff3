from storefront.api.schemas.user_schemas import LoginRequest, NewUserRequest
from storefront.api.schemas.transaction_schemas import PurchaseRequest, TransactionIdResponse

__all__ = [
    "LoginRequest",
    "NewUserRequest",
    "PurchaseRequest",
    "TransactionIdResponse",
]
