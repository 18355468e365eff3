from storefront.api.services.transaction_service import purchase, transaction_history
from storefront.api.services.user_service import check_login, register_user

__all__ = [
    "purchase",
    "transaction_history",
    "check_login",
    "register_user",
]
