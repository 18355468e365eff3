from storefront.api.routers.products import router as product_router
from storefront.api.routers.users import router as user_router
from storefront.api.routers.transactions import router as transaction_router

__all__ = ["product_router", "user_router", "transaction_router"]
