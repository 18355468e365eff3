from storefront.utils.errors import StorefrontError
from storefront.utils.failure import FailureInjector, get_failure_injector

__all__ = ["StorefrontError", "FailureInjector", "get_failure_injector"]
