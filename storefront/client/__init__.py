import logging
from storefront.utils.logger import setup_logger, level_from_config

client_logger = setup_logger(
    "storefront_client",
    level_from_config(logging.INFO),
    log_file="storefront_client.log"
)

from storefront.client.session import ShopSession  # noqa: E402
from storefront.client.storefront_client import StorefrontClient, StorefrontClientError  # noqa: E402

__all__ = ["client_logger", "ShopSession", "StorefrontClient", "StorefrontClientError"]
