import logging
from storefront.utils.logger import setup_logger, level_from_config

api_logger = setup_logger(
    "storefront_api",
    level_from_config(logging.INFO),
    log_file="storefront_api.log"
)
