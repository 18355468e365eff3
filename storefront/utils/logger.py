"""
Logging setup for the storefront.

Each entry point owns a named logger (``storefront_api``, ``storefront_client``)
that writes to stdout, to ``LOG_DIR/<name>.log`` and, for errors only, to
``LOG_DIR/<name>_error.log``. The data layer is shared by both, so it asks
``get_current_logger()`` which one to use; the API sets that per request with
``set_app_context(AppLogger.API)``.
"""
import logging
import os
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from enum import Enum
from logging.handlers import RotatingFileHandler

import storefront.config as config

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
MAX_LOG_BYTES = 10 * 1024 * 1024
LOG_BACKUPS = 5


def _rotating_handler(path: str, formatter: logging.Formatter, level: int = None) -> RotatingFileHandler:
    handler = RotatingFileHandler(path, maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUPS, encoding="utf-8")
    handler.setFormatter(formatter)
    if level is not None:
        handler.setLevel(level)
    return handler


def setup_logger(name: str = "storefront", log_level: int = logging.INFO, log_file: str = None):
    """
    Create (or return) the named logger with console and rotating file output.

    Args:
        name: Logger name
        log_level: Level for the logger itself
        log_file: File name inside ``LOG_DIR``; defaults to ``<name>.log``

    Returns:
        logging.Logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(log_level)
    if logger.handlers:
        # Already configured by an earlier import
        return logger

    os.makedirs(config.LOG_DIR, exist_ok=True)
    log_file = log_file or f"{name}.log"
    stem = os.path.splitext(log_file)[0]
    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(formatter)
    logger.addHandler(console)
    logger.addHandler(_rotating_handler(os.path.join(config.LOG_DIR, log_file), formatter))
    logger.addHandler(
        _rotating_handler(os.path.join(config.LOG_DIR, f"{stem}_error.log"), formatter, logging.ERROR)
    )
    return logger


def level_from_config(default: int = logging.INFO) -> int:
    """Translate ``config.LOG_LEVEL`` into a logging level number."""
    level = logging.getLevelName(config.LOG_LEVEL)
    return level if isinstance(level, int) else default


logger = setup_logger(log_level=level_from_config())


class AppLogger(Enum):
    API = "storefront_api"
    DEFAULT = "storefront"


_current_app: ContextVar[AppLogger] = ContextVar("storefront_current_app", default=AppLogger.DEFAULT)


def get_current_logger() -> logging.Logger:
    """Logger of the app that is running the current task."""
    app = _current_app.get()
    # Imported here: the app packages import this module
    if app is AppLogger.API:
        from storefront.api import api_logger
        return api_logger
    return logger


@contextmanager
def set_app_context(app: AppLogger):
    """Route ``get_current_logger()`` to ``app``'s logger inside the block."""
    token = _current_app.set(app)
    try:
        yield
    finally:
        _current_app.reset(token)
