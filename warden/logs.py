"""
Logging setup for Warden.

Library modules only ever call ``logging.getLogger(__name__)``; handlers are
attached here, by the CLI or by the host application.
"""

import logging

from .config import WardenConfig

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(config: WardenConfig) -> logging.Logger:
    """
    Configure the ``warden`` logger from config.

    ``debug=True`` wins over ``log_level``. Calling this twice does not add a
    second handler.
    """
    logger = logging.getLogger("warden")
    logger.setLevel(logging.DEBUG if config.debug else config.log_level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
