"""
Logging setup.

Library modules log through ``logging.getLogger(__name__)``; nothing is
printed unless the host (or a script) calls :func:`configure_logging`.
"""

import logging
from typing import Optional, Union

from .config.settings import LOG_FORMAT, LOG_LEVEL

PACKAGE_LOGGER = "unityanim"


def configure_logging(level: Optional[Union[int, str]] = None) -> logging.Logger:
    """
    Attach a stream handler to the package logger.

    Args:
        level: Logging level name or number (defaults to settings.LOG_LEVEL)

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    if level is None:
        level = LOG_LEVEL
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)

    if not any(isinstance(handler, logging.StreamHandler) for handler in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
