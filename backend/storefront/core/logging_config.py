"""
Logging setup

Modules log through `logging.getLogger(__name__)`; this only configures the
root logger, from settings.

Author: TM3
Date: 2026-10-12
"""
import logging
from typing import Optional

from storefront.core.config import settings


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure the root logger.

    A handler is only installed when the root logger has none; the level is
    always applied.

    Args:
        level: Log level name. Defaults to settings.LOG_LEVEL
    """
    logging.basicConfig(format=settings.LOG_FORMAT)
    logging.getLogger().setLevel((level or settings.LOG_LEVEL).upper())
    logging.getLogger(__name__).debug(f"Logging configured for {settings.APP_NAME} {settings.APP_VERSION}")
