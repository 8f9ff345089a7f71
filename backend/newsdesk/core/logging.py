"""
Loguru sink configuration
"""

import sys

from loguru import logger

from newsdesk.core.config import settings


DEFAULT_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


def configure_logging() -> None:
    """Replace the default loguru sink with one honouring LOG_LEVEL."""
    logger.remove()
    logger.add(
        sys.stderr,
        level=settings.LOG_LEVEL.upper(),
        format=settings.LOG_FORMAT or DEFAULT_FORMAT,
        backtrace=settings.DEBUG,
        diagnose=settings.DEBUG,
    )
