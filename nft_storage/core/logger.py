"""
Centralized logging configuration using Loguru.
Follows Single Responsibility Principle - only handles logging setup.

Library modules only import ``logger``; sinks are installed by the
command line entry point through ``setup_logger``.
"""

import sys
from typing import Optional

from loguru import logger

from .config import Settings, get_settings

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"

_configured = False


def resolve_log_level(settings: Settings) -> str:
    """LOG_LEVEL takes precedence; an unknown level falls back to the DEBUG flag."""
    log_level = (settings.log_level or "").upper()
    if log_level not in LOG_LEVELS:
        log_level = "DEBUG" if settings.debug else "INFO"
    return log_level


def setup_logger(settings: Optional[Settings] = None, force: bool = False) -> None:
    """Configure logger handlers. Only configures once unless ``force`` is set."""
    global _configured
    if _configured and not force:
        return

    settings = settings or get_settings()
    log_level = resolve_log_level(settings)

    logger.remove()

    # stdout is reserved for command output (the CID)
    logger.add(
        sys.stderr,
        colorize=True,
        format=CONSOLE_FORMAT,
        level=log_level,
    )

    if settings.log_file:
        # File logs always DEBUG to capture everything
        logger.add(
            settings.log_file,
            rotation="10 MB",
            retention="30 days",
            compression="zip",
            format=FILE_FORMAT,
            level="DEBUG",
        )

    _configured = True


__all__ = ["logger", "setup_logger", "resolve_log_level"]
