"""
Core module containing configuration and logging.
"""

from .config import DEFAULT_CHUNK_SIZE, STORAGE_URL, Settings, get_settings
from .logger import logger, setup_logger

__all__ = [
    "DEFAULT_CHUNK_SIZE",
    "STORAGE_URL",
    "Settings",
    "get_settings",
    "logger",
    "setup_logger",
]
