"""
Async client for uploading NFT assets to nft.storage.
"""

from .core.config import STORAGE_URL, Settings, get_settings
from .domain import (
    Cid,
    ConfigError,
    Metadata,
    MissingFieldError,
    NFTStorageError,
    ResponseShapeError,
    StreamConsumedError,
    TransportError,
    UploadResponse,
    UrlError,
)
from .services.client import PLACEHOLDER_CID, NFTStorage
from .services.streaming import FileBody, file_to_body

__version__ = "0.1.0"

__all__ = [
    "Cid",
    "ConfigError",
    "FileBody",
    "Metadata",
    "MissingFieldError",
    "NFTStorage",
    "NFTStorageError",
    "PLACEHOLDER_CID",
    "ResponseShapeError",
    "STORAGE_URL",
    "Settings",
    "StreamConsumedError",
    "TransportError",
    "UploadResponse",
    "UrlError",
    "file_to_body",
    "get_settings",
]
