from .entities import Metadata, UploadResponse
from .errors import (
    ConfigError,
    MissingFieldError,
    NFTStorageError,
    ResponseShapeError,
    StreamConsumedError,
    TransportError,
    UrlError,
)
from .value_objects import Cid

__all__ = [
    "Cid",
    "ConfigError",
    "Metadata",
    "MissingFieldError",
    "NFTStorageError",
    "ResponseShapeError",
    "StreamConsumedError",
    "TransportError",
    "UploadResponse",
    "UrlError",
]
