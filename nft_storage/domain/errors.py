"""
Errors raised by the storage client.
"""

from typing import Optional


class NFTStorageError(Exception):
    """Base exception for storage client errors"""

    pass


class ConfigError(NFTStorageError):
    """Invalid client configuration (endpoint, token, chunk size)"""

    pass


class UrlError(NFTStorageError):
    """Failed to resolve a request path against the endpoint"""

    pass


class TransportError(NFTStorageError):
    """Connection failure, non-2xx status or unparseable response body"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ResponseShapeError(NFTStorageError):
    """Response JSON did not carry a string ``cid`` inside ``value``"""

    pass


MissingFieldError = ResponseShapeError


class StreamConsumedError(NFTStorageError):
    """A request body stream was iterated more than once"""

    pass
