"""
Storage client: uploads an image to nft.storage and returns its CID.
"""

from typing import Any, AsyncIterable, Mapping, Optional, Union

import httpx

from nft_storage.adapters.http.transport import HttpxTransport
from nft_storage.core.config import DEFAULT_CHUNK_SIZE, STORAGE_URL, Settings, get_settings
from nft_storage.core.logger import logger
from nft_storage.domain.entities import Metadata, UploadResponse
from nft_storage.domain.errors import ConfigError, TransportError, UrlError
from nft_storage.ports.transport import TransportPort
from nft_storage.services.streaming import file_to_body

UPLOAD_PATH = "/upload"
OCTET_STREAM = "application/octet-stream"

# Returned without network I/O for file: endpoints or offline_mode
PLACEHOLDER_CID = "bafkrei"


def parse_endpoint(endpoint: Union[str, httpx.URL]) -> httpx.URL:
    """
    Parse an endpoint into an absolute URL.

    ``file:`` URLs carry no host and are accepted as-is; every other scheme
    needs a host.

    Raises:
        ConfigError: If the endpoint does not parse or is not absolute.
    """
    try:
        url = httpx.URL(endpoint)
    except (httpx.InvalidURL, TypeError) as e:
        raise ConfigError(f"Invalid endpoint {endpoint!r}: {e}") from e

    if not url.scheme or (url.scheme != "file" and not url.host):
        raise ConfigError(f"Endpoint must be an absolute URL, got {endpoint!r}")
    return url


class NFTStorage:
    """
    Client for the nft.storage upload API.

    Holds no mutable state besides the pooled transport, so one instance can
    serve concurrent ``store`` calls.
    """

    def __init__(
        self,
        token: str,
        endpoint: Optional[Union[str, httpx.URL]] = None,
        *,
        offline_mode: bool = False,
        transport: Optional[TransportPort] = None,
        timeout: Optional[float] = None,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ):
        if not isinstance(token, str):
            raise ConfigError("token must be a string")
        if chunk_size <= 0:
            raise ConfigError(f"chunk_size must be positive, got {chunk_size}")

        self.token = token
        self.endpoint = parse_endpoint(endpoint if endpoint is not None else STORAGE_URL)
        self.offline_mode = offline_mode
        self.chunk_size = chunk_size

        self._owns_transport = transport is None
        self.transport = transport if transport is not None else HttpxTransport(timeout=timeout)

        logger.debug(
            f"NFTStorage client initialized: endpoint={self.endpoint} offline={self.is_offline}"
        )

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None, **kwargs: Any) -> "NFTStorage":
        """Build a client from ``Settings`` (environment / .env)."""
        settings = settings or get_settings()
        if not settings.token:
            raise ConfigError("NFT_STORAGE_TOKEN is not set")

        return cls(
            settings.token,
            settings.endpoint,
            offline_mode=settings.offline_mode,
            timeout=settings.request_timeout,
            chunk_size=settings.chunk_size,
            **kwargs,
        )

    @property
    def is_offline(self) -> bool:
        return self.offline_mode or self.endpoint.scheme == "file"

    async def __aenter__(self) -> "NFTStorage":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_transport:
            await self.transport.aclose()

    async def post(
        self,
        path: str,
        body: AsyncIterable[bytes],
        headers: Optional[Mapping[str, str]] = None,
    ) -> UploadResponse:
        """
        POST ``body`` to ``path`` resolved against the endpoint.

        Args:
            path: Relative reference; a leading slash replaces the endpoint path
            body: Streamed request payload
            headers: Extra headers; ``Authorization`` is always the client's own

        Returns:
            The decoded service reply

        Raises:
            UrlError: If ``path`` cannot be joined onto the endpoint
            TransportError: On connection failure, non-2xx or a malformed body
        """
        try:
            url = self.endpoint.join(path)
        except httpx.InvalidURL as e:
            raise UrlError(f"Cannot resolve {path!r} against {self.endpoint}: {e}") from e

        request_headers = {
            key: value
            for key, value in (headers or {}).items()
            if key.lower() != "authorization"
        }
        request_headers["Authorization"] = f"Bearer {self.token}"

        payload = await self.transport.post(str(url), request_headers, body)

        if not isinstance(payload, dict):
            raise TransportError(
                f"Expected a JSON object from {url}, got {type(payload).__name__}"
            )
        try:
            return UploadResponse.model_validate(payload)
        except ValueError as e:
            raise TransportError(f"Unexpected response from {url}: {e}") from e

    async def store(self, metadata: Metadata) -> str:
        """
        Upload ``metadata.image`` and return the CID assigned by the service.

        Raises:
            UrlError, TransportError: See ``post``
            ResponseShapeError: If the reply carries no string ``cid``
        """
        if self.is_offline:
            logger.debug(f"Offline endpoint {self.endpoint}, skipping upload")
            return PLACEHOLDER_CID

        # name/description/url are not part of the /upload request
        logger.debug(
            f"Uploading image for '{metadata.name}' "
            f"(description and url not transmitted)"
        )

        response = await self.post(
            UPLOAD_PATH,
            file_to_body(metadata.image, self.chunk_size),
            {"Content-Type": OCTET_STREAM},
        )
        cid = response.extract_cid()

        logger.info(f"Stored '{metadata.name}' as {cid}")
        return str(cid)
