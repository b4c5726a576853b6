"""
httpx Transport Adapter.
"""

from typing import Any, AsyncIterable, Mapping, Optional

import httpx

from nft_storage.core.logger import logger
from nft_storage.domain.errors import TransportError
from nft_storage.ports.transport import TransportPort


class HttpxTransport(TransportPort):
    """Adapter over a pooled ``httpx.AsyncClient``, shared by every request."""

    def __init__(
        self,
        timeout: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        if client is None:
            client = (
                httpx.AsyncClient(timeout=timeout)
                if timeout is not None
                else httpx.AsyncClient()
            )
        self.client = client

    async def post(
        self, url: str, headers: Mapping[str, str], content: AsyncIterable[bytes]
    ) -> Any:
        try:
            response = await self.client.post(url, content=content, headers=dict(headers))
        except httpx.HTTPError as e:
            logger.debug(f"POST {url} failed: {e}")
            raise TransportError(f"Request to {url} failed: {e}") from e

        if response.is_error:
            raise TransportError(
                f"POST {url} returned HTTP {response.status_code}: {response.text[:200]}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise TransportError(
                f"POST {url} returned a body that is not JSON",
                status_code=response.status_code,
            ) from e

    async def aclose(self) -> None:
        await self.client.aclose()
