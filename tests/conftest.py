import io
from typing import Callable
from unittest.mock import AsyncMock

import httpx
import pytest

from nft_storage.adapters.http.transport import HttpxTransport
from nft_storage.domain.entities import Metadata
from nft_storage.ports.transport import TransportPort
from nft_storage.services.client import NFTStorage

TEST_TOKEN = "eyJhbGciOiJIUzI1NiJ9.test-token.signature"
TEST_ENDPOINT = "https://api.nft.test/"
TEST_CID = "bafkrei123abc"


@pytest.fixture
def image_bytes() -> bytes:
    return b"\x89PNG\r\n\x1a\n" + b"pixel-data" * 100


@pytest.fixture
def image_path(tmp_path, image_bytes):
    path = tmp_path / "card.png"
    path.write_bytes(image_bytes)
    return path


@pytest.fixture
def metadata(image_bytes) -> Metadata:
    return Metadata(
        name="hello",
        description="bar",
        image=io.BytesIO(image_bytes),
        url=None,
    )


@pytest.fixture
def mock_transport():
    transport = AsyncMock(spec=TransportPort)
    transport.post.return_value = {"ok": True, "value": {"cid": TEST_CID}}
    return transport


@pytest.fixture
def client(mock_transport) -> NFTStorage:
    return NFTStorage(TEST_TOKEN, TEST_ENDPOINT, transport=mock_transport)


@pytest.fixture
def make_http_client() -> Callable[[Callable[[httpx.Request], httpx.Response]], NFTStorage]:
    """Build a client whose httpx transport is answered by ``handler``."""

    def _make(handler) -> NFTStorage:
        http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return NFTStorage(
            TEST_TOKEN,
            TEST_ENDPOINT,
            transport=HttpxTransport(client=http),
            chunk_size=16,
        )

    return _make
