"""
Lazy request bodies backed by open file handles.
"""

import asyncio
import inspect
from typing import Any, AsyncIterator

from nft_storage.core.config import DEFAULT_CHUNK_SIZE
from nft_storage.domain.errors import StreamConsumedError, TransportError


class FileBody:
    """
    Single-use async byte stream over a binary file handle.

    Chunks are read only as the transport drains the stream. Blocking
    handles are read in the default executor; handles whose ``read`` is a
    coroutine function (aiofiles and friends) are awaited directly.
    """

    def __init__(self, file: Any, chunk_size: int = DEFAULT_CHUNK_SIZE):
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        self.file = file
        self.chunk_size = chunk_size
        self._consumed = False

    @property
    def consumed(self) -> bool:
        return self._consumed

    def __aiter__(self) -> AsyncIterator[bytes]:
        if self._consumed:
            raise StreamConsumedError("Request body has already been streamed")
        self._consumed = True
        return self._chunks()

    async def _read(self) -> bytes:
        read = self.file.read
        try:
            if inspect.iscoroutinefunction(read):
                return await read(self.chunk_size)
            loop = asyncio.get_running_loop()
            return await loop.run_in_executor(None, read, self.chunk_size)
        except OSError as e:
            raise TransportError(f"Failed to read request body: {e}") from e

    async def _chunks(self) -> AsyncIterator[bytes]:
        while True:
            chunk = await self._read()
            if not chunk:
                break
            yield chunk


def file_to_body(file: Any, chunk_size: int = DEFAULT_CHUNK_SIZE) -> FileBody:
    """Wrap an open binary file handle as a streamed request body."""
    return FileBody(file, chunk_size)
