"""
Transport Port.
"""

from abc import ABC, abstractmethod
from typing import Any, AsyncIterable, Mapping


class TransportPort(ABC):
    """Abstract interface for the HTTP transport."""

    @abstractmethod
    async def post(
        self, url: str, headers: Mapping[str, str], content: AsyncIterable[bytes]
    ) -> Any:
        """POST a streamed body and return the decoded JSON reply."""
        pass

    @abstractmethod
    async def aclose(self) -> None:
        """Release pooled connections."""
        pass
