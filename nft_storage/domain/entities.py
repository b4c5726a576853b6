"""
Domain entities for the storage client.
"""

from dataclasses import dataclass
from typing import Any, BinaryIO, Optional

from pydantic import BaseModel, ConfigDict

from .errors import ResponseShapeError
from .value_objects import Cid


@dataclass(frozen=True)
class Metadata:
    """
    NFT metadata passed to ``store``.

    Only ``image`` is uploaded. ``name``, ``description`` and ``url`` are
    accepted for symmetry with the service's metadata model and are not
    sent by the ``/upload`` endpoint. ``url`` is kept as the caller's raw
    string and is never parsed or validated, since it never goes on the wire.
    """

    name: str
    description: str
    image: BinaryIO
    url: Optional[str] = None


class UploadResponse(BaseModel):
    """Raw reply of the storage service."""

    model_config = ConfigDict(extra="ignore")

    ok: bool
    value: Any = None

    def extract_cid(self) -> Cid:
        """
        Pull ``value.cid`` out of the reply.

        Raises:
            ResponseShapeError: If ``value`` is not an object or ``cid`` is
                missing or not a string.
        """
        if not isinstance(self.value, dict):
            raise ResponseShapeError(
                f"Expected 'value' to be an object, got {type(self.value).__name__}"
            )

        cid = self.value.get("cid")
        if cid is None:
            raise ResponseShapeError("Response 'value' has no 'cid' field")
        if not isinstance(cid, str):
            raise ResponseShapeError(
                f"Expected 'cid' to be a string, got {type(cid).__name__}"
            )

        return Cid(cid)
