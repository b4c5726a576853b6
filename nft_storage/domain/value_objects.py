"""
Domain value objects.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Cid:
    """Content identifier returned by the storage service."""

    value: str

    def __str__(self):
        return self.value
