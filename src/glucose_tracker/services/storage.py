"""Keyed blob storage abstractions."""

from dataclasses import dataclass, field
from typing import Protocol


class BlobStore(Protocol):
    """Byte store addressed by a single string key."""

    def load(self, key: str) -> bytes | None:
        """Return the stored bytes, or ``None`` when nothing is stored."""

    def save(self, key: str, data: bytes) -> None:
        """Store bytes under a key, replacing any previous value."""

    def delete(self, key: str) -> None:
        """Remove a key; missing keys are ignored."""


@dataclass
class InMemoryBlobStore(BlobStore):
    """Process-local store used when persistence is disabled."""

    blobs: dict[str, bytes] = field(default_factory=dict)

    def load(self, key: str) -> bytes | None:
        return self.blobs.get(key)

    def save(self, key: str, data: bytes) -> None:
        self.blobs[key] = data

    def delete(self, key: str) -> None:
        self.blobs.pop(key, None)
