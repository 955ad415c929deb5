"""Filesystem-backed keyed blob store."""

from dataclasses import dataclass
from pathlib import Path

from glucose_tracker.services.storage import BlobStore


@dataclass
class FileBlobStore(BlobStore):
    """Stores each key as ``<directory>/<key>.json``."""

    directory: Path

    def _path(self, key: str) -> Path:
        if not key or "/" in key or "\\" in key or key.startswith("."):
            raise ValueError(f"Invalid storage key: {key!r}")
        return self.directory / f"{key}.json"

    def load(self, key: str) -> bytes | None:
        """Return file contents, or ``None`` if the file does not exist."""
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_bytes()

    def save(self, key: str, data: bytes) -> None:
        """Write atomically by replacing a temporary sibling file."""
        path = self._path(key)
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = path.with_suffix(".json.tmp")
        tmp_path.write_bytes(data)
        tmp_path.replace(path)

    def delete(self, key: str) -> None:
        self._path(key).unlink(missing_ok=True)
