"""Supabase-backed keyed blob store."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from glucose_tracker.services.storage import BlobStore


@dataclass
class SupabaseBlobStore(BlobStore):
    """Keeps each blob as a text row in a key/payload table."""

    client: Client
    table: str = "meal_blobs"

    def load(self, key: str) -> bytes | None:
        """Return the payload stored for a key."""
        response = (
            self.client.table(self.table)
            .select("payload")
            .eq("key", key)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        payload = response.data[0].get("payload")
        if payload is None:
            return None
        if not isinstance(payload, str):
            raise RuntimeError(f"Unexpected payload type for key {key!r}")
        return payload.encode("utf-8")

    def save(self, key: str, data: bytes) -> None:
        """Insert or replace the payload for a key."""
        response = (
            self.client.table(self.table)
            .upsert(
                {
                    "key": key,
                    "payload": data.decode("utf-8"),
                    "updated_at": datetime.now(tz=UTC).isoformat(),
                },
                on_conflict="key",
            )
            .execute()
        )
        if response.data is None:
            raise RuntimeError(f"Failed to save blob {key!r}")

    def delete(self, key: str) -> None:
        self.client.table(self.table).delete().eq("key", key).execute()
