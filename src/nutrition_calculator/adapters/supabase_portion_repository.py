"""Supabase repository for the last-used portion record."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from nutrition_calculator.services.portions import STORAGE_KEY, PortionStateRepository


@dataclass
class SupabasePortionRepository(PortionStateRepository):
    """Supabase implementation for portion state."""

    client: Client
    key: str = STORAGE_KEY

    def load(self) -> dict[str, object] | None:
        """Return the stored record for the key."""
        response = (
            self.client.table("portion_state")
            .select("state")
            .eq("key", self.key)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return response.data[0].get("state")

    def save(self, record: dict[str, object]) -> None:
        """Insert or replace the record for the key."""
        self.client.table("portion_state").upsert(
            {
                "key": self.key,
                "state": record,
                "updated_at": datetime.now(tz=UTC).isoformat(),
            },
            on_conflict="key",
        ).execute()
