"""Supabase-backed saved food repository."""

from dataclasses import dataclass

from supabase import Client

from food_search.domain.foods import SavedRecord
from food_search.services.saved_foods import SavedFoodRepository


@dataclass
class SupabaseSavedFoodRepository(SavedFoodRepository):
    """Supabase implementation for saved food persistence."""

    client: Client
    table: str = "saved_foods"

    def find(self, fdc_id: int, description: str) -> list[dict[str, object]]:
        """Return at most one row matching the FDC id and description."""
        response = (
            self.client.table(self.table)
            .select("id, description")
            .eq("id", fdc_id)
            .eq("description", description)
            .limit(1)
            .execute()
        )
        return response.data or []

    def insert(self, fdc_id: int, description: str) -> SavedRecord:
        """Insert a saved food row and return it."""
        response = (
            self.client.table(self.table)
            .insert({"id": fdc_id, "description": description})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to save food in Supabase")
        row = response.data[0]
        return SavedRecord(fdc_id=int(row["id"]), description=str(row["description"]))
