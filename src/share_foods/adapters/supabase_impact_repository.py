"""Supabase repository for manual impact entries."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from share_foods.domain.errors import NotFoundError
from share_foods.domain.impact import ImpactRecord
from share_foods.services.impact import ImpactRepository

_TABLE = "impact_data"


@dataclass
class SupabaseImpactRepository(ImpactRepository):
    """Supabase implementation for the impact_data table."""

    client: Client

    def list_records(self) -> list[ImpactRecord]:
        """Return all impact records, newest first."""
        response = (
            self.client.table(_TABLE).select("*").order("date", desc=True).execute()
        )
        return [ImpactRecord.from_row(row) for row in response.data or []]

    def list_records_between(self, start: date, end: date) -> list[ImpactRecord]:
        """Return records in the inclusive range, oldest first."""
        response = (
            self.client.table(_TABLE)
            .select("*")
            .gte("date", start.isoformat())
            .lte("date", end.isoformat())
            .order("date", desc=False)
            .execute()
        )
        return [ImpactRecord.from_row(row) for row in response.data or []]

    def create_record(self, payload: dict[str, object]) -> ImpactRecord:
        """Insert a record and return it."""
        response = self.client.table(_TABLE).insert(payload).execute()
        if not response.data:
            raise RuntimeError("Failed to create impact record")
        return ImpactRecord.from_row(response.data[0])

    def update_record(
        self, record_id: UUID, payload: dict[str, object]
    ) -> ImpactRecord:
        """Update a record and return it."""
        response = (
            self.client.table(_TABLE).update(payload).eq("id", str(record_id)).execute()
        )
        if not response.data:
            raise NotFoundError(f"Impact record {record_id} not found")
        return ImpactRecord.from_row(response.data[0])

    def delete_record(self, record_id: UUID) -> None:
        """Delete a record."""
        self.client.table(_TABLE).delete().eq("id", str(record_id)).execute()
