"""Supabase repository for food claims."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from share_foods.domain.errors import NotFoundError
from share_foods.domain.impact import to_int
from share_foods.domain.listings import FoodClaim
from share_foods.services.claims import ClaimRepository

_TABLE = "food_claims"
_WITH_LISTING = (
    "*, food_listings(id, title, description, image_url, quantity, unit, category)"
)


@dataclass
class SupabaseClaimRepository(ClaimRepository):
    """Supabase implementation for claim persistence."""

    client: Client

    def list_claims(self, status: str) -> list[FoodClaim]:
        """Return claims in a status with their listing summary."""
        response = (
            self.client.table(_TABLE)
            .select(_WITH_LISTING)
            .eq("status", status)
            .order("created_at", desc=True)
            .execute()
        )
        return [_parse_claim(row) for row in response.data or []]

    def get_claim(self, claim_id: UUID) -> FoodClaim | None:
        """Return a claim by id, if present."""
        response = (
            self.client.table(_TABLE)
            .select(_WITH_LISTING)
            .eq("id", str(claim_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_claim(response.data[0])

    def create_claim(self, payload: dict[str, object]) -> FoodClaim:
        """Insert a claim and return it."""
        row = {
            key: str(value) if isinstance(value, UUID) else value
            for key, value in payload.items()
        }
        response = self.client.table(_TABLE).insert(row).execute()
        if not response.data:
            raise RuntimeError("Failed to create food claim")
        return _parse_claim(response.data[0])

    def update_status(self, claim_id: UUID, status: str) -> FoodClaim:
        """Update a claim's status and return it."""
        response = (
            self.client.table(_TABLE)
            .update({"status": status})
            .eq("id", str(claim_id))
            .execute()
        )
        if not response.data:
            raise NotFoundError(f"Claim {claim_id} not found")
        return _parse_claim(response.data[0])


def _parse_claim(row: dict[str, object]) -> FoodClaim:
    food_raw = row.get("food_id")
    user_raw = row.get("user_id")
    created_raw = row.get("created_at")
    listing = row.get("food_listings")
    return FoodClaim(
        id=UUID(str(row["id"])),
        food_id=UUID(str(food_raw)) if food_raw else None,
        user_id=UUID(str(user_raw)) if user_raw else None,
        requester_name=row.get("requester_name"),
        requester_email=row.get("requester_email"),
        status=str(row.get("status") or ""),
        people=to_int(row.get("people")),
        school_staff=to_int(row.get("school_staff")),
        students=to_int(row.get("students")),
        members_count=to_int(row.get("members_count")),
        created_at=(
            datetime.fromisoformat(created_raw)
            if isinstance(created_raw, str) and created_raw
            else None
        ),
        listing=listing if isinstance(listing, dict) else None,
    )
