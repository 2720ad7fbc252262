"""Supabase admin data access."""

from dataclasses import dataclass

from supabase import Client

from share_foods.adapters.supabase_listing_repository import parse_listing
from share_foods.domain.listings import FoodListing
from share_foods.services.admin import AdminRepository


@dataclass
class SupabaseAdminRepository(AdminRepository):
    """Supabase implementation for admin queries."""

    client: Client

    def count_users(self) -> int:
        """Return the number of registered users."""
        response = (
            self.client.table("users").select("id", count="exact", head=True).execute()
        )
        return response.count or 0

    def count_listings(
        self, status: str | None = None, listing_type: str | None = None
    ) -> int:
        """Return the number of listings matching the filters."""
        query = self.client.table("food_listings").select(
            "id", count="exact", head=True
        )
        if status:
            query = query.eq("status", status)
        if listing_type:
            query = query.eq("listing_type", listing_type)
        return query.execute().count or 0

    def count_claims(self, status: str | None = None) -> int:
        """Return the number of claims matching the optional status."""
        query = self.client.table("food_claims").select(
            "id", count="exact", head=True
        )
        if status:
            query = query.eq("status", status)
        return query.execute().count or 0

    def list_recent_listings(self, limit: int) -> list[FoodListing]:
        """Return the most recently created listings."""
        response = (
            self.client.table("food_listings")
            .select("*")
            .order("created_at", desc=True)
            .limit(limit)
            .execute()
        )
        return [parse_listing(row) for row in response.data or []]

    def list_recent_users(self, limit: int) -> list[dict[str, object]]:
        """Return the most recently registered users."""
        response = (
            self.client.table("users")
            .select("id, name, email, avatar_url, created_at, organization")
            .order("created_at", desc=True)
            .limit(limit)
            .execute()
        )
        return response.data or []
