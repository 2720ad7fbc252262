"""Supabase repository for food listings."""

import re
from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from share_foods.domain.errors import NotFoundError
from share_foods.domain.impact import to_float
from share_foods.domain.listings import FoodListing, ListingFilters
from share_foods.services.listings import ListingRepository

_TABLE = "food_listings"


@dataclass
class SupabaseListingRepository(ListingRepository):
    """Supabase-backed repository for food listings."""

    client: Client

    def list_listings(self, filters: ListingFilters) -> list[FoodListing]:
        """Return listings matching the filters, newest first."""
        query = self.client.table(_TABLE).select("*").eq("status", filters.status)
        query = _apply_filters(query, filters)
        if filters.page and filters.limit:
            start = (filters.page - 1) * filters.limit
            query = query.range(start, start + filters.limit - 1)
        response = query.order("created_at", desc=True).execute()
        return [parse_listing(row) for row in response.data or []]

    def list_all_listings(self) -> list[FoodListing]:
        """Return every listing regardless of status."""
        response = self.client.table(_TABLE).select("*").execute()
        return [parse_listing(row) for row in response.data or []]

    def search_listings(self, term: str, filters: ListingFilters) -> list[FoodListing]:
        """Return listings whose title or description contains the term."""
        pattern = _contains_pattern(term)
        query = (
            self.client.table(_TABLE)
            .select("*")
            .eq("status", filters.status)
            .or_(f"title.ilike.{pattern},description.ilike.{pattern}")
        )
        query = _apply_filters(query, filters)
        response = query.order("created_at", desc=True).execute()
        return [parse_listing(row) for row in response.data or []]

    def get_listing(self, listing_id: UUID) -> FoodListing | None:
        """Return a listing by id, if present."""
        response = (
            self.client.table(_TABLE)
            .select("*")
            .eq("id", str(listing_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return parse_listing(response.data[0])

    def create_listing(self, payload: dict[str, object]) -> FoodListing:
        """Insert a listing and return it."""
        response = self.client.table(_TABLE).insert(payload).execute()
        if not response.data:
            raise RuntimeError("Failed to create food listing")
        return parse_listing(response.data[0])

    def update_listing(
        self, listing_id: UUID, payload: dict[str, object]
    ) -> FoodListing:
        """Update a listing and return it."""
        response = (
            self.client.table(_TABLE)
            .update(payload)
            .eq("id", str(listing_id))
            .execute()
        )
        if not response.data:
            raise NotFoundError(f"Listing {listing_id} not found")
        return parse_listing(response.data[0])

    def delete_listing(self, listing_id: UUID) -> None:
        """Delete a listing."""
        self.client.table(_TABLE).delete().eq("id", str(listing_id)).execute()


def _apply_filters(query, filters: ListingFilters):  # type: ignore[no-untyped-def]
    if filters.category:
        query = query.eq("category", filters.category)
    if filters.listing_type:
        query = query.eq("listing_type", filters.listing_type)
    if filters.location:
        query = query.ilike("donor_city", f"%{filters.location}%")
    if filters.user_id:
        query = query.eq("user_id", str(filters.user_id))
    return query


def _contains_pattern(term: str) -> str:
    """Return a quoted PostgREST ilike value matching the term literally."""
    literal = re.sub(r"([\\%_])", r"\\\1", term)
    quoted = literal.replace("\\", "\\\\").replace('"', '\\"')
    return f'"%{quoted}%"'


def parse_listing(row: dict[str, object]) -> FoodListing:
    """Parse a food_listings row into a domain model."""
    user_raw = row.get("user_id")
    created_raw = row.get("created_at")
    location = row.get("location")
    return FoodListing(
        id=UUID(str(row["id"])),
        user_id=UUID(str(user_raw)) if user_raw else None,
        title=str(row.get("title") or ""),
        description=row.get("description"),
        image_url=row.get("image_url"),
        quantity=to_float(row.get("quantity")),
        unit=row.get("unit"),
        category=row.get("category"),
        listing_type=row.get("listing_type"),
        status=str(row.get("status") or ""),
        expiry_date=row.get("expiry_date"),
        location=location if isinstance(location, dict) else None,
        donor_city=row.get("donor_city"),
        donor_state=row.get("donor_state"),
        donor_zip=row.get("donor_zip"),
        donor_type=row.get("donor_type"),
        latitude=row.get("latitude"),
        longitude=row.get("longitude"),
        created_at=(
            datetime.fromisoformat(created_raw)
            if isinstance(created_raw, str) and created_raw
            else None
        ),
    )
