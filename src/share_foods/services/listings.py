"""Services for food listings."""

import logging
from dataclasses import dataclass, replace
from typing import Protocol
from uuid import UUID

from share_foods.domain.geo import Coordinate
from share_foods.domain.impact import to_float
from share_foods.domain.listings import (
    APPROVED,
    DECLINED,
    PENDING,
    STATUSES,
    FoodListing,
    ListingFilters,
    NearbyListing,
)
from share_foods.services.geo import DEFAULT_RADIUS_KM, filter_within_radius
from share_foods.services.notifications import NotificationService

# Donor contact details live on the user profile, not on the listing row.
_PROFILE_FIELDS = ("donor_name", "donor_email", "donor_phone", "donor_occupation")

_logger = logging.getLogger(__name__)


class ListingRepository(Protocol):
    """Persistence interface for food listings."""

    def list_listings(self, filters: ListingFilters) -> list[FoodListing]:
        """Return listings matching the filters, newest first."""

    def list_all_listings(self) -> list[FoodListing]:
        """Return every listing regardless of status."""

    def search_listings(self, term: str, filters: ListingFilters) -> list[FoodListing]:
        """Return listings whose title or description matches the term."""

    def get_listing(self, listing_id: UUID) -> FoodListing | None:
        """Return a listing by id, if present."""

    def create_listing(self, payload: dict[str, object]) -> FoodListing:
        """Insert a listing and return it."""

    def update_listing(
        self, listing_id: UUID, payload: dict[str, object]
    ) -> FoodListing:
        """Update a listing and return it."""

    def delete_listing(self, listing_id: UUID) -> None:
        """Delete a listing."""


@dataclass
class ListingService:
    """Application service for listing CRUD, search and moderation."""

    repository: ListingRepository
    notification_service: NotificationService
    default_radius_km: float = DEFAULT_RADIUS_KM

    def list_listings(self, filters: ListingFilters | None = None) -> list[FoodListing]:
        """Return listings for the given filters."""
        resolved = filters or ListingFilters()
        _validate_status(resolved.status)
        return self.repository.list_listings(resolved)

    def search(
        self, term: str | None, filters: ListingFilters | None = None
    ) -> list[FoodListing]:
        """Search approved listings, listing everything when the term is blank."""
        resolved = replace(filters or ListingFilters(), status=APPROVED)
        if not term or not term.strip():
            return self.repository.list_listings(resolved)
        return self.repository.search_listings(term.strip(), resolved)

    def get_listing(self, listing_id: UUID) -> FoodListing | None:
        """Return a single listing."""
        return self.repository.get_listing(listing_id)

    def create_listing(
        self, user_id: UUID, payload: dict[str, object]
    ) -> FoodListing:
        """Create a listing awaiting moderation."""
        _validate_quantity(payload)
        row = {
            key: value for key, value in payload.items() if key not in _PROFILE_FIELDS
        }
        row["user_id"] = str(user_id)
        row["status"] = PENDING
        row["location"] = _build_location(payload)
        return self.repository.create_listing(row)

    def update_listing(
        self, listing_id: UUID, changes: dict[str, object]
    ) -> FoodListing:
        """Update listing fields."""
        _validate_quantity(changes)
        if "status" in changes:
            _validate_status(changes["status"])
        return self.repository.update_listing(listing_id, changes)

    def delete_listing(self, listing_id: UUID) -> None:
        """Delete a listing."""
        self.repository.delete_listing(listing_id)

    def find_nearby(
        self,
        origin: Coordinate | None,
        radius_km: float | None = None,
        filters: ListingFilters | None = None,
    ) -> list[NearbyListing]:
        """Return approved listings within the radius, nearest first."""
        radius = self.default_radius_km if radius_km is None else radius_km
        if origin is None or radius < 0:
            return []
        resolved = replace(filters or ListingFilters(), status=APPROVED)
        listings = self.repository.list_listings(resolved)
        matches = filter_within_radius(
            listings, origin, radius, lambda listing: listing.coordinate
        )
        matches.sort(key=lambda pair: pair[1])
        return [
            NearbyListing(listing=listing, distance_km=distance)
            for listing, distance in matches
        ]

    def set_status(self, listing_id: UUID, status: str) -> FoodListing:
        """Moderate a listing, notifying the owner when it is declined."""
        _validate_status(status)
        listing = self.repository.update_listing(listing_id, {"status": status})
        if status == DECLINED:
            self.notification_service.notify_listing_declined(listing)
        _logger.info("Listing %s moved to %s", listing_id, status)
        return listing


def _validate_status(status: object) -> None:
    if status not in STATUSES:
        raise ValueError(f"Unknown status: {status}")


def _validate_quantity(payload: dict[str, object]) -> None:
    if "quantity" in payload and to_float(payload["quantity"]) < 0:
        raise ValueError("quantity must be non-negative")


def _build_location(payload: dict[str, object]) -> dict[str, object] | None:
    city = payload.get("donor_city")
    state = payload.get("donor_state")
    if not city or not state:
        return None
    address = f"{city}, {state} {payload.get('donor_zip') or ''}".strip()
    return {
        "address": address,
        "latitude": payload.get("latitude"),
        "longitude": payload.get("longitude"),
    }
