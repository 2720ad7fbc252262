"""Admin service for dashboard reporting."""

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol

from share_foods.domain.admin import AdminStats
from share_foods.domain.listings import PENDING, FoodListing


class AdminRepository(Protocol):
    """Persistence interface for admin data."""

    def count_users(self) -> int:
        """Return the number of registered users."""

    def count_listings(
        self, status: str | None = None, listing_type: str | None = None
    ) -> int:
        """Return the number of listings matching the optional filters."""

    def count_claims(self, status: str | None = None) -> int:
        """Return the number of claims matching the optional status."""

    def list_recent_listings(self, limit: int) -> list[FoodListing]:
        """Return the most recently created listings."""

    def list_recent_users(self, limit: int) -> list[dict[str, object]]:
        """Return the most recently registered users."""


@dataclass
class AdminService:
    """Service for admin dashboards."""

    admin_repository: AdminRepository

    def get_stats(self) -> AdminStats:
        """Return headline counts."""
        return AdminStats(
            total_users=self.admin_repository.count_users(),
            total_listings=self.admin_repository.count_listings(),
            pending_listings=self.admin_repository.count_listings(status=PENDING),
            pending_claims=self.admin_repository.count_claims(status=PENDING),
            total_donations=self.admin_repository.count_listings(
                listing_type="donation"
            ),
            last_updated=datetime.now(tz=UTC),
        )

    def recent_listings(self, limit: int = 10) -> list[dict[str, object]]:
        """Return recent listings for the activity feed."""
        listings = self.admin_repository.list_recent_listings(limit)
        return [_serialize_listing(listing) for listing in listings]

    def recent_users(self, limit: int = 10) -> list[dict[str, object]]:
        """Return recently registered users."""
        return self.admin_repository.list_recent_users(limit)


def _serialize_listing(listing: FoodListing) -> dict[str, object]:
    return {
        "id": str(listing.id),
        "title": listing.title,
        "status": listing.status,
        "category": listing.category,
        "quantity": listing.quantity,
        "unit": listing.unit,
        "created_at": listing.created_at.isoformat() if listing.created_at else None,
    }
