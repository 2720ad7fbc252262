"""Domain models for food listings and claims."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from share_foods.domain.geo import Coordinate

PENDING = "pending"
APPROVED = "approved"
DECLINED = "declined"
COMPLETED = "completed"
STATUSES = frozenset({PENDING, APPROVED, DECLINED, COMPLETED})


@dataclass(frozen=True)
class FoodListing:
    """A posted food item available for claim."""

    id: UUID
    user_id: UUID | None
    title: str
    description: str | None
    image_url: str | None
    quantity: float
    unit: str | None
    category: str | None
    listing_type: str | None
    status: str
    expiry_date: str | None
    location: dict[str, object] | None
    donor_city: str | None
    donor_state: str | None
    donor_zip: str | None
    donor_type: str | None
    latitude: float | None
    longitude: float | None
    created_at: datetime | None

    @property
    def coordinate(self) -> Coordinate | None:
        """Return the listing's pickup point, falling back to its location."""
        coordinate = Coordinate.parse(self.latitude, self.longitude)
        if coordinate is None and self.location:
            coordinate = Coordinate.parse(
                self.location.get("latitude"), self.location.get("longitude")
            )
        return coordinate


@dataclass(frozen=True)
class NearbyListing:
    """A listing annotated with its distance from a search origin."""

    listing: FoodListing
    distance_km: float


@dataclass(frozen=True)
class FoodClaim:
    """A request by a user to receive a listed food item."""

    id: UUID
    food_id: UUID | None
    user_id: UUID | None
    requester_name: str | None
    requester_email: str | None
    status: str
    people: int
    school_staff: int
    students: int
    members_count: int
    created_at: datetime | None
    listing: dict[str, object] | None = None


@dataclass(frozen=True)
class ListingFilters:
    """Query filters for listing lookups."""

    status: str = APPROVED
    category: str | None = None
    listing_type: str | None = None
    location: str | None = None
    user_id: UUID | None = None
    page: int | None = None
    limit: int | None = None
