"""Impact aggregation and admin data entry."""

import csv
import io
import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import UTC, date, datetime
from typing import Protocol
from uuid import UUID

from share_foods.domain.impact import ClaimImpact, ImpactRecord, ImpactTotals, to_float
from share_foods.domain.listings import APPROVED, FoodClaim, FoodListing
from share_foods.services.claims import ClaimRepository
from share_foods.services.listings import ListingRepository

# kg of CO2-equivalent avoided per unit of food kept out of landfill
CO2_PER_UNIT_SAVED = 2.5

NUMERIC_FIELDS = (
    "food_saved_kg",
    "people_helped",
    "meals_provided",
    "co2_reduced_kg",
    "waste_diverted_kg",
    "volunteer_hours",
    "partner_organizations",
)

CSV_HEADERS = [
    "Date",
    "Food Saved (kg)",
    "People Helped",
    "Meals Provided",
    "CO2 Reduced (kg)",
    "Waste Diverted (kg)",
    "Volunteer Hours",
    "Partner Orgs",
    "Notes",
]

_logger = logging.getLogger(__name__)


class ImpactRepository(Protocol):
    """Persistence interface for manual impact entries."""

    def list_records(self) -> list[ImpactRecord]:
        """Return all impact records, newest first."""

    def list_records_between(self, start: date, end: date) -> list[ImpactRecord]:
        """Return records dated within the inclusive range, oldest first."""

    def create_record(self, payload: dict[str, object]) -> ImpactRecord:
        """Insert a record and return it."""

    def update_record(
        self, record_id: UUID, payload: dict[str, object]
    ) -> ImpactRecord:
        """Update a record and return it."""

    def delete_record(self, record_id: UUID) -> None:
        """Delete a record."""


def aggregate_impact(records: Iterable[ImpactRecord]) -> ImpactTotals:
    """Sum additive metrics and keep the largest partner count."""
    totals = ImpactTotals()
    for record in records:
        totals = ImpactTotals(
            total_meals=totals.total_meals + to_float(record.meals_provided),
            food_saved_kg=totals.food_saved_kg + to_float(record.food_saved_kg),
            people_helped=totals.people_helped + int(to_float(record.people_helped)),
            waste_reduced_kg=totals.waste_reduced_kg
            + to_float(record.waste_diverted_kg),
            co2_saved_kg=totals.co2_saved_kg + to_float(record.co2_reduced_kg),
            volunteer_hours=totals.volunteer_hours + to_float(record.volunteer_hours),
            partner_organizations=max(
                totals.partner_organizations,
                int(to_float(record.partner_organizations)),
            ),
        )
    return totals


def summarize_claim_impact(
    claims: Iterable[FoodClaim], listings: Iterable[FoodListing]
) -> ClaimImpact:
    """Derive impact metrics from approved claims and all shared listings."""
    approved = [claim for claim in claims if claim.status == APPROVED]
    shared = list(listings)

    food_waste_reduced = sum(
        to_float((claim.listing or {}).get("quantity")) for claim in approved
    )
    people = sum(claim.people for claim in approved)
    school_staff = sum(claim.school_staff for claim in approved)
    students = sum(claim.students for claim in approved)

    categories: dict[str, int] = {}
    for listing in shared:
        category = listing.category or "uncategorized"
        categories[category] = categories.get(category, 0) + 1

    return ClaimImpact(
        food_waste_reduced=food_waste_reduced,
        total_food_shared=sum(to_float(listing.quantity) for listing in shared),
        neighbors_helped=len(approved),
        donors_count=len({listing.user_id for listing in shared if listing.user_id}),
        people=people,
        school_staff=school_staff,
        students=students,
        co2_reduction=food_waste_reduced * CO2_PER_UNIT_SAVED,
        lives_impacted=people + school_staff + students,
        sharing_count=len(shared),
        active_listings=sum(1 for listing in shared if listing.status == APPROVED),
        category_distribution=categories,
        last_updated=datetime.now(tz=UTC),
    )


def export_csv(records: Iterable[ImpactRecord]) -> str:
    """Render impact records as a fully quoted CSV document."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    for record in records:
        writer.writerow(
            [
                record.date.isoformat() if record.date else "",
                record.food_saved_kg,
                record.people_helped,
                record.meals_provided,
                record.co2_reduced_kg,
                record.waste_diverted_kg,
                record.volunteer_hours,
                record.partner_organizations,
                record.notes or "",
            ]
        )
    return buffer.getvalue()


@dataclass
class ImpactService:
    """Service for impact metrics and manual impact entries."""

    repository: ImpactRepository
    claim_repository: ClaimRepository
    listing_repository: ListingRepository

    def get_aggregated_impact(self) -> ImpactTotals:
        """Return totals across all records, or zeros if the backend fails."""
        try:
            records = self.repository.list_records()
        except Exception:
            _logger.exception("Failed to fetch impact records")
            return ImpactTotals()
        _logger.info("Aggregating %s impact records", len(records))
        return aggregate_impact(records)

    def get_claim_impact(self) -> ClaimImpact:
        """Return impact derived from approved claims and listings."""
        claims = self.claim_repository.list_claims(APPROVED)
        listings = self.listing_repository.list_all_listings()
        return summarize_claim_impact(claims, listings)

    def list_records(self) -> list[ImpactRecord]:
        """Return all records, newest first."""
        return self.repository.list_records()

    def list_records_between(self, start: date, end: date) -> list[ImpactRecord]:
        """Return records in an inclusive date range."""
        if start > end:
            raise ValueError("start date must not be after end date")
        return self.repository.list_records_between(start, end)

    def create_record(
        self, payload: dict[str, object], created_by: UUID | None = None
    ) -> ImpactRecord:
        """Create a manual impact entry."""
        _validate_quantities(payload)
        row = dict(payload)
        if created_by is not None:
            row["created_by"] = str(created_by)
        return self.repository.create_record(row)

    def update_record(
        self, record_id: UUID, changes: dict[str, object]
    ) -> ImpactRecord:
        """Update fields of a manual impact entry."""
        _validate_quantities(changes)
        row = {**changes, "updated_at": datetime.now(tz=UTC).isoformat()}
        return self.repository.update_record(record_id, row)

    def delete_record(self, record_id: UUID) -> None:
        """Delete a manual impact entry."""
        self.repository.delete_record(record_id)

    def export_csv(self) -> str:
        """Export every record as CSV."""
        return export_csv(self.repository.list_records())


def _validate_quantities(payload: dict[str, object]) -> None:
    for name in NUMERIC_FIELDS:
        if name in payload and to_float(payload[name]) < 0:
            raise ValueError(f"{name} must be non-negative")
