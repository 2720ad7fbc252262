"""Domain models for impact reporting."""

import math
from dataclasses import dataclass, field
from datetime import date, datetime
from uuid import UUID


@dataclass(frozen=True)
class ImpactRecord:
    """A single manual impact entry."""

    date: date | None
    food_saved_kg: float = 0.0
    people_helped: int = 0
    meals_provided: float = 0.0
    co2_reduced_kg: float = 0.0
    waste_diverted_kg: float = 0.0
    volunteer_hours: float = 0.0
    partner_organizations: int = 0
    notes: str | None = None
    id: UUID | None = None

    @classmethod
    def from_row(cls, row: dict[str, object]) -> "ImpactRecord":
        """Parse a database row, treating bad numbers as zero."""
        raw_id = row.get("id")
        return cls(
            id=UUID(str(raw_id)) if raw_id else None,
            date=_parse_date(row.get("date")),
            food_saved_kg=to_float(row.get("food_saved_kg")),
            people_helped=to_int(row.get("people_helped")),
            meals_provided=to_float(row.get("meals_provided")),
            co2_reduced_kg=to_float(row.get("co2_reduced_kg")),
            waste_diverted_kg=to_float(row.get("waste_diverted_kg")),
            volunteer_hours=to_float(row.get("volunteer_hours")),
            partner_organizations=to_int(row.get("partner_organizations")),
            notes=row.get("notes") or None,
        )


@dataclass(frozen=True)
class ImpactTotals:
    """Aggregated impact across many records."""

    total_meals: float = 0.0
    food_saved_kg: float = 0.0
    people_helped: int = 0
    waste_reduced_kg: float = 0.0
    co2_saved_kg: float = 0.0
    volunteer_hours: float = 0.0
    partner_organizations: int = 0


@dataclass(frozen=True)
class ClaimImpact:
    """Impact derived from listings and approved claims."""

    food_waste_reduced: float
    total_food_shared: float
    neighbors_helped: int
    donors_count: int
    people: int
    school_staff: int
    students: int
    co2_reduction: float
    lives_impacted: int
    sharing_count: int
    active_listings: int
    category_distribution: dict[str, int] = field(default_factory=dict)
    last_updated: datetime | None = None


def to_float(value: object) -> float:
    """Coerce a loosely typed value to a finite float, defaulting to zero."""
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return 0.0
    return number if math.isfinite(number) else 0.0


def to_int(value: object) -> int:
    """Coerce a loosely typed value to an int, truncating fractions."""
    return int(to_float(value))


def _parse_date(value: object) -> date | None:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and value:
        try:
            return date.fromisoformat(value[:10])
        except ValueError:
            return None
    return None
