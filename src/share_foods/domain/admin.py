"""Admin domain models."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class AdminStats:
    """Headline counts for the admin dashboard."""

    total_users: int
    total_listings: int
    pending_listings: int
    pending_claims: int
    total_donations: int
    last_updated: datetime
