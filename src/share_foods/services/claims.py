"""Services for food claims."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from share_foods.domain.listings import (
    APPROVED,
    DECLINED,
    PENDING,
    STATUSES,
    FoodClaim,
)
from share_foods.services.notifications import NotificationService

_HEADCOUNT_FIELDS = ("people", "school_staff", "students", "members_count")

_logger = logging.getLogger(__name__)


class ClaimRepository(Protocol):
    """Persistence interface for food claims."""

    def list_claims(self, status: str) -> list[FoodClaim]:
        """Return claims with the given status, including listing details."""

    def get_claim(self, claim_id: UUID) -> FoodClaim | None:
        """Return a claim by id, if present."""

    def create_claim(self, payload: dict[str, object]) -> FoodClaim:
        """Insert a claim and return it."""

    def update_status(self, claim_id: UUID, status: str) -> FoodClaim:
        """Update a claim's status and return it."""


@dataclass
class ClaimService:
    """Application service for claiming listed food."""

    repository: ClaimRepository
    notification_service: NotificationService

    def create_claim(self, payload: dict[str, object]) -> FoodClaim:
        """Submit a claim for review."""
        for name in _HEADCOUNT_FIELDS:
            value = payload.get(name)
            if isinstance(value, int | float) and value < 0:
                raise ValueError(f"{name} must be non-negative")
        return self.repository.create_claim({**payload, "status": PENDING})

    def list_claims(self, status: str = PENDING) -> list[FoodClaim]:
        """Return claims in a given status."""
        _validate_status(status)
        return self.repository.list_claims(status)

    def review_claim(self, claim_id: UUID, approve: bool) -> FoodClaim:
        """Approve or decline a claim and notify the claimer."""
        status = APPROVED if approve else DECLINED
        claim = self.repository.update_status(claim_id, status)
        if claim.listing is None:
            claim = self.repository.get_claim(claim_id) or claim
        self.notification_service.notify_claim_reviewed(claim, approved=approve)
        _logger.info("Claim %s reviewed: %s", claim_id, status)
        return claim

    def set_status(self, claim_id: UUID, status: str) -> FoodClaim:
        """Move a claim to any valid status."""
        _validate_status(status)
        return self.repository.update_status(claim_id, status)


def _validate_status(status: str) -> None:
    if status not in STATUSES:
        raise ValueError(f"Unknown status: {status}")
