"""Notification inbox service."""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol
from uuid import UUID

from share_foods.domain.notifications import Notification

if TYPE_CHECKING:
    from share_foods.domain.listings import FoodClaim, FoodListing

_logger = logging.getLogger(__name__)


class NotificationRepository(Protocol):
    """Persistence interface for notifications."""

    def list_notifications(self, user_id: UUID) -> list[Notification]:
        """Return a user's notifications, newest first."""

    def create_notification(self, payload: dict[str, object]) -> Notification:
        """Insert a notification and return it."""

    def mark_read(self, notification_id: UUID) -> None:
        """Flag a notification as read."""


@dataclass
class NotificationService:
    """Service for user notifications."""

    repository: NotificationRepository

    def list_for_user(self, user_id: UUID) -> list[Notification]:
        """Return a user's notifications."""
        return self.repository.list_notifications(user_id)

    def mark_read(self, notification_id: UUID) -> None:
        """Mark a notification as read."""
        self.repository.mark_read(notification_id)

    def create(  # noqa: PLR0913
        self,
        user_id: UUID | None,
        title: str,
        message: str,
        notification_type: str,
        data: dict[str, object] | None = None,
    ) -> Notification:
        """Create an unread notification."""
        return self.repository.create_notification(
            {
                "user_id": str(user_id) if user_id else None,
                "title": title,
                "message": message,
                "type": notification_type,
                "read": False,
                "data": data or {},
            }
        )

    def notify_listing_declined(self, listing: "FoodListing") -> bool:
        """Tell a listing owner their submission was declined."""
        try:
            self.create(
                user_id=listing.user_id,
                title="Food Submission Declined",
                message=(
                    f'Your food listing "{listing.title}" was not approved by the '
                    "admin. Please review the guidelines and try again."
                ),
                notification_type="submission_declined",
                data={"listingId": str(listing.id)},
            )
        except Exception:
            _logger.exception(
                "Failed to send decline notification",
                extra={"listing_id": str(listing.id)},
            )
            return False
        return True

    def notify_claim_reviewed(self, claim: "FoodClaim", approved: bool) -> bool:
        """Tell a claimer whether their claim was approved."""
        food_title = str((claim.listing or {}).get("title") or "")
        if approved:
            title = "Food Claim Approved"
            message = (
                f'Your claim for "{food_title}" has been approved! '
                "Please check your email for pickup details."
            )
        else:
            title = "Food Claim Declined"
            message = (
                f'Your claim for "{food_title}" was not approved. '
                "Please review the guidelines and try again."
            )
        try:
            self.create(
                user_id=claim.user_id,
                title=title,
                message=message,
                notification_type="claim_approved" if approved else "claim_declined",
                data={"claimId": str(claim.id), "foodTitle": food_title},
            )
        except Exception:
            _logger.exception(
                "Failed to send claim review notification",
                extra={"claim_id": str(claim.id)},
            )
            return False
        return True
