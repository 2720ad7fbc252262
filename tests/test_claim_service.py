"""Tests for the claim workflow."""

from uuid import uuid4

import pytest

from share_foods.domain.errors import NotFoundError
from share_foods.domain.listings import APPROVED, COMPLETED, DECLINED, PENDING
from share_foods.services.claims import ClaimService
from share_foods.services.notifications import NotificationService
from tests.conftest import (
    InMemoryClaimRepository,
    InMemoryNotificationRepository,
    make_claim,
)


def _service(
    claim_repository: InMemoryClaimRepository,
    notification_repository: InMemoryNotificationRepository,
) -> ClaimService:
    return ClaimService(
        repository=claim_repository,
        notification_service=NotificationService(notification_repository),
    )


def test_create_claim_starts_pending(
    claim_repository: InMemoryClaimRepository,
    notification_repository: InMemoryNotificationRepository,
) -> None:
    food_id = uuid4()

    claim = _service(claim_repository, notification_repository).create_claim(
        {"food_id": str(food_id), "people": 4, "status": APPROVED}
    )

    assert claim.status == PENDING
    assert claim.food_id == food_id
    assert claim.people == 4


def test_create_claim_rejects_negative_headcount(
    claim_repository: InMemoryClaimRepository,
    notification_repository: InMemoryNotificationRepository,
) -> None:
    with pytest.raises(ValueError, match="students"):
        _service(claim_repository, notification_repository).create_claim(
            {"food_id": str(uuid4()), "students": -2}
        )


def test_list_claims_filters_by_status(
    claim_repository: InMemoryClaimRepository,
    notification_repository: InMemoryNotificationRepository,
) -> None:
    claim_repository.add(make_claim(status=PENDING))
    claim_repository.add(make_claim(status=APPROVED))
    service = _service(claim_repository, notification_repository)

    assert len(service.list_claims()) == 1
    assert len(service.list_claims(APPROVED)) == 1
    with pytest.raises(ValueError, match="Unknown status"):
        service.list_claims("lost")


def test_approving_a_claim_notifies_the_claimer(
    claim_repository: InMemoryClaimRepository,
    notification_repository: InMemoryNotificationRepository,
) -> None:
    claim = claim_repository.add(make_claim(listing={"title": "Fresh bread"}))

    reviewed = _service(claim_repository, notification_repository).review_claim(
        claim.id, approve=True
    )

    assert reviewed.status == APPROVED
    (notification,) = notification_repository.list_notifications(claim.user_id)
    assert notification.title == "Food Claim Approved"
    assert notification.type == "claim_approved"
    assert notification.data == {"claimId": str(claim.id), "foodTitle": "Fresh bread"}
    assert notification.read is False


def test_declining_a_claim_notifies_the_claimer(
    claim_repository: InMemoryClaimRepository,
    notification_repository: InMemoryNotificationRepository,
) -> None:
    claim = claim_repository.add(make_claim(listing={"title": "Soup"}))

    reviewed = _service(claim_repository, notification_repository).review_claim(
        claim.id, approve=False
    )

    assert reviewed.status == DECLINED
    (notification,) = notification_repository.list_notifications(claim.user_id)
    assert notification.title == "Food Claim Declined"
    assert "Soup" in notification.message


def test_review_survives_notification_failure(
    claim_repository: InMemoryClaimRepository,
    notification_repository: InMemoryNotificationRepository,
) -> None:
    claim = claim_repository.add(make_claim())
    notification_repository.fail = True

    reviewed = _service(claim_repository, notification_repository).review_claim(
        claim.id, approve=True
    )

    assert reviewed.status == APPROVED


def test_review_missing_claim_raises_not_found(
    claim_repository: InMemoryClaimRepository,
    notification_repository: InMemoryNotificationRepository,
) -> None:
    with pytest.raises(NotFoundError):
        _service(claim_repository, notification_repository).review_claim(
            uuid4(), approve=True
        )


def test_set_status_marks_claim_completed(
    claim_repository: InMemoryClaimRepository,
    notification_repository: InMemoryNotificationRepository,
) -> None:
    claim = claim_repository.add(make_claim(status=APPROVED))

    updated = _service(claim_repository, notification_repository).set_status(
        claim.id, COMPLETED
    )

    assert updated.status == COMPLETED
    assert notification_repository.notifications == {}
