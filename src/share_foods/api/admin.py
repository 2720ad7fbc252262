"""Admin API endpoints with simple token auth."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Header, HTTPException, Query, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import PlainTextResponse

from share_foods.api.errors import backend_errors
from share_foods.api.schemas import (  # noqa: TC001
    ClaimReview,
    ImpactRecordCreate,
    ImpactRecordUpdate,
    StatusUpdate,
)
from share_foods.domain.listings import PENDING, ListingFilters
from share_foods.services.impact import aggregate_impact

if TYPE_CHECKING:
    from share_foods.containers import AppContainer

router = APIRouter(prefix="/admin", tags=["admin"])


def _get_admin_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.admin_token


async def require_admin(
    x_admin_token: str | None = Header(default=None),
    admin_token: str = Depends(_get_admin_token),
) -> None:
    """Ensure requests include a valid admin token."""
    if not x_admin_token or x_admin_token != admin_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


@router.get("/health", dependencies=[Depends(require_admin)])
async def admin_health() -> dict[str, str]:
    """Admin health check endpoint."""
    return {"status": "ok"}


@router.get("/stats", dependencies=[Depends(require_admin)])
async def admin_stats(request: Request, limit: int = 10) -> dict[str, object]:
    """Return dashboard counts with recent activity."""
    container: AppContainer = request.app.state.container
    with backend_errors(container.settings, "Couldn't load admin stats."):
        stats = container.admin_service.get_stats()
        recent_listings = container.admin_service.recent_listings(limit)
        recent_users = container.admin_service.recent_users(limit)
    return {
        "stats": jsonable_encoder(stats),
        "recent_listings": recent_listings,
        "recent_users": jsonable_encoder(recent_users),
    }


@router.get("/listings", dependencies=[Depends(require_admin)])
async def moderation_queue(
    request: Request, status_filter: str = Query(default=PENDING, alias="status")
) -> dict[str, object]:
    """Return listings awaiting moderation."""
    container: AppContainer = request.app.state.container
    with backend_errors(container.settings, "Couldn't load listings."):
        listings = container.listing_service.list_listings(
            ListingFilters(status=status_filter)
        )
    return {"listings": jsonable_encoder(listings)}


@router.post("/listings/{listing_id}/status", dependencies=[Depends(require_admin)])
async def moderate_listing(
    listing_id: UUID, payload: StatusUpdate, request: Request
) -> dict[str, object]:
    """Approve, decline or complete a listing."""
    container: AppContainer = request.app.state.container
    with backend_errors(
        container.settings, "Couldn't update listing status.", listing_id=listing_id
    ):
        listing = container.listing_service.set_status(listing_id, payload.status)
    return jsonable_encoder(listing)


@router.get("/claims", dependencies=[Depends(require_admin)])
async def list_claims(
    request: Request, status_filter: str = Query(default=PENDING, alias="status")
) -> dict[str, object]:
    """Return claims in a status, pending by default."""
    container: AppContainer = request.app.state.container
    with backend_errors(container.settings, "Couldn't load claims."):
        claims = container.claim_service.list_claims(status_filter)
    return {"claims": jsonable_encoder(claims)}


@router.post("/claims/{claim_id}/review", dependencies=[Depends(require_admin)])
async def review_claim(
    claim_id: UUID, payload: ClaimReview, request: Request
) -> dict[str, object]:
    """Approve or decline a claim."""
    container: AppContainer = request.app.state.container
    with backend_errors(
        container.settings, "Couldn't review claim.", claim_id=claim_id
    ):
        claim = container.claim_service.review_claim(claim_id, payload.approve)
    return jsonable_encoder(claim)


@router.post("/claims/{claim_id}/status", dependencies=[Depends(require_admin)])
async def set_claim_status(
    claim_id: UUID, payload: StatusUpdate, request: Request
) -> dict[str, object]:
    """Move a claim to any valid status."""
    container: AppContainer = request.app.state.container
    with backend_errors(
        container.settings, "Couldn't update claim status.", claim_id=claim_id
    ):
        claim = container.claim_service.set_status(claim_id, payload.status)
    return jsonable_encoder(claim)


@router.get("/impact", dependencies=[Depends(require_admin)])
async def list_impact_records(request: Request) -> dict[str, object]:
    """Return every impact entry with the current totals."""
    container: AppContainer = request.app.state.container
    with backend_errors(container.settings, "Couldn't load impact data."):
        records = container.impact_service.list_records()
    totals = aggregate_impact(records)
    return {
        "records": jsonable_encoder(records),
        "totals": jsonable_encoder(totals),
    }


@router.post(
    "/impact",
    dependencies=[Depends(require_admin)],
    status_code=status.HTTP_201_CREATED,
)
async def create_impact_record(
    payload: ImpactRecordCreate, request: Request
) -> dict[str, object]:
    """Add a manual impact entry."""
    container: AppContainer = request.app.state.container
    data = payload.model_dump(exclude={"created_by"}, mode="json")
    with backend_errors(container.settings, "Couldn't add impact entry."):
        record = container.impact_service.create_record(data, payload.created_by)
    return jsonable_encoder(record)


@router.patch("/impact/{record_id}", dependencies=[Depends(require_admin)])
async def update_impact_record(
    record_id: UUID, payload: ImpactRecordUpdate, request: Request
) -> dict[str, object]:
    """Edit a manual impact entry."""
    container: AppContainer = request.app.state.container
    changes = payload.model_dump(exclude_unset=True, mode="json")
    with backend_errors(
        container.settings, "Couldn't update impact entry.", record_id=record_id
    ):
        record = container.impact_service.update_record(record_id, changes)
    return jsonable_encoder(record)


@router.delete("/impact/{record_id}", dependencies=[Depends(require_admin)])
async def delete_impact_record(record_id: UUID, request: Request) -> dict[str, str]:
    """Delete a manual impact entry."""
    container: AppContainer = request.app.state.container
    with backend_errors(
        container.settings, "Couldn't delete impact entry.", record_id=record_id
    ):
        container.impact_service.delete_record(record_id)
    return {"status": "ok"}


@router.get("/impact/export", dependencies=[Depends(require_admin)])
async def export_impact(request: Request) -> PlainTextResponse:
    """Download impact entries as CSV."""
    container: AppContainer = request.app.state.container
    with backend_errors(container.settings, "Couldn't export impact data."):
        document = container.impact_service.export_csv()
    return PlainTextResponse(
        document,
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="impact_data.csv"'},
    )
