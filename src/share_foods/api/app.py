"""FastAPI application factory."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import date
from uuid import UUID

from fastapi import FastAPI, HTTPException, Query, Request, status
from fastapi.encoders import jsonable_encoder

from share_foods.api.admin import router as admin_router
from share_foods.api.errors import backend_errors
from share_foods.api.schemas import (
    ChatRequest,
    ClaimCreate,
    FoodRequest,
    ImpactEstimateRequest,
    ListingCreate,
    ListingUpdate,
    RecipeRequest,
)
from share_foods.app_logging import configure_logging
from share_foods.containers import AppContainer
from share_foods.domain.geo import Coordinate
from share_foods.domain.listings import APPROVED, ListingFilters


def create_app(container: AppContainer) -> FastAPI:  # noqa: PLR0915
    """Create a FastAPI app configured with dependencies."""
    configure_logging()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="ShareFoods", lifespan=lifespan)
    app.state.container = container

    app.include_router(admin_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/impact")
    async def impact_summary(request: Request) -> dict[str, object]:
        """Return community impact totals."""
        state: AppContainer = request.app.state.container
        totals = state.impact_service.get_aggregated_impact()
        return {"impact": jsonable_encoder(totals)}

    @app.get("/impact/claims")
    async def claim_impact(request: Request) -> dict[str, object]:
        """Return impact derived from approved claims."""
        state: AppContainer = request.app.state.container
        with backend_errors(state.settings, "Couldn't calculate claim impact."):
            impact = state.impact_service.get_claim_impact()
        return {"impact": jsonable_encoder(impact)}

    @app.get("/impact/records")
    async def impact_records(
        request: Request, start: date, end: date
    ) -> dict[str, object]:
        """Return impact entries in a date range."""
        state: AppContainer = request.app.state.container
        with backend_errors(state.settings, "Couldn't load impact records."):
            records = state.impact_service.list_records_between(start, end)
        return {"records": jsonable_encoder(records)}

    @app.get("/listings")
    async def list_listings(  # noqa: PLR0913
        request: Request,
        status_filter: str = Query(default=APPROVED, alias="status"),
        category: str | None = None,
        listing_type: str | None = None,
        location: str | None = None,
        user_id: UUID | None = None,
        page: int | None = Query(default=None, ge=1),
        limit: int | None = Query(default=None, ge=1, le=100),
    ) -> dict[str, object]:
        """Return listings matching the filters."""
        state: AppContainer = request.app.state.container
        filters = ListingFilters(
            status=status_filter,
            category=category,
            listing_type=listing_type,
            location=location,
            user_id=user_id,
            page=page,
            limit=limit,
        )
        with backend_errors(state.settings, "Couldn't load listings."):
            listings = state.listing_service.list_listings(filters)
        return {"listings": jsonable_encoder(listings)}

    @app.get("/listings/search")
    async def search_listings(
        request: Request,
        q: str = "",
        category: str | None = None,
        listing_type: str | None = None,
    ) -> dict[str, object]:
        """Search approved listings by title or description."""
        state: AppContainer = request.app.state.container
        filters = ListingFilters(category=category, listing_type=listing_type)
        with backend_errors(state.settings, "Couldn't search listings.", term=q):
            listings = state.listing_service.search(q, filters)
        return {"listings": jsonable_encoder(listings)}

    @app.get("/listings/nearby")
    async def nearby_listings(  # noqa: PLR0913
        request: Request,
        lat: float | None = None,
        lng: float | None = None,
        radius_km: float | None = Query(default=None, ge=0),
        category: str | None = None,
        listing_type: str | None = None,
    ) -> dict[str, object]:
        """Return approved listings near a point, nearest first."""
        state: AppContainer = request.app.state.container
        origin = Coordinate.parse(lat, lng)
        filters = ListingFilters(category=category, listing_type=listing_type)
        with backend_errors(state.settings, "Couldn't load nearby listings."):
            nearby = state.listing_service.find_nearby(origin, radius_km, filters)
        return {
            "listings": [
                {
                    **jsonable_encoder(entry.listing),
                    "distance_km": round(entry.distance_km, 2),
                }
                for entry in nearby
            ]
        }

    @app.get("/listings/{listing_id}")
    async def get_listing(listing_id: UUID, request: Request) -> dict[str, object]:
        """Return a single listing."""
        state: AppContainer = request.app.state.container
        with backend_errors(state.settings, "Couldn't load listing."):
            listing = state.listing_service.get_listing(listing_id)
        if listing is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return jsonable_encoder(listing)

    @app.post("/listings", status_code=status.HTTP_201_CREATED)
    async def create_listing(
        payload: ListingCreate, request: Request
    ) -> dict[str, object]:
        """Share a new food listing for moderation."""
        state: AppContainer = request.app.state.container
        data = payload.model_dump(exclude={"user_id"}, exclude_none=True, mode="json")
        with backend_errors(
            state.settings, "Couldn't create listing.", user_id=payload.user_id
        ):
            listing = state.listing_service.create_listing(payload.user_id, data)
        return jsonable_encoder(listing)

    @app.patch("/listings/{listing_id}")
    async def update_listing(
        listing_id: UUID, payload: ListingUpdate, request: Request
    ) -> dict[str, object]:
        """Edit a listing."""
        state: AppContainer = request.app.state.container
        changes = payload.model_dump(exclude_unset=True, mode="json")
        with backend_errors(
            state.settings, "Couldn't update listing.", listing_id=listing_id
        ):
            listing = state.listing_service.update_listing(listing_id, changes)
        return jsonable_encoder(listing)

    @app.delete("/listings/{listing_id}")
    async def delete_listing(listing_id: UUID, request: Request) -> dict[str, str]:
        """Remove a listing."""
        state: AppContainer = request.app.state.container
        with backend_errors(
            state.settings, "Couldn't delete listing.", listing_id=listing_id
        ):
            state.listing_service.delete_listing(listing_id)
        return {"status": "ok"}

    @app.post("/claims", status_code=status.HTTP_201_CREATED)
    async def create_claim(payload: ClaimCreate, request: Request) -> dict[str, object]:
        """Request to receive a listed food item."""
        state: AppContainer = request.app.state.container
        with backend_errors(
            state.settings, "Couldn't submit claim.", food_id=payload.food_id
        ):
            claim = state.claim_service.create_claim(
                payload.model_dump(exclude_none=True, mode="json")
            )
        return jsonable_encoder(claim)

    @app.get("/users/{user_id}/notifications")
    async def list_notifications(user_id: UUID, request: Request) -> dict[str, object]:
        """Return a user's notifications."""
        state: AppContainer = request.app.state.container
        with backend_errors(state.settings, "Couldn't load notifications."):
            notifications = state.notification_service.list_for_user(user_id)
        return {"notifications": jsonable_encoder(notifications)}

    @app.post("/notifications/{notification_id}/read")
    async def mark_notification_read(
        notification_id: UUID, request: Request
    ) -> dict[str, str]:
        """Mark a notification as read."""
        state: AppContainer = request.app.state.container
        with backend_errors(state.settings, "Couldn't update notification."):
            state.notification_service.mark_read(notification_id)
        return {"status": "ok"}

    @app.post("/uploads", status_code=status.HTTP_201_CREATED)
    async def upload_file(
        request: Request, filename: str, bucket: str | None = None
    ) -> dict[str, str]:
        """Store the raw request body and return its public URL."""
        state: AppContainer = request.app.state.container
        content = await request.body()
        content_type = request.headers.get("content-type", "application/octet-stream")
        with backend_errors(state.settings, "Couldn't upload file.", filename=filename):
            url = state.storage_service.upload_file(
                filename, content, content_type, bucket=bucket
            )
        return {"url": url}

    @app.post("/assistant/chat")
    async def assistant_chat(payload: ChatRequest, request: Request) -> dict[str, str]:
        """Ask Nourish a question."""
        state: AppContainer = request.app.state.container
        with backend_errors(state.settings, "The assistant is unavailable."):
            reply = await state.assistant_service.chat(payload.message, payload.context)
        return {"reply": reply}

    @app.post("/assistant/recipes")
    async def assistant_recipes(
        payload: RecipeRequest, request: Request
    ) -> dict[str, str]:
        """Suggest recipes for leftover ingredients."""
        state: AppContainer = request.app.state.container
        with backend_errors(state.settings, "The assistant is unavailable."):
            reply = await state.assistant_service.recipe_suggestions(
                payload.ingredients
            )
        return {"reply": reply}

    @app.post("/assistant/storage-tips")
    async def assistant_storage_tips(
        payload: FoodRequest, request: Request
    ) -> dict[str, str]:
        """Explain how to store a food."""
        state: AppContainer = request.app.state.container
        with backend_errors(state.settings, "The assistant is unavailable."):
            reply = await state.assistant_service.storage_tips(payload.food)
        return {"reply": reply}

    @app.post("/assistant/pairings")
    async def assistant_pairings(
        payload: FoodRequest, request: Request
    ) -> dict[str, str]:
        """Suggest food pairings."""
        state: AppContainer = request.app.state.container
        with backend_errors(state.settings, "The assistant is unavailable."):
            reply = await state.assistant_service.food_pairings(payload.food)
        return {"reply": reply}

    @app.post("/assistant/impact")
    async def assistant_impact(
        payload: ImpactEstimateRequest, request: Request
    ) -> dict[str, str]:
        """Estimate the environmental benefit of saving food."""
        state: AppContainer = request.app.state.container
        with backend_errors(state.settings, "The assistant is unavailable."):
            reply = await state.assistant_service.environmental_impact(
                payload.food_type, payload.quantity, payload.unit
            )
        return {"reply": reply}

    return app
