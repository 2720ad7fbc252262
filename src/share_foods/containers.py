"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from share_foods.adapters.openai_assistant_client import OpenAIAssistantClient
from share_foods.adapters.supabase_admin_repository import SupabaseAdminRepository
from share_foods.adapters.supabase_claim_repository import SupabaseClaimRepository
from share_foods.adapters.supabase_file_storage import SupabaseFileStorage
from share_foods.adapters.supabase_impact_repository import (
    SupabaseImpactRepository,
)
from share_foods.adapters.supabase_listing_repository import (
    SupabaseListingRepository,
)
from share_foods.adapters.supabase_notification_repository import (
    SupabaseNotificationRepository,
)
from share_foods.config import Settings
from share_foods.services.admin import AdminService
from share_foods.services.assistant import AssistantService
from share_foods.services.claims import ClaimService
from share_foods.services.impact import ImpactService
from share_foods.services.listings import ListingService
from share_foods.services.notifications import NotificationService
from share_foods.services.storage import StorageService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    listing_service: ListingService
    claim_service: ClaimService
    impact_service: ImpactService
    notification_service: NotificationService
    storage_service: StorageService
    admin_service: AdminService
    assistant_service: AssistantService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    listing_repository = SupabaseListingRepository(supabase_client)
    claim_repository = SupabaseClaimRepository(supabase_client)
    notification_service = NotificationService(
        SupabaseNotificationRepository(supabase_client)
    )
    listing_service = ListingService(
        repository=listing_repository,
        notification_service=notification_service,
        default_radius_km=resolved_settings.default_radius_km,
    )
    claim_service = ClaimService(
        repository=claim_repository,
        notification_service=notification_service,
    )
    impact_service = ImpactService(
        repository=SupabaseImpactRepository(supabase_client),
        claim_repository=claim_repository,
        listing_repository=listing_repository,
    )
    storage_service = StorageService(
        storage=SupabaseFileStorage(supabase_client),
        bucket=resolved_settings.storage_bucket,
    )
    admin_service = AdminService(SupabaseAdminRepository(supabase_client))
    assistant_client = OpenAIAssistantClient.create(
        api_key=resolved_settings.assistant_api_key,
        base_url=resolved_settings.assistant_base_url,
    )
    assistant_service = AssistantService(
        client=assistant_client,
        model=resolved_settings.assistant_model,
    )

    async def close_resources() -> None:
        await assistant_client.close()

    return AppContainer(
        settings=resolved_settings,
        listing_service=listing_service,
        claim_service=claim_service,
        impact_service=impact_service,
        notification_service=notification_service,
        storage_service=storage_service,
        admin_service=admin_service,
        assistant_service=assistant_service,
        close_resources=close_resources,
    )
