"""Supabase repository for notifications."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from share_foods.domain.notifications import Notification
from share_foods.services.notifications import NotificationRepository


@dataclass
class SupabaseNotificationRepository(NotificationRepository):
    """Supabase-backed notification inbox."""

    client: Client

    def list_notifications(self, user_id: UUID) -> list[Notification]:
        """Return a user's notifications, newest first."""
        response = (
            self.client.table("notifications")
            .select("*")
            .eq("user_id", str(user_id))
            .order("created_at", desc=True)
            .execute()
        )
        return [_parse_notification(row) for row in response.data or []]

    def create_notification(self, payload: dict[str, object]) -> Notification:
        """Insert a notification and return it."""
        response = self.client.table("notifications").insert(payload).execute()
        if not response.data:
            raise RuntimeError("Failed to create notification")
        return _parse_notification(response.data[0])

    def mark_read(self, notification_id: UUID) -> None:
        """Flag a notification as read."""
        self.client.table("notifications").update({"read": True}).eq(
            "id", str(notification_id)
        ).execute()


def _parse_notification(row: dict[str, object]) -> Notification:
    user_raw = row.get("user_id")
    created_raw = row.get("created_at")
    data = row.get("data")
    return Notification(
        id=UUID(str(row["id"])),
        user_id=UUID(str(user_raw)) if user_raw else None,
        title=str(row.get("title") or ""),
        message=str(row.get("message") or ""),
        type=str(row.get("type") or ""),
        read=bool(row.get("read", False)),
        data=data if isinstance(data, dict) else {},
        created_at=(
            datetime.fromisoformat(created_raw)
            if isinstance(created_raw, str) and created_raw
            else None
        ),
    )
