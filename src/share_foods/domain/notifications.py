"""Notification domain models."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class Notification:
    """A message shown in a user's notification inbox."""

    id: UUID
    user_id: UUID | None
    title: str
    message: str
    type: str
    read: bool
    data: dict[str, object]
    created_at: datetime | None
