from __future__ import annotations

from datetime import datetime
from typing import Protocol, Sequence

from ..core.enums import NotificationKind
from .model import Notification


class NotificationRepository(Protocol):
    def create(self, *, user_id: int, message: str, kind: NotificationKind, created_at: datetime) -> int:
        raise NotImplementedError

    def list_for_user(self, user_id: int) -> Sequence[Notification]:
        """Newest first."""
        raise NotImplementedError

    def mark_read(self, notification_id: int, user_id: int) -> bool:
        """Only the owner's notification is touched."""
        raise NotImplementedError
