from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import now_local
from ..core.enums import NotificationKind
from .repository import NotificationRepository

logger = logging.getLogger(__name__)


class NotificationService:
    def __init__(self, notifications: NotificationRepository):
        self._notifications = notifications

    def notify(self, user_id: int, message: str, kind: NotificationKind, *, now: Optional[datetime] = None) -> int:
        return self._notifications.create(
            user_id=user_id,
            message=message,
            kind=kind,
            created_at=now or now_local(),
        )

    def list_for_user(self, user_id: int) -> list[dict]:
        return [n.as_dict() for n in self._notifications.list_for_user(user_id)]

    def mark_read(self, notification_id: int, *, user_id: int) -> None:
        # Unknown ids and other users' notifications are ignored so the UI can fire-and-forget.
        if not self._notifications.mark_read(int(notification_id), int(user_id)):
            logger.debug("notification %s not found for user %s or already read", notification_id, user_id)
