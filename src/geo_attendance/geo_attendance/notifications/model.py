from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..core.enums import NotificationKind


@dataclass(frozen=True)
class Notification:
    notification_id: int
    user_id: int
    message: str
    kind: NotificationKind
    created_at: datetime
    is_read: bool = False

    def as_dict(self) -> dict:
        return {
            "id": self.notification_id,
            "user_id": self.user_id,
            "message": self.message,
            "type": self.kind.value,
            "timestamp": self.created_at.isoformat(),
            "read": self.is_read,
        }
