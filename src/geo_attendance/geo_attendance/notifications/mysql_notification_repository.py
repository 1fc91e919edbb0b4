from __future__ import annotations

from datetime import datetime
from typing import Sequence

from ..core.enums import NotificationKind
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import Notification
from .repository import NotificationRepository


class MySQLNotificationRepository(NotificationRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(self, *, user_id: int, message: str, kind: NotificationKind, created_at: datetime) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO notifications(user_id, message, kind, created_at, is_read)
                VALUES(%s,%s,%s,%s,0)
                """,
                (user_id, message, kind.value, created_at),
            )
            return int(cur.lastrowid)

    def list_for_user(self, user_id: int) -> Sequence[Notification]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT notification_id, user_id, message, kind, created_at, is_read
                FROM notifications
                WHERE user_id=%s
                ORDER BY created_at DESC, notification_id DESC
                """,
                (user_id,),
            )
            return [
                Notification(
                    notification_id=int(r["notification_id"]),
                    user_id=int(r["user_id"]),
                    message=r["message"],
                    kind=NotificationKind(r["kind"]),
                    created_at=r["created_at"],
                    is_read=bool(r["is_read"]),
                )
                for r in fetchall(cur)
            ]

    def mark_read(self, notification_id: int, user_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE notifications SET is_read=1 WHERE notification_id=%s AND user_id=%s AND is_read=0",
                (notification_id, user_id),
            )
            return cur.rowcount > 0
