from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import hours_between, minutes_since_midnight, now_local
from ..common.geo import GeoPoint
from ..core.enums import SUPERVISOR_ROLES, AttendanceStatus, NotificationKind
from ..core.exceptions import DuplicatePunchInError, NoOpenPunchInError, PunchError, ValidationError
from ..notifications.service import NotificationService
from ..users.repository import UserRepository
from ..users.service import require_role
from .engine import AttendanceStatusEngine
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PunchResult:
    message: str
    status: AttendanceStatus
    distance: Optional[int] = None
    working_hours: Optional[float] = None

    def as_dict(self) -> dict:
        out = {"success": True, "message": self.message, "status": self.status.value}
        if self.distance is not None:
            out["distance"] = self.distance
        if self.working_hours is not None:
            out["working_hours"] = self.working_hours
        return out


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        users: UserRepository,
        notifications: NotificationService,
        engine: AttendanceStatusEngine,
    ):
        self._attendance = attendance
        self._users = users
        self._notifications = notifications
        self._engine = engine

    def punch_in(self, user_id: int, location: GeoPoint, *, now: Optional[datetime] = None) -> PunchResult:
        now = now or now_local()
        today = now.date()

        user = self._users.get_by_id(user_id)
        if not user:
            raise ValidationError("Employee not found")

        if self._attendance.get_for_user_and_date(user_id, today):
            raise DuplicatePunchInError()

        try:
            decision = self._engine.evaluate_punch_in(minutes_since_midnight(now), location)
        except PunchError as e:
            logger.info("punch-in rejected for user %s: %s", user_id, e)
            raise

        self._attendance.create_punch_in(
            user_id=user_id,
            work_date=today,
            punch_in_time=now,
            location=location,
            distance=decision.distance,
            status=decision.status,
        )
        self._notifications.notify(user_id, decision.message, NotificationKind.PUNCH_IN, now=now)
        logger.info("user %s punched in at %s (%sm, %s)", user_id, now.strftime("%H:%M"), decision.distance, decision.status.value)

        return PunchResult(message=decision.message, status=decision.status, distance=decision.distance)

    def punch_out(self, user_id: int, location: GeoPoint, *, now: Optional[datetime] = None) -> PunchResult:
        now = now or now_local()
        today = now.date()

        record = self._attendance.get_for_user_and_date(user_id, today)
        if not record or not record.is_open:
            raise NoOpenPunchInError()

        try:
            self._engine.check_geofence(location)
        except PunchError as e:
            logger.info("punch-out rejected for user %s: %s", user_id, e)
            raise

        working_hours = hours_between(record.punch_in_time, now)
        decision = self._engine.evaluate_punch_out(
            minutes_since_midnight(record.punch_in_time),
            minutes_since_midnight(now),
            working_hours,
        )
        rounded_hours = round(working_hours, 2)

        if not self._attendance.update_punch_out(
            attendance_id=record.attendance_id,
            punch_out_time=now,
            location=location,
            status=decision.status,
            working_hours=rounded_hours,
        ):
            raise NoOpenPunchInError()

        self._notifications.notify(user_id, decision.message, NotificationKind.PUNCH_OUT, now=now)
        logger.info("user %s punched out at %s (%.2fh, %s)", user_id, now.strftime("%H:%M"), rounded_hours, decision.status.value)

        return PunchResult(message=decision.message, status=decision.status, working_hours=rounded_hours)

    def history_for_user(self, user_id: int) -> list[dict]:
        return [r.as_dict() for r in self._attendance.list_for_user(user_id)]

    def all_records(self, *, requested_by: int) -> list[dict]:
        require_role(self._users, requested_by, SUPERVISOR_ROLES)
        out = []
        for row in self._attendance.get_report_rows():
            item = row.record.as_dict()
            item["user_name"] = row.full_name or "Unknown"
            out.append(item)
        return out
