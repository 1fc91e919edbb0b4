from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from ..common.geo import GeoPoint
from ..core.enums import AttendanceStatus
from .model import AttendanceRecord, AttendanceReportRow


class AttendanceRepository(Protocol):
    def get_for_user_and_date(self, user_id: int, work_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def list_for_user(self, user_id: int) -> Sequence[AttendanceRecord]:
        """All records of a user, newest work date first."""
        raise NotImplementedError

    def create_punch_in(
        self,
        *,
        user_id: int,
        work_date: date,
        punch_in_time: datetime,
        location: GeoPoint,
        distance: int,
        status: AttendanceStatus,
    ) -> int:
        raise NotImplementedError

    def update_punch_out(
        self,
        *,
        attendance_id: int,
        punch_out_time: datetime,
        location: GeoPoint,
        status: AttendanceStatus,
        working_hours: float,
    ) -> bool:
        """Close an open record. Returns False if it was already closed."""
        raise NotImplementedError

    def get_report_rows(
        self,
        *,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> Sequence[AttendanceReportRow]:
        raise NotImplementedError
