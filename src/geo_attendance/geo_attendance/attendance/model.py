from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..common.geo import GeoPoint
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one employee's attendance for one calendar day."""

    attendance_id: int
    user_id: int
    work_date: date
    punch_in_time: datetime
    punch_in_location: GeoPoint
    distance: int
    status: AttendanceStatus
    punch_out_time: Optional[datetime] = None
    punch_out_location: Optional[GeoPoint] = None
    working_hours: Optional[float] = None

    @property
    def is_open(self) -> bool:
        return self.punch_out_time is None

    def as_dict(self) -> dict:
        return {
            "id": self.attendance_id,
            "user_id": self.user_id,
            "date": self.work_date.strftime("%Y-%m-%d"),
            "punch_in": self.punch_in_time.isoformat(),
            "punch_out": self.punch_out_time.isoformat() if self.punch_out_time else None,
            "location": self.punch_in_location.as_dict(),
            "punch_out_location": self.punch_out_location.as_dict() if self.punch_out_location else None,
            "distance": self.distance,
            "status": self.status.value,
            "working_hours": self.working_hours,
        }


@dataclass(frozen=True)
class AttendanceReportRow:
    """Read-model for listings and exports (record joined with the user)."""

    record: AttendanceRecord
    full_name: str
    username: Optional[str] = None
