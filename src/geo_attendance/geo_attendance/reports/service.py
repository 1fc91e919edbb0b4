from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import now_local
from ..core.constants import DEFAULT_REPORT_DAYS
from ..core.enums import SUPERVISOR_ROLES, AttendanceStatus, Role
from ..core.exceptions import ValidationError
from ..users.repository import UserRepository
from ..users.service import require_role
from .calculator.base import WorkingHoursCalculator
from .calculator.standard_calculator import StandardWorkingHoursCalculator

EXPORT_FIELDS = [
    "work_date",
    "user_id",
    "full_name",
    "punch_in",
    "punch_out",
    "distance",
    "status",
    "working_hours",
]


@dataclass(frozen=True)
class Analytics:
    total_employees: int
    present_today: int
    total_attendance_records: int
    avg_working_hours: float
    status_breakdown: dict
    daily_counts: dict

    def as_dict(self) -> dict:
        return {
            "total_employees": self.total_employees,
            "present_today": self.present_today,
            "total_attendance_records": self.total_attendance_records,
            "avg_working_hours": self.avg_working_hours,
            "status_breakdown": self.status_breakdown,
            "daily_counts": self.daily_counts,
        }


class ReportService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        users: UserRepository,
        *,
        calculator: Optional[WorkingHoursCalculator] = None,
    ):
        self._attendance = attendance
        self._users = users
        self._calculator = calculator or StandardWorkingHoursCalculator()

    def analytics(self, *, requested_by: int, today: Optional[date] = None) -> Analytics:
        require_role(self._users, requested_by, SUPERVISOR_ROLES)
        today = today or now_local().date()

        records = [row.record for row in self._attendance.get_report_rows()]

        hours = [h for h in (self._calculator.worked_hours(r) for r in records) if h is not None]
        avg_hours = round(sum(hours) / len(hours), 2) if hours else 0

        todays = [r for r in records if r.work_date == today]
        breakdown = {s.value: 0 for s in AttendanceStatus}
        for r in todays:
            breakdown[r.status.value] += 1

        # Last N days including today, oldest first.
        week_ago = today - timedelta(days=DEFAULT_REPORT_DAYS - 1)
        per_day: dict[date, int] = {}
        for r in records:
            if week_ago <= r.work_date <= today:
                per_day[r.work_date] = per_day.get(r.work_date, 0) + 1
        daily = {}
        for i in range(DEFAULT_REPORT_DAYS):
            d = week_ago + timedelta(days=i)
            daily[d.strftime("%Y-%m-%d")] = per_day.get(d, 0)

        return Analytics(
            total_employees=self._users.count_by_role(Role.EMPLOYEE),
            present_today=len(todays),
            total_attendance_records=len(records),
            avg_working_hours=avg_hours,
            status_breakdown=breakdown,
            daily_counts=daily,
        )

    def export_rows(self, *, requested_by: int, start: date, end: date) -> list[dict]:
        require_role(self._users, requested_by, SUPERVISOR_ROLES)
        if start > end:
            raise ValidationError("start must not be after end")

        out: list[dict] = []
        for row in self._attendance.get_report_rows(start_date=start, end_date=end):
            r = row.record
            hours = self._calculator.worked_hours(r)
            out.append(
                {
                    "work_date": r.work_date.strftime("%Y-%m-%d"),
                    "user_id": r.user_id,
                    "full_name": row.full_name,
                    "punch_in": r.punch_in_time.strftime("%H:%M"),
                    "punch_out": r.punch_out_time.strftime("%H:%M") if r.punch_out_time else "-",
                    "distance": r.distance,
                    "status": r.status.value,
                    "working_hours": f"{hours:.2f}" if hours is not None else "-",
                }
            )
        return out
