from __future__ import annotations

from typing import Optional

from ...attendance.model import AttendanceRecord
from ...common.datetime_utils import hours_between
from .base import WorkingHoursCalculator


class StandardWorkingHoursCalculator(WorkingHoursCalculator):
    """Standard rule: punch-out minus punch-in; open records have no hours."""

    def worked_hours(self, record: AttendanceRecord) -> Optional[float]:
        if not record.punch_out_time:
            return None
        return hours_between(record.punch_in_time, record.punch_out_time)
