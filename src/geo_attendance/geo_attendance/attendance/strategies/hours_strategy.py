from __future__ import annotations

from ...core.enums import AttendanceStatus
from .base import PunchOutStrategy, StatusDecision


class ShortHoursStrategy(PunchOutStrategy):
    """Less than the minimum hours: the day is lost."""

    def decide_punch_out(self) -> StatusDecision:
        return StatusDecision(
            status=AttendanceStatus.ABSENT,
            message="Punched out - Marked as Absent (Less than 4 hours)",
        )


class PartialHoursStrategy(PunchOutStrategy):
    def decide_punch_out(self) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.HALF_DAY, message="Punched out - Half Day (4-6 hours worked)")
