from __future__ import annotations

from ...core.enums import AttendanceStatus
from .base import PunchOutStrategy, StatusDecision


class EarlyLeaveStrategy(PunchOutStrategy):
    """Punch-out before the end of the workday."""

    def decide_punch_out(self) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.HALF_DAY, message="Punched out - Half Day (Early departure)")
