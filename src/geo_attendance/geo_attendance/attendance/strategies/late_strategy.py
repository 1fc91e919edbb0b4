from __future__ import annotations

from ...core.enums import AttendanceStatus
from .base import PunchInStrategy, PunchOutStrategy, StatusDecision


class LateStrategy(PunchInStrategy, PunchOutStrategy):
    """Punch-in after the late threshold counts as a half day."""

    def decide_punch_in(self) -> StatusDecision:
        return StatusDecision(
            status=AttendanceStatus.HALF_DAY,
            message="Punched in successfully (Late arrival - Half day)",
        )

    def decide_punch_out(self) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.HALF_DAY, message="Punched out - Half Day (Late arrival)")
