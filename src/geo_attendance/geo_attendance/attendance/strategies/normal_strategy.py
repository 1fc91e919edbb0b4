from __future__ import annotations

from ...core.enums import AttendanceStatus
from .base import PunchInStrategy, PunchOutStrategy, StatusDecision


class NormalStrategy(PunchInStrategy, PunchOutStrategy):
    """On-time punch-in, full day worked."""

    def decide_punch_in(self) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.PRESENT, message="Punched in successfully")

    def decide_punch_out(self) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.PRESENT, message="Punched out successfully - Present")


class FallbackStrategy(PunchOutStrategy):
    """Six or more hours that match none of the explicit rules.

    Only reachable with a punch-in before opening time and a punch-out after
    the end of the workday.
    """

    def decide_punch_out(self) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.PRESENT, message="Punched out successfully")
