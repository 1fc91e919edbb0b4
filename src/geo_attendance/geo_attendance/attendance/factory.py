from __future__ import annotations

from dataclasses import dataclass

from ..core.constants import (
    ABSENT_BELOW_HOURS,
    HALF_DAY_BELOW_HOURS,
    LATE_AFTER,
    PUNCH_IN_OPENS_AT,
    WORKDAY_ENDS_AT,
)
from .strategies.base import PunchInStrategy, PunchOutStrategy
from .strategies.early_strategy import EarlyLeaveStrategy
from .strategies.hours_strategy import PartialHoursStrategy, ShortHoursStrategy
from .strategies.late_strategy import LateStrategy
from .strategies.normal_strategy import FallbackStrategy, NormalStrategy


@dataclass
class AttendanceStrategyFactory:
    """Factory Pattern: choose appropriate strategy based on rules.

    All times are minutes since local midnight.
    """

    opens_at: int = PUNCH_IN_OPENS_AT
    late_after: int = LATE_AFTER
    workday_ends_at: int = WORKDAY_ENDS_AT
    absent_below_hours: float = ABSENT_BELOW_HOURS
    half_day_below_hours: float = HALF_DAY_BELOW_HOURS

    def for_punch_in(self, *, now_minutes: int) -> PunchInStrategy:
        if now_minutes > self.late_after:
            return LateStrategy()
        return NormalStrategy()

    def for_punch_out(self, *, punch_in_minutes: int, now_minutes: int, working_hours: float) -> PunchOutStrategy:
        # Rungs are evaluated top to bottom; the first match wins.
        if working_hours < self.absent_below_hours:
            return ShortHoursStrategy()
        if working_hours < self.half_day_below_hours:
            return PartialHoursStrategy()

        if punch_in_minutes > self.late_after:
            return LateStrategy()
        if self.opens_at <= punch_in_minutes <= self.late_after and now_minutes >= self.workday_ends_at:
            return NormalStrategy()
        if now_minutes < self.workday_ends_at:
            return EarlyLeaveStrategy()
        return FallbackStrategy()
