"""Punch-in / punch-out status rules.

The engine is a pure function of the clock (minutes since local midnight),
the worked hours and the great-circle distance to the office. It knows
nothing about users or storage; ``AttendanceService`` feeds it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..common.geo import GeoPoint, OfficeLocation, distance_meters
from ..core.enums import AttendanceStatus
from ..core.exceptions import OutOfRangeError, TooEarlyError
from .factory import AttendanceStrategyFactory
from .strategies.base import StatusDecision
from .strategies.normal_strategy import FallbackStrategy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PunchInDecision:
    status: AttendanceStatus
    message: str
    distance: int
    accepted: bool = True


class AttendanceStatusEngine:
    def __init__(self, office: OfficeLocation, *, strategy_factory: Optional[AttendanceStrategyFactory] = None):
        self._office = office
        self._factory = strategy_factory or AttendanceStrategyFactory()

    @property
    def office(self) -> OfficeLocation:
        return self._office

    def check_geofence(self, location: GeoPoint) -> int:
        """Return the distance to the office, or raise if outside the radius."""
        distance = distance_meters(location, self._office.point)
        if distance > self._office.allowed_radius:
            raise OutOfRangeError(distance, self._office.allowed_radius)
        return distance

    def evaluate_punch_in(self, now_minutes: int, location: GeoPoint) -> PunchInDecision:
        distance = self.check_geofence(location)

        if now_minutes < self._factory.opens_at:
            raise TooEarlyError()

        decision = self._factory.for_punch_in(now_minutes=now_minutes).decide_punch_in()
        return PunchInDecision(status=decision.status, message=decision.message, distance=distance)

    def evaluate_punch_out(self, punch_in_minutes: int, now_minutes: int, working_hours: float) -> StatusDecision:
        strategy = self._factory.for_punch_out(
            punch_in_minutes=punch_in_minutes,
            now_minutes=now_minutes,
            working_hours=working_hours,
        )
        if isinstance(strategy, FallbackStrategy):
            logger.warning(
                "punch-out matched no explicit rule (punch_in=%s now=%s hours=%.2f); defaulting to present",
                punch_in_minutes,
                now_minutes,
                working_hours,
            )
        return strategy.decide_punch_out()
