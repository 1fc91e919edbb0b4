from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from ...core.enums import AttendanceStatus


@dataclass(frozen=True)
class StatusDecision:
    status: AttendanceStatus
    message: str


class PunchInStrategy(ABC):
    """Strategy Pattern: decide the provisional status at punch-in."""

    @abstractmethod
    def decide_punch_in(self) -> StatusDecision:
        raise NotImplementedError


class PunchOutStrategy(ABC):
    """Strategy Pattern: decide the final status at punch-out."""

    @abstractmethod
    def decide_punch_out(self) -> StatusDecision:
        raise NotImplementedError
