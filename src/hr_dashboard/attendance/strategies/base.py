from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, time

from ...core.enums import AttendanceStatus


@dataclass(frozen=True)
class StatusDecision:
    status: AttendanceStatus


class ClockInStrategy(ABC):
    """Strategy Pattern: encapsulate how we decide a clock-in status."""

    @abstractmethod
    def decide(self, *, now: datetime, cutoff: time) -> StatusDecision:
        raise NotImplementedError
