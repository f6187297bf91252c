from __future__ import annotations

from datetime import datetime, time

from ...core.enums import AttendanceStatus
from .base import ClockInStrategy, StatusDecision


class LateStrategy(ClockInStrategy):
    """Late clock-in."""

    def decide(self, *, now: datetime, cutoff: time) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.LATE)
