from __future__ import annotations

from datetime import datetime, time

from ...core.enums import AttendanceStatus
from .base import ClockInStrategy, StatusDecision


class OnTimeStrategy(ClockInStrategy):
    """Clock-in at or before the cutoff minute."""

    def decide(self, *, now: datetime, cutoff: time) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.PRESENT)
