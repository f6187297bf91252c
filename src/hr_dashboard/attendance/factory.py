from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, time

from .strategies.base import ClockInStrategy
from .strategies.late_strategy import LateStrategy
from .strategies.on_time_strategy import OnTimeStrategy


@dataclass
class ClockInStrategyFactory:
    """Factory Pattern: choose the clock-in strategy from the cutoff rule.

    Only hour and minute count: 09:00:59 is still on time for a 09:00 cutoff.
    """

    def for_clock_in(self, *, now: datetime, cutoff: time) -> ClockInStrategy:
        if (now.hour, now.minute) > (cutoff.hour, cutoff.minute):
            return LateStrategy()
        return OnTimeStrategy()
