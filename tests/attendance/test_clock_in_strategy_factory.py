from datetime import datetime, time

from hr_dashboard.attendance.factory import ClockInStrategyFactory
from hr_dashboard.attendance.strategies.late_strategy import LateStrategy
from hr_dashboard.attendance.strategies.on_time_strategy import OnTimeStrategy
from hr_dashboard.core.enums import AttendanceStatus


def test_factory_on_time_within_cutoff_minute():
    factory = ClockInStrategyFactory()
    now = datetime(2025, 1, 1, 9, 0, 59)

    strategy = factory.for_clock_in(now=now, cutoff=time(9, 0))

    assert isinstance(strategy, OnTimeStrategy)
    assert strategy.decide(now=now, cutoff=time(9, 0)).status == AttendanceStatus.PRESENT


def test_factory_late_after_cutoff():
    factory = ClockInStrategyFactory()
    now = datetime(2025, 1, 1, 9, 1, 0)

    strategy = factory.for_clock_in(now=now, cutoff=time(9, 0))

    assert isinstance(strategy, LateStrategy)
    assert strategy.decide(now=now, cutoff=time(9, 0)).status == AttendanceStatus.LATE


def test_factory_late_in_the_afternoon():
    factory = ClockInStrategyFactory()

    strategy = factory.for_clock_in(now=datetime(2025, 1, 1, 14, 0), cutoff=time(9, 0))

    assert isinstance(strategy, LateStrategy)
