"""Derived attendance values. Pure functions, recomputed on every call."""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, Optional

from ..common.datetime_utils import parse_clock_time
from ..core.constants import IN_PROGRESS
from ..core.enums import AttendanceStatus
from .model import AttendanceRecord, DailyCounts


def worked_minutes(clock_in: str, clock_out: Optional[str]) -> int:
    if not clock_out:
        return 0
    day = datetime(2000, 1, 1).date()
    start = datetime.combine(day, parse_clock_time(clock_in))
    end = datetime.combine(day, parse_clock_time(clock_out))
    minutes = int((end - start).total_seconds() // 60)
    return max(minutes, 0)


def working_hours(clock_in: str, clock_out: Optional[str]) -> str:
    """``"8h 30m"``, or ``"In progress"`` while not clocked out."""
    if not clock_out:
        return IN_PROGRESS
    minutes = worked_minutes(clock_in, clock_out)
    return f"{minutes // 60}h {minutes % 60}m"


def daily_counts(
    records: Iterable[AttendanceRecord],
    work_date: str,
    *,
    total_employees: Optional[int] = None,
) -> DailyCounts:
    day = [r for r in records if r.date == work_date]

    late = sum(1 for r in day if r.status == AttendanceStatus.LATE)
    present = sum(1 for r in day if r.status in (AttendanceStatus.PRESENT, AttendanceStatus.LATE))
    absent = sum(1 for r in day if r.status == AttendanceStatus.ABSENT)
    clocked_in = sum(1 for r in day if not r.clocked_out and r.status != AttendanceStatus.ABSENT)
    clocked_out = sum(1 for r in day if r.clocked_out)

    if total_employees is not None:
        attended = len({r.user_id for r in day if r.status != AttendanceStatus.ABSENT})
        absent = max(int(total_employees) - attended, absent)

    return DailyCounts(
        present=present,
        late=late,
        absent=absent,
        clocked_in=clocked_in,
        clocked_out=clocked_out,
    )


def to_row(record: AttendanceRecord) -> dict:
    return {
        "id": record.id,
        "userId": record.user_id,
        "employeeName": record.employee_name or "-",
        "date": record.date,
        "clockIn": record.clock_in,
        "clockOut": record.clock_out or "-",
        "status": record.status.value,
        "workingHours": working_hours(record.clock_in, record.clock_out),
    }
