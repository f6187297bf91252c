from __future__ import annotations

from hr_dashboard.attendance.model import AttendanceRecord
from hr_dashboard.attendance.views import daily_counts, worked_minutes, working_hours
from hr_dashboard.core.enums import AttendanceStatus


def _rec(user_id, status, clock_out=None, day="2024-01-15"):
    return AttendanceRecord(
        id=f"{user_id}-{day}",
        user_id=user_id,
        date=day,
        clock_in="08:00:00",
        status=status,
        clock_out=clock_out,
    )


def test_working_hours_in_progress_without_clock_out():
    assert working_hours("08:00:00", None) == "In progress"


def test_working_hours_formats_hours_and_minutes():
    assert working_hours("08:30:00", "17:15:30") == "8h 45m"
    assert worked_minutes("08:30:00", "17:15:30") == 525


def test_negative_span_clamps_to_zero():
    assert worked_minutes("17:00:00", "08:00:00") == 0
    assert working_hours("17:00:00", "08:00:00") == "0h 0m"


def test_daily_counts():
    records = [
        _rec("1", AttendanceStatus.PRESENT),
        _rec("2", AttendanceStatus.LATE, clock_out="17:00:00"),
        _rec("3", AttendanceStatus.ABSENT),
        _rec("4", AttendanceStatus.PRESENT, day="2024-01-14"),
    ]

    counts = daily_counts(records, "2024-01-15")

    assert counts.present == 2
    assert counts.late == 1
    assert counts.absent == 1
    assert counts.clocked_in == 1
    assert counts.clocked_out == 1


def test_daily_counts_with_total_employees():
    records = [_rec("1", AttendanceStatus.PRESENT)]

    assert daily_counts(records, "2024-01-15", total_employees=10).absent == 9
