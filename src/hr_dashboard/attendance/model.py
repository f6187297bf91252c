from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..common.datetime_utils import parse_clock_time, parse_iso_date
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one clock-in (and optional clock-out) for a day.

    ``date`` is YYYY-MM-DD, clock times are HH:MM:SS local time.
    """

    id: str
    user_id: str
    date: str
    clock_in: str
    status: AttendanceStatus
    clock_out: Optional[str] = None
    employee_name: Optional[str] = None

    @property
    def clocked_out(self) -> bool:
        return self.clock_out is not None

    def to_dict(self) -> dict:
        data = {
            "id": self.id,
            "userId": self.user_id,
            "date": self.date,
            "clockIn": self.clock_in,
            "status": self.status.value,
        }
        if self.clock_out is not None:
            data["clockOut"] = self.clock_out
        if self.employee_name is not None:
            data["employeeName"] = self.employee_name
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "AttendanceRecord":
        """Raises ValueError for dates or clock times that do not parse."""
        clock_out = data.get("clockOut") or None
        parse_iso_date(str(data["date"]))
        parse_clock_time(str(data["clockIn"]))
        if clock_out is not None:
            parse_clock_time(str(clock_out))

        return cls(
            id=str(data["id"]),
            user_id=str(data["userId"]),
            date=str(data["date"]),
            clock_in=str(data["clockIn"]),
            status=AttendanceStatus(data["status"]),
            clock_out=clock_out,
            employee_name=data.get("employeeName"),
        )


@dataclass(frozen=True)
class DailyCounts:
    """Read-model for the admin summary of one day."""

    present: int
    late: int
    absent: int
    clocked_in: int
    clocked_out: int
