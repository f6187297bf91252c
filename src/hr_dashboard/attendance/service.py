from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date, datetime, time
from typing import Optional, Sequence

from ..common.datetime_utils import format_clock, format_date, now_local
from ..common.ids import new_record_id
from ..core.constants import DEFAULT_LATE_CUTOFF
from ..core.enums import Role
from ..core.exceptions import ValidationError
from ..records.store import RecordStore, Viewer
from ..users.repository import IdentityDirectory
from .factory import ClockInStrategyFactory
from .model import AttendanceRecord, DailyCounts
from .views import daily_counts

logger = logging.getLogger(__name__)


class AttendanceService:
    def __init__(
        self,
        attendance: RecordStore[AttendanceRecord],
        directory: IdentityDirectory,
        *,
        strategy_factory: ClockInStrategyFactory | None = None,
        late_cutoff: time = DEFAULT_LATE_CUTOFF,
    ):
        self._attendance = attendance
        self._directory = directory
        self._factory = strategy_factory or ClockInStrategyFactory()
        self._late_cutoff = late_cutoff

    def clock_in(self, viewer: Viewer, *, now: datetime | None = None) -> AttendanceRecord:
        now = now or now_local()
        today = format_date(now.date())

        if self._find(viewer.user_id, today):
            raise ValidationError("You have already clocked in today")

        strategy = self._factory.for_clock_in(now=now, cutoff=self._late_cutoff)
        decision = strategy.decide(now=now, cutoff=self._late_cutoff)

        identity = self._directory.get_by_id(viewer.user_id)
        record = AttendanceRecord(
            id=new_record_id(),
            user_id=viewer.user_id,
            date=today,
            clock_in=format_clock(now),
            status=decision.status,
            employee_name=identity.full_name if identity else None,
        )
        self._attendance.append(record)
        logger.info("user %s clocked in at %s (%s)", viewer.user_id, record.clock_in, record.status.value)
        return record

    def clock_out(self, viewer: Viewer, *, now: datetime | None = None) -> AttendanceRecord:
        now = now or now_local()
        today = format_date(now.date())

        record = self._find(viewer.user_id, today)
        if not record:
            raise ValidationError("You have not clocked in today")
        if record.clocked_out:
            raise ValidationError("You have already clocked out today")

        updated = self._attendance.replace(record.id, lambda r: replace(r, clock_out=format_clock(now)))
        logger.info("user %s clocked out at %s", viewer.user_id, updated.clock_out)
        return updated

    def list_for_date(self, viewer: Viewer, work_date: date) -> Sequence[AttendanceRecord]:
        day = format_date(work_date)
        return [r for r in self._attendance.load_visible(viewer) if r.date == day]

    def today_record(self, viewer: Viewer, *, today: date | None = None) -> Optional[AttendanceRecord]:
        """Get today's attendance record for the viewer"""
        today = today or now_local().date()
        return self._find(viewer.user_id, format_date(today))

    def daily_summary(self, viewer: Viewer, work_date: date) -> DailyCounts:
        records = self.list_for_date(viewer, work_date)
        total = len(self._directory.list_by_role(Role.EMPLOYEE)) if viewer.is_admin else 1
        return daily_counts(records, format_date(work_date), total_employees=total)

    def _find(self, user_id: str, day: str) -> Optional[AttendanceRecord]:
        for r in self._attendance.load_all():
            if r.user_id == user_id and r.date == day:
                return r
        return None
