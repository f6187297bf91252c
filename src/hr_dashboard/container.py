from __future__ import annotations

from dataclasses import dataclass
from datetime import time
from typing import Optional

from .attendance.factory import ClockInStrategyFactory
from .attendance.model import AttendanceRecord
from .attendance.repository import attendance_store
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_LATE_CUTOFF, DEFAULT_POLL_SECONDS
from .leave.model import LeaveRecord
from .leave.repository import leave_store
from .leave.service import LeaveService
from .payroll.model import SalaryRecord
from .payroll.repository import salary_store
from .payroll.service import SalaryService
from .records.store import RecordStore
from .records.watcher import CollectionWatcher
from .storage.local_storage import LocalStorage
from .users.repository import IdentityDirectory
from .users.service import SessionStore


@dataclass(frozen=True)
class Container:
    storage: LocalStorage

    directory: IdentityDirectory
    attendance_store: RecordStore[AttendanceRecord]
    leave_store: RecordStore[LeaveRecord]
    salary_store: RecordStore[SalaryRecord]

    session_store: SessionStore
    attendance_service: AttendanceService
    leave_service: LeaveService
    salary_service: SalaryService

    attendance_watcher: Optional[CollectionWatcher]
    leave_watcher: Optional[CollectionWatcher]


def build_container(
    *,
    storage: LocalStorage,
    late_cutoff: time = DEFAULT_LATE_CUTOFF,
    poll_seconds: float = DEFAULT_POLL_SECONDS,
    leave_poll_seconds: float = DEFAULT_POLL_SECONDS,
) -> Container:
    directory = IdentityDirectory(storage)
    attendance = attendance_store(storage)
    leaves = leave_store(storage)
    salaries = salary_store(storage)

    session_store = SessionStore(storage, directory)
    attendance_service = AttendanceService(
        attendance,
        directory,
        strategy_factory=ClockInStrategyFactory(),
        late_cutoff=late_cutoff,
    )
    leave_service = LeaveService(leaves)
    salary_service = SalaryService(salaries, directory)

    attendance_watcher = _watcher(attendance, poll_seconds)
    leave_watcher = _watcher(leaves, leave_poll_seconds)

    return Container(
        storage=storage,
        directory=directory,
        attendance_store=attendance,
        leave_store=leaves,
        salary_store=salaries,
        session_store=session_store,
        attendance_service=attendance_service,
        leave_service=leave_service,
        salary_service=salary_service,
        attendance_watcher=attendance_watcher,
        leave_watcher=leave_watcher,
    )


def _watcher(store: RecordStore, seconds: float) -> Optional[CollectionWatcher]:
    # 0 disables polling
    if not seconds or seconds <= 0:
        return None
    return CollectionWatcher(store, interval=seconds)
