from __future__ import annotations

import pytest

from hr_dashboard.attendance.model import AttendanceRecord
from hr_dashboard.attendance.repository import attendance_store
from hr_dashboard.container import build_container
from hr_dashboard.core.constants import LEAVE_KEY
from hr_dashboard.core.enums import AttendanceStatus
from hr_dashboard.records.watcher import CollectionWatcher


def _rec(rid: str) -> AttendanceRecord:
    return AttendanceRecord(id=rid, user_id="2", date="2024-01-15", clock_in="08:00:00", status=AttendanceStatus.PRESENT)


def test_poll_reports_only_real_changes(storage):
    watched = attendance_store(storage)
    other_session = attendance_store(storage)
    watcher = CollectionWatcher(watched, interval=5)
    seen = []
    watcher.subscribe(seen.append)

    assert watcher.poll() is False

    other_session.append(_rec("a"))
    assert watcher.poll() is True
    assert watcher.poll() is False
    assert seen == [watched.key]


def test_interval_must_be_positive(storage):
    with pytest.raises(ValueError):
        CollectionWatcher(attendance_store(storage), interval=0)


def test_start_and_stop(storage):
    watcher = CollectionWatcher(attendance_store(storage), interval=60)

    watcher.start()
    assert watcher.running
    watcher.stop()
    assert not watcher.running


def test_container_watches_attendance_and_leaves(storage):
    container = build_container(storage=storage, poll_seconds=5, leave_poll_seconds=5)
    seen = []
    container.leave_watcher.subscribe(seen.append)

    storage.set_item(LEAVE_KEY, "[]")

    assert container.attendance_watcher is not None
    assert container.leave_watcher.poll() is True
    assert seen == [LEAVE_KEY]


def test_zero_interval_disables_watchers(storage):
    container = build_container(storage=storage, poll_seconds=0, leave_poll_seconds=0)

    assert container.attendance_watcher is None
    assert container.leave_watcher is None
