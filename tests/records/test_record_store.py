from __future__ import annotations

import json

import pytest

from hr_dashboard.attendance.model import AttendanceRecord
from hr_dashboard.attendance.repository import attendance_store
from hr_dashboard.core.constants import ATTENDANCE_KEY
from hr_dashboard.core.enums import AttendanceStatus
from hr_dashboard.core.exceptions import RecordNotFoundError


def _rec(rid: str, user_id: str, day: str = "2024-01-15", clock_out=None) -> AttendanceRecord:
    return AttendanceRecord(
        id=rid,
        user_id=user_id,
        date=day,
        clock_in="08:30:00",
        status=AttendanceStatus.PRESENT,
        clock_out=clock_out,
    )


def test_load_all_is_empty_when_key_absent(storage):
    assert attendance_store(storage).load_all() == []


def test_save_all_then_load_all_round_trips(storage):
    store = attendance_store(storage)
    records = [_rec("a", "2"), _rec("b", "3", clock_out="17:00:00")]

    store.save_all(records)

    assert store.load_all() == records


def test_optional_fields_are_omitted_from_json(storage):
    store = attendance_store(storage)
    store.save_all([_rec("a", "2")])

    stored = json.loads(storage.get_item(ATTENDANCE_KEY))
    assert "clockOut" not in stored[0]
    assert stored[0]["userId"] == "2"


_BAD_CLOCK = '[{"id": "x", "userId": "2", "date": "2024-01-15", "clockIn": "garbage", "clockOut": "17:00:00", "status": "present"}]'
_BAD_DATE = '[{"id": "x", "userId": "2", "date": "15/01/2024", "clockIn": "08:00:00", "status": "present"}]'


@pytest.mark.parametrize(
    "raw", ["{not json", '{"id": "x"}', '[{"id": "x"}]', '"text"', _BAD_CLOCK, _BAD_DATE]
)
def test_malformed_value_loads_as_empty(storage, raw):
    storage.set_item(ATTENDANCE_KEY, raw)

    assert attendance_store(storage).load_all() == []


def test_load_visible_filters_by_owner_for_employees(storage, john, admin):
    store = attendance_store(storage)
    store.save_all([_rec("a", "2"), _rec("b", "3"), _rec("c", "2")])

    mine = store.load_visible(john)

    assert [r.id for r in mine] == ["a", "c"]
    assert all(r.user_id == john.user_id for r in mine)
    assert store.load_visible(admin) == store.load_all()


def test_append_replace_remove(storage):
    store = attendance_store(storage)
    store.append(_rec("a", "2"))
    store.append(_rec("b", "3"))

    updated = store.replace("a", lambda r: _rec(r.id, r.user_id, clock_out="18:00:00"))
    assert updated.clock_out == "18:00:00"
    assert store.get("a").clock_out == "18:00:00"

    removed = store.remove("b")
    assert removed.id == "b"
    assert [r.id for r in store.load_all()] == ["a"]


def test_replace_and_remove_unknown_id_raise(storage):
    store = attendance_store(storage)
    store.append(_rec("a", "2"))

    with pytest.raises(RecordNotFoundError):
        store.replace("zzz", lambda r: r)
    with pytest.raises(RecordNotFoundError):
        store.remove("zzz")
    assert len(store.load_all()) == 1


def test_failed_updater_leaves_collection_untouched(storage):
    store = attendance_store(storage)
    store.append(_rec("a", "2"))

    def boom(_):
        raise ValueError("nope")

    with pytest.raises(ValueError):
        store.replace("a", boom)
    assert store.get("a") == _rec("a", "2")


def test_two_store_instances_do_not_lose_each_others_appends(storage):
    first = attendance_store(storage)
    second = attendance_store(storage)

    first.append(_rec("a", "2"))
    second.append(_rec("b", "3"))

    assert {r.id for r in first.load_all()} == {"a", "b"}


def test_listeners_are_notified_after_writes(storage):
    store = attendance_store(storage)
    seen = []
    store.subscribe(seen.append)

    store.append(_rec("a", "2"))
    store.save_all([])
    store.unsubscribe(seen.append)
    store.append(_rec("b", "2"))

    assert seen == [ATTENDANCE_KEY, ATTENDANCE_KEY]


def test_failing_listener_does_not_break_write(storage):
    store = attendance_store(storage)

    def broken(_key):
        raise RuntimeError("listener bug")

    store.subscribe(broken)
    store.append(_rec("a", "2"))

    assert store.get("a") is not None
