from __future__ import annotations

from ..core.constants import ATTENDANCE_KEY
from ..records.store import RecordStore
from ..storage.local_storage import LocalStorage
from .model import AttendanceRecord


def attendance_store(storage: LocalStorage) -> RecordStore[AttendanceRecord]:
    return RecordStore(
        storage,
        key=ATTENDANCE_KEY,
        from_dict=AttendanceRecord.from_dict,
        to_dict=AttendanceRecord.to_dict,
        owner_field="user_id",
    )
