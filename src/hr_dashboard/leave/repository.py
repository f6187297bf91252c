from __future__ import annotations

from ..core.constants import LEAVE_KEY
from ..records.store import RecordStore
from ..storage.local_storage import LocalStorage
from .model import LeaveRecord


def leave_store(storage: LocalStorage) -> RecordStore[LeaveRecord]:
    return RecordStore(
        storage,
        key=LEAVE_KEY,
        from_dict=LeaveRecord.from_dict,
        to_dict=LeaveRecord.to_dict,
        owner_field="emp_id",
    )
