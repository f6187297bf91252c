from __future__ import annotations

from ..core.constants import SALARY_KEY
from ..records.store import RecordStore
from ..storage.local_storage import LocalStorage
from .model import SalaryRecord


def salary_store(storage: LocalStorage) -> RecordStore[SalaryRecord]:
    return RecordStore(
        storage,
        key=SALARY_KEY,
        from_dict=SalaryRecord.from_dict,
        to_dict=SalaryRecord.to_dict,
        owner_field="user_id",
    )
