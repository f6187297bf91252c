"""Derived leave values. Pure functions, recomputed on every call."""

from __future__ import annotations

import math
from datetime import date, datetime, time
from typing import Dict, Iterable, List

from ..core.enums import LeaveStatus
from .model import LeaveRecord

ALL = "All"


def calculate_days(start: date, end: date) -> int:
    """Inclusive calendar-day count: ``ceil((end - start) / 1 day) + 1``."""
    span = datetime.combine(end, time()) - datetime.combine(start, time())
    return math.ceil(span.total_seconds() / 86400) + 1


def filter_leaves(records: Iterable[LeaveRecord], *, search: str = "", status: str = ALL) -> List[LeaveRecord]:
    needle = (search or "").strip().lower()
    wanted = (status or ALL).strip()

    out: List[LeaveRecord] = []
    for r in records:
        if needle and needle not in r.emp_id.lower() and needle not in r.name.lower():
            continue
        if wanted != ALL and r.status.value != wanted:
            continue
        out.append(r)
    return out


def count_by_status(records: Iterable[LeaveRecord]) -> Dict[str, int]:
    counts = {s.value: 0 for s in LeaveStatus}
    for r in records:
        counts[r.status.value] += 1
    counts[ALL] = sum(counts.values())
    return counts
