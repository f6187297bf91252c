"""Derived salary values. Pure functions, recomputed on every call."""

from __future__ import annotations

import calendar
from typing import Iterable, Optional, Sequence

from ..core.enums import SalaryStatus
from .calculator.base import SalaryCalculator
from .calculator.standard_calculator import StandardSalaryCalculator
from .model import SalaryRecord, SalarySummary

_STANDARD = StandardSalaryCalculator()


def _sum_status(records: Iterable[SalaryRecord], status: SalaryStatus, calculator: SalaryCalculator) -> float:
    return sum((calculator.net_total(r) for r in records if r.status == status), 0.0)


def total_paid(records: Iterable[SalaryRecord], calculator: Optional[SalaryCalculator] = None) -> float:
    return _sum_status(records, SalaryStatus.PAID, calculator or _STANDARD)


def total_pending(records: Iterable[SalaryRecord], calculator: Optional[SalaryCalculator] = None) -> float:
    return _sum_status(records, SalaryStatus.PENDING, calculator or _STANDARD)


def average_net(records: Sequence[SalaryRecord], calculator: Optional[SalaryCalculator] = None) -> float:
    if not records:
        return 0.0
    calculator = calculator or _STANDARD
    return sum(calculator.net_total(r) for r in records) / len(records)


def summarize(records: Sequence[SalaryRecord], calculator: Optional[SalaryCalculator] = None) -> SalarySummary:
    calculator = calculator or _STANDARD
    return SalarySummary(
        total_paid=total_paid(records, calculator),
        total_pending=total_pending(records, calculator),
        average=average_net(records, calculator),
        count=len(records),
    )


def month_name(month: int) -> str:
    if not 1 <= int(month) <= 12:
        raise ValueError(f"month out of range: {month}")
    return calendar.month_name[int(month)]


def to_row(record: SalaryRecord, calculator: Optional[SalaryCalculator] = None) -> dict:
    calculator = calculator or _STANDARD
    row = record.to_dict()
    row["period"] = f"{month_name(record.month)} {record.year}"
    row["netTotal"] = calculator.net_total(record)
    return row
