from __future__ import annotations

from .base import SalaryCalculator
from ..model import SalaryRecord


class StandardSalaryCalculator(SalaryCalculator):
    """Standard rule: base + incentives - deductions."""

    def net_total(self, record: SalaryRecord) -> float:
        return record.base_salary + record.incentives - record.deductions
