from __future__ import annotations

from abc import ABC, abstractmethod

from ..model import SalaryRecord


class SalaryCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def net_total(self, record: SalaryRecord) -> float:
        raise NotImplementedError
