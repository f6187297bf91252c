from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import SalaryStatus


@dataclass(frozen=True)
class SalaryRecord:
    """Domain entity: one month's pay for one employee.

    The net total is derived by a calculator, never stored.
    """

    id: str
    user_id: str
    employee_name: str
    base_salary: float
    incentives: float
    deductions: float
    month: int
    year: int
    status: SalaryStatus = SalaryStatus.PENDING
    pay_date: Optional[str] = None

    def to_dict(self) -> dict:
        data = {
            "id": self.id,
            "userId": self.user_id,
            "employeeName": self.employee_name,
            "baseSalary": self.base_salary,
            "incentives": self.incentives,
            "deductions": self.deductions,
            "month": self.month,
            "year": self.year,
            "status": self.status.value,
        }
        if self.pay_date is not None:
            data["payDate"] = self.pay_date
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "SalaryRecord":
        return cls(
            id=str(data["id"]),
            user_id=str(data["userId"]),
            employee_name=str(data.get("employeeName") or ""),
            base_salary=float(data["baseSalary"]),
            incentives=float(data.get("incentives") or 0),
            deductions=float(data.get("deductions") or 0),
            month=int(data["month"]),
            year=int(data["year"]),
            status=SalaryStatus(data["status"]),
            pay_date=data.get("payDate") or None,
        )


@dataclass(frozen=True)
class SalarySummary:
    total_paid: float
    total_pending: float
    average: float
    count: int
