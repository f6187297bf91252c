from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from typing import Any, Optional, Sequence

from ..common.datetime_utils import format_date, now_local
from ..common.ids import new_record_id
from ..common.validators import require_amount, require_non_empty
from ..core.constants import UNKNOWN_EMPLOYEE
from ..core.enums import SalaryStatus
from ..core.exceptions import AuthorizationError, RecordNotFoundError, ValidationError
from ..records.store import RecordStore
from ..users.repository import IdentityDirectory
from ..users.service import SessionContext
from .calculator.base import SalaryCalculator
from .calculator.standard_calculator import StandardSalaryCalculator
from .model import SalaryRecord, SalarySummary
from .views import summarize

logger = logging.getLogger(__name__)


class SalaryService:
    def __init__(
        self,
        salaries: RecordStore[SalaryRecord],
        directory: IdentityDirectory,
        *,
        calculator: Optional[SalaryCalculator] = None,
    ):
        self._salaries = salaries
        self._directory = directory
        self._calculator = calculator or StandardSalaryCalculator()

    @property
    def calculator(self) -> SalaryCalculator:
        return self._calculator

    def save(
        self,
        viewer: SessionContext,
        *,
        user_id: str,
        base_salary: Any,
        incentives: Any = 0,
        deductions: Any = 0,
        month: Any,
        year: Any,
        status: SalaryStatus | str = SalaryStatus.PENDING,
        record_id: Optional[str] = None,
        today: date | None = None,
    ) -> SalaryRecord:
        """Create a salary record, or overwrite ``record_id`` when given."""
        self._require_admin(viewer)

        user_id = require_non_empty(str(user_id or ""), "Employee")
        status = self._parse_status(status)
        identity = self._directory.get_by_id(user_id)

        fields = dict(
            user_id=user_id,
            employee_name=identity.full_name if identity else UNKNOWN_EMPLOYEE,
            base_salary=require_amount(base_salary, "Base salary"),
            incentives=require_amount(incentives, "Incentives", default=0),
            deductions=require_amount(deductions, "Deductions", default=0),
            month=self._parse_month(month),
            year=self._parse_year(year),
            status=status,
            pay_date=self._pay_date_for(status, today),
        )

        if record_id:
            try:
                record = self._salaries.replace(str(record_id), lambda r: replace(r, **fields))
            except RecordNotFoundError:
                raise RecordNotFoundError("Salary record not found")
            logger.info("salary %s updated by %s", record.id, viewer.user_id)
            return record

        record = SalaryRecord(id=new_record_id(), **fields)
        self._salaries.append(record)
        logger.info("salary %s created for %s by %s", record.id, user_id, viewer.user_id)
        return record

    def delete(self, viewer: SessionContext, record_id: str) -> None:
        self._require_admin(viewer)
        try:
            self._salaries.remove(str(record_id))
        except RecordNotFoundError:
            raise RecordNotFoundError("Salary record not found")
        logger.info("salary %s deleted by %s", record_id, viewer.user_id)

    def set_status(
        self,
        viewer: SessionContext,
        record_id: str,
        status: SalaryStatus | str,
        *,
        today: date | None = None,
    ) -> SalaryRecord:
        """Toggle pending/paid; paid stamps today's date, pending clears it."""
        self._require_admin(viewer)
        status = self._parse_status(status)
        pay_date = self._pay_date_for(status, today)
        try:
            record = self._salaries.replace(str(record_id), lambda r: replace(r, status=status, pay_date=pay_date))
        except RecordNotFoundError:
            raise RecordNotFoundError("Salary record not found")
        logger.info("salary %s marked %s by %s", record_id, status.value, viewer.user_id)
        return record

    def list_visible(self, viewer: SessionContext) -> Sequence[SalaryRecord]:
        return self._salaries.load_visible(viewer)

    def summary(self, viewer: SessionContext) -> SalarySummary:
        return summarize(self.list_visible(viewer), self._calculator)

    def net_total(self, record: SalaryRecord) -> float:
        return self._calculator.net_total(record)

    @staticmethod
    def _require_admin(viewer: SessionContext) -> None:
        if not viewer.is_admin:
            raise AuthorizationError("You do not have permission")

    @staticmethod
    def _pay_date_for(status: SalaryStatus, today: date | None) -> Optional[str]:
        if status != SalaryStatus.PAID:
            return None
        return format_date(today or now_local().date())

    @staticmethod
    def _parse_status(value: SalaryStatus | str) -> SalaryStatus:
        try:
            return SalaryStatus(value)
        except ValueError:
            raise ValidationError("Status must be 'pending' or 'paid'")

    @staticmethod
    def _parse_month(value: Any) -> int:
        try:
            month = int(value)
        except (TypeError, ValueError):
            raise ValidationError("Month must be a number")
        if not 1 <= month <= 12:
            raise ValidationError("Month must be between 1 and 12")
        return month

    @staticmethod
    def _parse_year(value: Any) -> int:
        try:
            year = int(value)
        except (TypeError, ValueError):
            raise ValidationError("Year must be a number")
        if year < 1:
            raise ValidationError("Year must be positive")
        return year
