from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from typing import Dict, Sequence

from ..common.datetime_utils import format_date
from ..common.ids import new_record_id
from ..common.validators import require_choice, require_non_empty
from ..core.constants import DEPARTMENTS, LEAVE_TYPES
from ..core.enums import LeaveStatus
from ..core.exceptions import AuthorizationError, InvalidTransitionError, RecordNotFoundError, ValidationError
from ..records.store import RecordStore
from ..users.service import SessionContext
from .model import LeaveRecord
from .views import ALL, calculate_days, count_by_status, filter_leaves

logger = logging.getLogger(__name__)


class LeaveService:
    def __init__(self, leaves: RecordStore[LeaveRecord]):
        self._leaves = leaves

    def apply(
        self,
        viewer: SessionContext,
        *,
        leave_type: str,
        department: str,
        start_date: date,
        end_date: date,
        reason: str,
    ) -> LeaveRecord:
        if viewer.is_admin:
            raise AuthorizationError("Only employees can apply for leave")

        require_choice(leave_type, "Leave type", LEAVE_TYPES)
        require_choice(department, "Department", DEPARTMENTS)
        reason = require_non_empty(reason, "Reason")
        if end_date < start_date:
            raise ValidationError("End date must be on or after start date")

        record = LeaveRecord(
            id=new_record_id(),
            emp_id=viewer.user_id,
            name=viewer.full_name,
            leave_type=leave_type,
            department=department,
            start_date=format_date(start_date),
            end_date=format_date(end_date),
            days=calculate_days(start_date, end_date),
            reason=reason,
            status=LeaveStatus.PENDING,
        )
        self._leaves.append(record)
        logger.info("leave %s submitted by %s (%d days)", record.id, viewer.user_id, record.days)
        return record

    def approve(self, viewer: SessionContext, leave_id: str) -> LeaveRecord:
        return self._decide(viewer, leave_id, LeaveStatus.APPROVED)

    def reject(self, viewer: SessionContext, leave_id: str) -> LeaveRecord:
        return self._decide(viewer, leave_id, LeaveStatus.REJECTED)

    def list_visible(self, viewer: SessionContext, *, search: str = "", status: str = ALL) -> Sequence[LeaveRecord]:
        if status != ALL:
            require_choice(status, "Status", [ALL] + [s.value for s in LeaveStatus])
        return filter_leaves(self._leaves.load_visible(viewer), search=search, status=status)

    def status_counts(self, viewer: SessionContext) -> Dict[str, int]:
        return count_by_status(self._leaves.load_visible(viewer))

    def _decide(self, viewer: SessionContext, leave_id: str, status: LeaveStatus) -> LeaveRecord:
        if not viewer.is_admin:
            raise AuthorizationError("You do not have permission")

        def _transition(record: LeaveRecord) -> LeaveRecord:
            if record.status != LeaveStatus.PENDING:
                raise InvalidTransitionError(f"Leave request already {record.status.value.lower()}")
            return replace(record, status=status)

        try:
            updated = self._leaves.replace(str(leave_id), _transition)
        except RecordNotFoundError:
            raise RecordNotFoundError("Leave request not found")
        logger.info("leave %s %s by %s", leave_id, status.value.lower(), viewer.user_id)
        return updated
