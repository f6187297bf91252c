from __future__ import annotations

from datetime import date

import pytest

from hr_dashboard.core.enums import LeaveStatus
from hr_dashboard.core.exceptions import (
    AuthorizationError,
    InvalidTransitionError,
    RecordNotFoundError,
    ValidationError,
)
from hr_dashboard.leave.repository import leave_store
from hr_dashboard.leave.service import LeaveService


@pytest.fixture
def svc(storage):
    return LeaveService(leave_store(storage))


def _apply(svc, viewer, **overrides):
    fields = dict(
        leave_type="Sick Leave",
        department="Logistic",
        start_date=date(2024, 1, 1),
        end_date=date(2024, 1, 3),
        reason="Flu",
    )
    fields.update(overrides)
    return svc.apply(viewer, **fields)


def test_apply_computes_days_and_starts_pending(svc, john):
    leave = _apply(svc, john)

    assert leave.days == 3
    assert leave.status == LeaveStatus.PENDING
    assert leave.emp_id == "2"
    assert leave.name == "John Doe"
    assert leave.start_date == "2024-01-01"


def test_approve_is_terminal(svc, john, admin):
    leave = _apply(svc, john)

    approved = svc.approve(admin, leave.id)
    assert approved.status == LeaveStatus.APPROVED

    with pytest.raises(InvalidTransitionError):
        svc.reject(admin, leave.id)
    with pytest.raises(InvalidTransitionError):
        svc.approve(admin, leave.id)
    assert svc.list_visible(admin)[0].status == LeaveStatus.APPROVED


def test_reject(svc, john, admin):
    leave = _apply(svc, john)

    assert svc.reject(admin, leave.id).status == LeaveStatus.REJECTED


def test_only_admin_decides(svc, john):
    leave = _apply(svc, john)

    with pytest.raises(AuthorizationError):
        svc.approve(john, leave.id)


def test_admin_cannot_apply(svc, admin):
    with pytest.raises(AuthorizationError):
        _apply(svc, admin)


def test_unknown_leave(svc, admin):
    with pytest.raises(RecordNotFoundError):
        svc.approve(admin, "missing")


@pytest.mark.parametrize(
    "overrides",
    [
        {"end_date": date(2023, 12, 31)},
        {"reason": "   "},
        {"leave_type": "Party Leave"},
        {"department": "Sales"},
    ],
)
def test_invalid_applications(svc, john, overrides):
    with pytest.raises(ValidationError):
        _apply(svc, john, **overrides)


def test_visibility_and_search(svc, john, jane, admin):
    _apply(svc, john)
    _apply(svc, jane, reason="Trip")

    assert [r.emp_id for r in svc.list_visible(john)] == ["2"]
    assert len(svc.list_visible(admin)) == 2
    assert [r.emp_id for r in svc.list_visible(admin, search="smith")] == ["3"]
    assert svc.status_counts(admin)["Pending"] == 2


def test_unknown_status_filter(svc, admin):
    with pytest.raises(ValidationError):
        svc.list_visible(admin, status="Maybe")
