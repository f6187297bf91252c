from __future__ import annotations

import json

import pytest

from hr_dashboard.core.constants import CURRENT_USER_KEY
from hr_dashboard.core.enums import Role
from hr_dashboard.core.exceptions import (
    AuthenticationError,
    UserExistsError,
    UserNotFoundError,
    WeakCredentialError,
)
from hr_dashboard.users.repository import IdentityDirectory
from hr_dashboard.users.service import SessionStore


@pytest.fixture
def sessions(storage, directory) -> SessionStore:
    return SessionStore(storage, directory)


def test_admin_sign_in_succeeds(sessions, storage):
    ctx = sessions.sign_in("admin@company.com", "secret1")

    assert ctx.is_admin
    assert sessions.is_admin
    assert json.loads(storage.get_item(CURRENT_USER_KEY))["email"] == "admin@company.com"


def test_short_password_is_weak_credential(sessions):
    with pytest.raises(WeakCredentialError) as exc:
        sessions.sign_in("admin@company.com", "abc")

    assert str(exc.value) == "Password must be at least 6 characters"
    assert sessions.current is None


def test_unknown_email_is_not_found(sessions):
    with pytest.raises(UserNotFoundError):
        sessions.sign_in("nobody@x.com", "whatever123")


def test_unknown_email_checked_before_password(sessions):
    with pytest.raises(UserNotFoundError):
        sessions.sign_in("nobody@x.com", "abc")


def test_employee_is_not_admin(sessions):
    ctx = sessions.sign_in("john@company.com", "password")

    assert not ctx.is_admin
    assert ctx.full_name == "John Doe"


def test_sign_out_clears_persisted_identity(sessions, storage):
    sessions.sign_in("jane@company.com", "password")
    sessions.sign_out()

    assert sessions.current is None
    assert not sessions.is_admin
    assert storage.get_item(CURRENT_USER_KEY) is None
    with pytest.raises(AuthenticationError):
        sessions.require()


def test_session_is_restored_on_start(storage, directory):
    SessionStore(storage, directory).sign_in("john@company.com", "password")

    restored = SessionStore(storage, directory)

    assert restored.ready
    assert restored.current is not None
    assert restored.current.user_id == "2"


def test_malformed_persisted_session_is_ignored(storage, directory):
    storage.set_item(CURRENT_USER_KEY, "{broken")

    sessions = SessionStore(storage, directory)

    assert sessions.ready
    assert sessions.current is None


def test_sign_up_creates_employee_and_signs_in(sessions, directory):
    ctx = sessions.sign_up("new@company.com", "password", first_name="New", last_name="Hire")

    assert ctx.role == Role.EMPLOYEE
    assert sessions.current == ctx
    assert directory.get_by_email("new@company.com") == ctx.identity
    assert ctx.user_id not in {"1", "2", "3"}


def test_sign_up_existing_email_fails(sessions):
    with pytest.raises(UserExistsError):
        sessions.sign_up("john@company.com", "password", first_name="J", last_name="D")


def test_signed_up_user_can_sign_in_later(storage, directory):
    SessionStore(storage, directory).sign_up("later@company.com", "password", first_name="L", last_name="T")

    fresh = SessionStore(storage, IdentityDirectory(storage))
    fresh.sign_out()

    assert fresh.sign_in("later@company.com", "password").identity.first_name == "L"


def test_directory_is_seeded_once(storage):
    IdentityDirectory(storage)
    directory = IdentityDirectory(storage)

    assert [u.email for u in directory.list_all()] == [
        "admin@company.com",
        "john@company.com",
        "jane@company.com",
    ]
    assert [u.id for u in directory.list_by_role(Role.EMPLOYEE)] == ["2", "3"]


def test_authenticate_and_register_leave_current_untouched(sessions, storage):
    identity = sessions.authenticate("john@company.com", "password")
    created = sessions.register("solo@company.com", "password", first_name="S", last_name="O")

    assert identity.id == "2"
    assert created.role == Role.EMPLOYEE
    assert sessions.current is None
    assert storage.get_item(CURRENT_USER_KEY) is None
