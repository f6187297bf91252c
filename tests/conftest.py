from __future__ import annotations

from datetime import datetime

import pytest

from hr_dashboard.storage.local_storage import InMemoryLocalStorage
from hr_dashboard.users.model import DEMO_IDENTITIES
from hr_dashboard.users.repository import IdentityDirectory
from hr_dashboard.users.service import SessionContext


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 1, 15, 8, 45, 0)


@pytest.fixture
def storage() -> InMemoryLocalStorage:
    return InMemoryLocalStorage()


@pytest.fixture
def directory(storage) -> IdentityDirectory:
    return IdentityDirectory(storage)


@pytest.fixture
def admin() -> SessionContext:
    return SessionContext(DEMO_IDENTITIES[0])


@pytest.fixture
def john() -> SessionContext:
    return SessionContext(DEMO_IDENTITIES[1])


@pytest.fixture
def jane() -> SessionContext:
    return SessionContext(DEMO_IDENTITIES[2])
