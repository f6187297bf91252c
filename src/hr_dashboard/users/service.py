from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Optional

from ..common.ids import new_record_id
from ..common.validators import require_min_length, require_non_empty
from ..core.constants import CURRENT_USER_KEY, MIN_PASSWORD_LENGTH
from ..core.enums import Role
from ..core.exceptions import (
    AuthenticationError,
    UserExistsError,
    UserNotFoundError,
    ValidationError,
    WeakCredentialError,
)
from ..storage.local_storage import LocalStorage
from .model import Identity
from .repository import IdentityDirectory

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionContext:
    """The signed-in viewer, passed explicitly into every service call."""

    identity: Identity

    @property
    def user_id(self) -> str:
        return self.identity.id

    @property
    def role(self) -> Role:
        return self.identity.role

    @property
    def is_admin(self) -> bool:
        return self.identity.role == Role.ADMIN

    @property
    def full_name(self) -> str:
        return self.identity.full_name


class SessionStore:
    """Use case: sign in / sign up / sign out.

    The current identity is persisted under ``currentUser`` and restored
    synchronously on construction; ``ready`` flips once that is done.
    """

    def __init__(self, storage: LocalStorage, directory: IdentityDirectory):
        self._storage = storage
        self._directory = directory
        self._current: Optional[SessionContext] = None
        self.ready = False
        self.restore()

    @property
    def current(self) -> Optional[SessionContext]:
        return self._current

    @property
    def is_admin(self) -> bool:
        return bool(self._current and self._current.is_admin)

    def require(self) -> SessionContext:
        if self._current is None:
            raise AuthenticationError("Please sign in to continue")
        return self._current

    def restore(self) -> Optional[SessionContext]:
        raw = self._storage.get_item(CURRENT_USER_KEY)
        self._current = None
        if raw is not None:
            try:
                self._current = SessionContext(Identity.from_dict(json.loads(raw)))
            except (ValueError, KeyError, TypeError, AttributeError) as e:
                logger.warning("ignoring malformed %s value: %r", CURRENT_USER_KEY, e)
        self.ready = True
        return self._current

    def sign_in(self, email: str, password: str) -> SessionContext:
        return self._start(self.authenticate(email, password))

    def authenticate(self, email: str, password: str) -> Identity:
        """Check credentials without starting a session."""
        identity = self._directory.get_by_email(email)
        if not identity:
            raise UserNotFoundError("User not found")

        self._check_password(password)
        return identity

    def sign_up(
        self,
        email: str,
        password: str,
        *,
        first_name: str,
        last_name: str,
        role: Role = Role.EMPLOYEE,
    ) -> SessionContext:
        return self._start(
            self.register(email, password, first_name=first_name, last_name=last_name, role=role)
        )

    def register(
        self,
        email: str,
        password: str,
        *,
        first_name: str,
        last_name: str,
        role: Role = Role.EMPLOYEE,
    ) -> Identity:
        email = require_non_empty(email, "Email")
        if self._directory.get_by_email(email):
            raise UserExistsError("User already exists")

        self._check_password(password)
        identity = Identity(
            id=new_record_id(),
            email=email,
            first_name=(first_name or "").strip(),
            last_name=(last_name or "").strip(),
            role=Role(role),
        )
        self._directory.add(identity)
        logger.info("registered %s as %s", identity.email, identity.role.value)
        return identity

    def sign_out(self) -> None:
        if self._current is not None:
            logger.info("signed out %s", self._current.identity.email)
        self._current = None
        self._storage.remove_item(CURRENT_USER_KEY)

    def _start(self, identity: Identity) -> SessionContext:
        self._current = SessionContext(identity)
        self._storage.set_item(CURRENT_USER_KEY, json.dumps(identity.to_dict()))
        logger.info("signed in %s", identity.email)
        return self._current

    @staticmethod
    def _check_password(password: str) -> None:
        try:
            require_min_length(password or "", "Password", MIN_PASSWORD_LENGTH)
        except ValidationError as e:
            raise WeakCredentialError(str(e))
