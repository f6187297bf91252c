from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence

from ..core.constants import KNOWN_USERS_KEY
from ..core.enums import Role
from ..core.exceptions import UserExistsError
from ..records.store import RecordStore
from ..storage.local_storage import LocalStorage
from .model import DEMO_IDENTITIES, Identity

logger = logging.getLogger(__name__)


class IdentityDirectory:
    """The known-identity set, kept under ``knownUsers``.

    Seeded with the demo identities when the collection is empty.
    """

    def __init__(self, storage: LocalStorage, *, seed: Iterable[Identity] = DEMO_IDENTITIES):
        self._store: RecordStore[Identity] = RecordStore(
            storage,
            key=KNOWN_USERS_KEY,
            from_dict=Identity.from_dict,
            to_dict=Identity.to_dict,
            owner_field="id",
        )
        seed = list(seed)
        if seed and not self._store.load_all():
            self._store.save_all(seed)
            logger.info("seeded %d known users", len(seed))

    def list_all(self) -> Sequence[Identity]:
        return self._store.load_all()

    def list_by_role(self, role: Role) -> Sequence[Identity]:
        return [u for u in self.list_all() if u.role == role]

    def get_by_email(self, email: str) -> Optional[Identity]:
        for u in self.list_all():
            if u.email == email:
                return u
        return None

    def get_by_id(self, user_id: str) -> Optional[Identity]:
        return self._store.get(str(user_id))

    def add(self, identity: Identity) -> Identity:
        if self.get_by_email(identity.email):
            raise UserExistsError("User already exists")
        return self._store.append(identity)
