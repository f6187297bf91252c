from __future__ import annotations

import json
import logging
from typing import Any, Callable, Generic, Iterable, List, Optional, Protocol, Tuple, TypeVar

from ..core.exceptions import RecordNotFoundError, StorageReadError
from ..storage.local_storage import LocalStorage

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")

Listener = Callable[[str], None]


class Viewer(Protocol):
    """Anything that identifies who is looking at the records."""

    @property
    def user_id(self) -> str:
        raise NotImplementedError

    @property
    def is_admin(self) -> bool:
        raise NotImplementedError


class RecordStore(Generic[T]):
    """One collection of records serialized as a JSON array under one key.

    Mutations run inside a storage transaction so a read-modify-write from
    one writer cannot drop another writer's update.
    """

    def __init__(
        self,
        storage: LocalStorage,
        *,
        key: str,
        from_dict: Callable[[dict], T],
        to_dict: Callable[[T], dict],
        owner_field: str,
        id_field: str = "id",
    ):
        self._storage = storage
        self._key = key
        self._from_dict = from_dict
        self._to_dict = to_dict
        self._owner_field = owner_field
        self._id_field = id_field
        self._listeners: List[Listener] = []

    @property
    def key(self) -> str:
        return self._key

    # Reads

    def read_raw(self) -> Optional[str]:
        return self._storage.get_item(self._key)

    def load_all(self) -> List[T]:
        return self._decode(self.read_raw())

    def load_visible(self, viewer: Viewer) -> List[T]:
        records = self.load_all()
        if viewer.is_admin:
            return records
        return [r for r in records if self.owner_of(r) == viewer.user_id]

    def get(self, record_id: str) -> Optional[T]:
        for r in self.load_all():
            if self.id_of(r) == str(record_id):
                return r
        return None

    def id_of(self, record: T) -> str:
        return str(getattr(record, self._id_field))

    def owner_of(self, record: T) -> str:
        return str(getattr(record, self._owner_field))

    # Writes

    def save_all(self, records: Iterable[T]) -> None:
        self._storage.set_item(self._key, self._encode(records))
        self._notify()

    def append(self, record: T) -> T:
        def _append(records: List[T]) -> Tuple[List[T], T]:
            return records + [record], record

        return self._mutate(_append)

    def replace(self, record_id: str, updater: Callable[[T], T]) -> T:
        def _replace(records: List[T]) -> Tuple[List[T], T]:
            out: List[T] = []
            updated: Optional[T] = None
            for r in records:
                if updated is None and self.id_of(r) == str(record_id):
                    updated = updater(r)
                    out.append(updated)
                else:
                    out.append(r)
            if updated is None:
                raise RecordNotFoundError(f"Record {record_id} not found")
            return out, updated

        return self._mutate(_replace)

    def remove(self, record_id: str) -> T:
        def _remove(records: List[T]) -> Tuple[List[T], T]:
            for i, r in enumerate(records):
                if self.id_of(r) == str(record_id):
                    return records[:i] + records[i + 1:], r
            raise RecordNotFoundError(f"Record {record_id} not found")

        return self._mutate(_remove)

    # Change notification

    def subscribe(self, listener: Listener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self._key)
            except Exception:
                logger.exception("change listener failed for %s", self._key)

    # Internals

    def _mutate(self, fn: Callable[[List[T]], Tuple[List[T], R]]) -> R:
        with self._storage.transaction() as tx:
            records = self._decode(tx.get_item(self._key))
            records, result = fn(records)
            tx.set_item(self._key, self._encode(records))
        self._notify()
        return result

    def _encode(self, records: Iterable[T]) -> str:
        return json.dumps([self._to_dict(r) for r in records])

    def _decode(self, raw: Optional[str]) -> List[T]:
        if raw is None:
            return []
        try:
            return self._parse(raw)
        except StorageReadError as e:
            logger.warning("discarding malformed value under %r: %s", self._key, e)
            return []

    def _parse(self, raw: str) -> List[T]:
        try:
            data: Any = json.loads(raw)
        except ValueError as e:
            raise StorageReadError(f"invalid JSON: {e}") from e
        if not isinstance(data, list):
            raise StorageReadError(f"expected a JSON array, got {type(data).__name__}")
        try:
            return [self._from_dict(item) for item in data]
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise StorageReadError(f"invalid record: {e!r}") from e
