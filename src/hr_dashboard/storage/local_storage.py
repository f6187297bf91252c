from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import ContextManager, Dict, Iterator, Optional, Protocol


class LocalStorage(Protocol):
    """Key/value storage holding one serialized string per key.

    Note (DIP): record stores and the session store depend on this
    interface, not on a concrete backend.
    """

    def get_item(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set_item(self, key: str, value: str) -> None:
        raise NotImplementedError

    def remove_item(self, key: str) -> None:
        raise NotImplementedError

    def transaction(self) -> ContextManager["LocalStorage"]:
        """Exclusive unit of work; reads and writes inside commit together."""

        raise NotImplementedError


class InMemoryLocalStorage(LocalStorage):
    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._items: Dict[str, str] = dict(initial or {})
        self._lock = threading.RLock()

    def get_item(self, key: str) -> Optional[str]:
        with self._lock:
            return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        with self._lock:
            self._items[key] = str(value)

    def remove_item(self, key: str) -> None:
        with self._lock:
            self._items.pop(key, None)

    @contextmanager
    def transaction(self) -> Iterator["InMemoryLocalStorage"]:
        with self._lock:
            snapshot = dict(self._items)
            try:
                yield self
            except Exception:
                self._items = snapshot
                raise
