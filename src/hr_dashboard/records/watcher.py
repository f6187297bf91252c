from __future__ import annotations

import logging
import threading
from typing import List, Optional

from .store import Listener, RecordStore

logger = logging.getLogger(__name__)


class CollectionWatcher:
    """Polls a record store and reports writes made by other sessions.

    Fallback for writers that do not share this process's ``subscribe``
    hooks (another process pointed at the same storage file).
    """

    def __init__(self, store: RecordStore, *, interval: float):
        if interval <= 0:
            raise ValueError("interval must be > 0")
        self._store = store
        self._interval = float(interval)
        self._last = store.read_raw()
        self._listeners: List[Listener] = []
        self._timer: Optional[threading.Timer] = None
        self._running = False
        self._lock = threading.Lock()

    @property
    def running(self) -> bool:
        return self._running

    def subscribe(self, listener: Listener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def poll(self) -> bool:
        """Re-read the collection; notify listeners when it changed."""
        with self._lock:
            raw = self._store.read_raw()
            if raw == self._last:
                return False
            self._last = raw

        logger.debug("change detected under %r", self._store.key)
        for listener in list(self._listeners):
            try:
                listener(self._store.key)
            except Exception:
                logger.exception("watch listener failed for %s", self._store.key)
        return True

    def start(self) -> None:
        if self._running:
            return
        self._running = True
        self._schedule()

    def stop(self) -> None:
        self._running = False
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _schedule(self) -> None:
        self._timer = threading.Timer(self._interval, self._tick)
        self._timer.daemon = True
        self._timer.start()

    def _tick(self) -> None:
        if not self._running:
            return
        try:
            self.poll()
        finally:
            if self._running:
                self._schedule()
