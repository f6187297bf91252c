from __future__ import annotations

import logging
import sqlite3
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional

from .local_storage import LocalStorage

logger = logging.getLogger(__name__)

_SCHEMA = """
CREATE TABLE IF NOT EXISTS local_storage (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL
)
"""


@dataclass
class StorageConfig:
    path: str
    timeout: float = 5.0


@contextmanager
def db_cursor(config: StorageConfig, *, immediate: bool = False):
    """Short-lived connection per operation.

    ``immediate`` takes the write lock up front so read-modify-write
    sequences from two writers run one after the other.
    """
    conn = sqlite3.connect(config.path, timeout=config.timeout, isolation_level=None)
    try:
        cur = conn.cursor()
        try:
            cur.execute("BEGIN IMMEDIATE" if immediate else "BEGIN")
            yield conn, cur
            cur.execute("COMMIT")
        finally:
            cur.close()
    except Exception:
        if conn.in_transaction:
            conn.rollback()
        raise
    finally:
        conn.close()


def _get(cur, key: str) -> Optional[str]:
    cur.execute("SELECT value FROM local_storage WHERE key=?", (key,))
    row = cur.fetchone()
    return row[0] if row else None


def _set(cur, key: str, value: str) -> None:
    cur.execute(
        """
        INSERT INTO local_storage(key, value) VALUES(?, ?)
        ON CONFLICT(key) DO UPDATE SET value=excluded.value
        """,
        (key, str(value)),
    )


def _remove(cur, key: str) -> None:
    cur.execute("DELETE FROM local_storage WHERE key=?", (key,))


class _CursorBoundStorage(LocalStorage):
    """Storage view bound to one open transaction."""

    def __init__(self, cur):
        self._cur = cur

    def get_item(self, key: str) -> Optional[str]:
        return _get(self._cur, key)

    def set_item(self, key: str, value: str) -> None:
        _set(self._cur, key, value)

    def remove_item(self, key: str) -> None:
        _remove(self._cur, key)

    @contextmanager
    def transaction(self) -> Iterator["_CursorBoundStorage"]:
        yield self


class SQLiteLocalStorage(LocalStorage):
    """Local storage persisted to a single SQLite file."""

    def __init__(self, config: StorageConfig):
        # Each operation opens its own connection, so an in-memory database
        # would vanish between calls.
        if config.path == ":memory:":
            raise ValueError("sqlite storage needs a file path; use the memory backend instead")
        self._config = config
        self.ensure_schema()

    def ensure_schema(self) -> None:
        Path(self._config.path).parent.mkdir(parents=True, exist_ok=True)
        with db_cursor(self._config) as (_, cur):
            cur.execute(_SCHEMA)
        logger.debug("local storage ready at %s", self._config.path)

    def get_item(self, key: str) -> Optional[str]:
        with db_cursor(self._config) as (_, cur):
            return _get(cur, key)

    def set_item(self, key: str, value: str) -> None:
        with db_cursor(self._config, immediate=True) as (_, cur):
            _set(cur, key, value)

    def remove_item(self, key: str) -> None:
        with db_cursor(self._config, immediate=True) as (_, cur):
            _remove(cur, key)

    @contextmanager
    def transaction(self) -> Iterator[LocalStorage]:
        with db_cursor(self._config, immediate=True) as (_, cur):
            yield _CursorBoundStorage(cur)
