from __future__ import annotations

from .local_storage import InMemoryLocalStorage, LocalStorage
from .sqlite_storage import SQLiteLocalStorage, StorageConfig


def build_storage(*, backend: str, path: str = "") -> LocalStorage:
    """Create the storage backend named in settings (``sqlite`` or ``memory``)."""
    backend = (backend or "sqlite").strip().lower()
    if backend == "memory":
        return InMemoryLocalStorage()
    if backend == "sqlite":
        if not path:
            raise ValueError("STORAGE_PATH is required for the sqlite backend")
        return SQLiteLocalStorage(StorageConfig(path=path))
    raise ValueError(f"Unknown storage backend: {backend!r}")
