from __future__ import annotations

import uuid


def new_record_id() -> str:
    """Opaque id for a new record."""
    return uuid.uuid4().hex
