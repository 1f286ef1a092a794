"""ID utilities."""

from __future__ import annotations

import uuid


def new_id() -> str:
    """Return a fresh opaque identifier (uuid4, canonical text form)."""

    return str(uuid.uuid4())
