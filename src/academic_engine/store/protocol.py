"""Protocol definition for pluggable collection stores."""

from __future__ import annotations

import json
import re
from abc import ABC, abstractmethod
from typing import Any

from academic_engine.logging import get_logger, log_exception

logger = get_logger(__name__)

Record = dict[str, Any]

_NAME_RE = re.compile(r"^[A-Za-z0-9_.-]+$")


def validate_collection_name(name: str) -> str:
    """Reject collection names that cannot be used as a storage key."""

    if not name or not _NAME_RE.match(name) or name in {".", ".."}:
        raise ValueError(f"Invalid collection name: {name!r}")
    return name


def encode_records(records: list[Record]) -> str:
    """Serialize a collection to its JSON text form."""

    return json.dumps(list(records), ensure_ascii=False)


def decode_records(name: str, payload: str) -> list[Record]:
    """Parse a stored collection.

    Corrupt payloads degrade to an empty collection and a logged warning.
    """

    try:
        data = json.loads(payload)
    except json.JSONDecodeError:
        log_exception(logger, "Collection is not valid JSON; starting empty", collection=name)
        return []
    if not isinstance(data, list):
        logger.warning("Collection %r holds %s instead of a list; starting empty", name, type(data).__name__)
        return []
    return data


class CollectionStore(ABC):
    """Durable key-value slot holding ordered collections of records.

    Stores do not look at record shape.
    """

    @abstractmethod
    def load(self, name: str) -> list[Record]:
        """Load a collection; empty when absent or unreadable."""

    @abstractmethod
    def save(self, name: str, records: list[Record]) -> None:
        """Replace a collection. Raises `StorageError` when the write fails."""

    @abstractmethod
    def delete(self, name: str) -> bool:
        """Drop a collection. Returns False when it did not exist."""

    @abstractmethod
    def exists(self, name: str) -> bool:
        """Whether a collection has been saved."""
