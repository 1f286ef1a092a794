"""Redis-backed collection store.

Useful when several processes (e.g. a desktop shell and a sync daemon) should see the same
collections without sharing a data directory.
"""

from __future__ import annotations

from typing import Any

import redis

from academic_engine.errors import StorageError
from academic_engine.logging import get_logger
from academic_engine.store.protocol import (
    CollectionStore,
    Record,
    decode_records,
    encode_records,
    validate_collection_name,
)

logger = get_logger(__name__)


class RedisCollectionStore(CollectionStore):
    """Store each collection as one Redis string key."""

    def __init__(self, redis_url: str, key_prefix: str, client: Any | None = None) -> None:
        self.key_prefix = key_prefix
        self._client = client or redis.Redis.from_url(redis_url, decode_responses=True)

    def _key(self, name: str) -> str:
        return f"{self.key_prefix}:collection:{validate_collection_name(name)}"

    def load(self, name: str) -> list[Record]:
        try:
            payload = self._client.get(self._key(name))
        except redis.RedisError:
            logger.warning("Could not read collection %r from redis; starting empty", name, exc_info=True)
            return []
        if payload is None:
            return []
        return decode_records(name, payload)

    def save(self, name: str, records: list[Record]) -> None:
        try:
            self._client.set(self._key(name), encode_records(records))
        except redis.RedisError as e:
            raise StorageError(f"failed to write collection {name!r}: {e}", collection=name) from e

    def delete(self, name: str) -> bool:
        try:
            return bool(self._client.delete(self._key(name)))
        except redis.RedisError as e:
            raise StorageError(f"failed to delete collection {name!r}: {e}", collection=name) from e

    def exists(self, name: str) -> bool:
        try:
            return bool(self._client.exists(self._key(name)))
        except redis.RedisError as e:
            raise StorageError(f"failed to query collection {name!r}: {e}", collection=name) from e
