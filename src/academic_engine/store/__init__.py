"""Collection stores.

Provides pluggable backends for durable, ordered record collections.
"""

from __future__ import annotations

from academic_engine.config import Settings
from academic_engine.store.filesystem import FileCollectionStore
from academic_engine.store.memory import MemoryCollectionStore
from academic_engine.store.protocol import CollectionStore, Record


def create_store(settings: Settings) -> CollectionStore:
    """Build the store selected by `settings.store_backend`."""

    if settings.store_backend == "memory":
        return MemoryCollectionStore()
    if settings.store_backend == "redis":
        from academic_engine.store.redis_store import RedisCollectionStore

        return RedisCollectionStore(settings.redis_url, settings.redis_key_prefix)
    return FileCollectionStore(settings.data_dir, max_bytes=settings.store_max_bytes)


__all__ = [
    "CollectionStore",
    "FileCollectionStore",
    "MemoryCollectionStore",
    "Record",
    "create_store",
]
