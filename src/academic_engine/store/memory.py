"""MemoryCollectionStore: process-local store for tests and throwaway sessions."""

from __future__ import annotations

from academic_engine.store.protocol import (
    CollectionStore,
    Record,
    decode_records,
    encode_records,
    validate_collection_name,
)


class MemoryCollectionStore(CollectionStore):
    """Keep collections as serialized JSON text in a dict.

    Storing text rather than live objects keeps callers from sharing state with the store.
    """

    def __init__(self) -> None:
        self._slots: dict[str, str] = {}

    def load(self, name: str) -> list[Record]:
        payload = self._slots.get(validate_collection_name(name))
        if payload is None:
            return []
        return decode_records(name, payload)

    def save(self, name: str, records: list[Record]) -> None:
        self._slots[validate_collection_name(name)] = encode_records(records)

    def delete(self, name: str) -> bool:
        return self._slots.pop(validate_collection_name(name), None) is not None

    def exists(self, name: str) -> bool:
        return validate_collection_name(name) in self._slots

    def raw(self, name: str) -> str | None:
        """Return the stored text for a collection."""

        return self._slots.get(validate_collection_name(name))

    def put_raw(self, name: str, payload: str) -> None:
        """Overwrite a slot with arbitrary text."""

        self._slots[validate_collection_name(name)] = payload
