"""FileCollectionStore: one JSON file per collection."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

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


class FileCollectionStore(CollectionStore):
    """Store collections as `<root_dir>/<name>.json`."""

    def __init__(self, root_dir: str | Path, max_bytes: int = 0) -> None:
        """Initialize file store.

        Args:
            root_dir: Directory holding the collection files. Created on first save.
            max_bytes: Maximum serialized size of one collection; 0 means unlimited.
        """
        self.root = Path(root_dir).resolve()
        self.max_bytes = max_bytes

    def _path(self, name: str) -> Path:
        return self.root / f"{validate_collection_name(name)}.json"

    def load(self, name: str) -> list[Record]:
        path = self._path(name)
        if not path.is_file():
            return []
        try:
            payload = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError):
            logger.warning("Could not read collection %r from %s; starting empty", name, path, exc_info=True)
            return []
        records = decode_records(name, payload)
        logger.debug("Loaded %d records from %s", len(records), path)
        return records

    def save(self, name: str, records: list[Record]) -> None:
        path = self._path(name)
        payload = encode_records(records).encode("utf-8")
        if self.max_bytes and len(payload) > self.max_bytes:
            raise StorageError(
                f"quota exceeded: collection {name!r} is {len(payload)} bytes, limit {self.max_bytes}",
                collection=name,
            )

        tmp_name: str | None = None
        try:
            self.root.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{name}.", suffix=".tmp", dir=self.root)
            with os.fdopen(fd, "wb") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, path)
            tmp_name = None
        except OSError as e:
            raise StorageError(f"failed to write collection {name!r}: {e}", collection=name) from e
        finally:
            if tmp_name is not None:
                _remove_quietly(Path(tmp_name))

        logger.debug("Saved %d records to %s", len(records), path)

    def delete(self, name: str) -> bool:
        path = self._path(name)
        if not path.exists():
            return False
        try:
            path.unlink()
        except OSError as e:
            raise StorageError(f"failed to delete collection {name!r}: {e}", collection=name) from e
        return True

    def exists(self, name: str) -> bool:
        return self._path(name).is_file()


def _remove_quietly(path: Path) -> None:
    """Best-effort removal of a leftover temp file."""

    try:
        path.unlink()
    except OSError:
        logger.debug("Could not remove temp file %s", path)
