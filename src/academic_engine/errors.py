"""Exception taxonomy for the engine."""

from __future__ import annotations


class EngineError(Exception):
    """Base class for all engine errors."""


class ValidationError(EngineError, ValueError):
    """Bad caller input. Raised before any state change or provider call."""


class StorageError(EngineError):
    """A durable write did not happen.

    In-memory state of the caller may already reflect the attempted change.
    """

    def __init__(self, message: str, *, collection: str | None = None) -> None:
        super().__init__(message)
        self.collection = collection


class ProviderError(EngineError):
    """An analysis provider failed or returned a result that breaks its contract."""
