"""Academic content engine: citations, keywords, coherence scoring and outlines."""

from __future__ import annotations

from academic_engine.engine import ContentEngine, build_engine
from academic_engine.errors import EngineError, ProviderError, StorageError, ValidationError

__version__ = "0.1.0"

__all__ = [
    "ContentEngine",
    "EngineError",
    "ProviderError",
    "StorageError",
    "ValidationError",
    "build_engine",
]
