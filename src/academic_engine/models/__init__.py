"""Pydantic models used across the engine."""

from __future__ import annotations

from academic_engine.models.analysis import CoherenceResult, DocumentAnalysis, KeywordResult
from academic_engine.models.citation import Citation, CitationDraft, CitationStyle
from academic_engine.models.outline import OutlineSection, PaperOutline

__all__ = [
    "Citation",
    "CitationDraft",
    "CitationStyle",
    "CoherenceResult",
    "DocumentAnalysis",
    "KeywordResult",
    "OutlineSection",
    "PaperOutline",
]
