"""Text analysis: keywords and coherence."""

from __future__ import annotations

from academic_engine.analysis.coherence import analyze_document, analyze_paragraph, count_sentences
from academic_engine.analysis.keywords import extract, optimize, related_phrases, tokenize

__all__ = [
    "analyze_document",
    "analyze_paragraph",
    "count_sentences",
    "extract",
    "optimize",
    "related_phrases",
    "tokenize",
]
