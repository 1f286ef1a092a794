"""Heuristic coherence scoring."""

from __future__ import annotations

import re

from academic_engine.analysis.keywords import extract
from academic_engine.models.analysis import CoherenceResult, DocumentAnalysis

_SENTENCE_END_RE = re.compile(r"[.!?]+")

PARAGRAPH_SUGGESTIONS: tuple[str, ...] = (
    "Ensure topic sentences clearly state the main idea.",
    "Improve transitions between sentences for better flow.",
    "Consider adding more supporting details to strengthen your arguments.",
)

DOCUMENT_SUGGESTIONS: tuple[str, ...] = (
    "Consider using more precise language in the introduction.",
    "The paragraph structure could be improved for better flow.",
    "Add more supporting evidence for your main arguments.",
)

DOCUMENT_COHERENCE = 75


def count_sentences(text: str) -> int:
    """Number of non-blank fragments between runs of `.`, `!` and `?`."""

    return sum(1 for fragment in _SENTENCE_END_RE.split(text) if fragment.strip())


def analyze_paragraph(text: str) -> CoherenceResult:
    """Score a paragraph as `50 + 5 * sentences`, clamped to 0..100."""

    score = max(0, min(50 + 5 * count_sentences(text), 100))
    return CoherenceResult(score=score, suggestions=list(PARAGRAPH_SUGGESTIONS))


def analyze_document(text: str, keyword_count: int = 5) -> DocumentAnalysis:
    """Whole-document analysis.

    The coherence value is a fixed heuristic; remote providers compute a real one.
    """

    return DocumentAnalysis(
        suggestions=list(DOCUMENT_SUGGESTIONS),
        coherence=DOCUMENT_COHERENCE,
        keywords=extract(text, keyword_count),
    )
