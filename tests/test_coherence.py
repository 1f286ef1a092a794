"""Tests for the coherence heuristics."""

from __future__ import annotations

from academic_engine.analysis.coherence import (
    DOCUMENT_COHERENCE,
    analyze_document,
    analyze_paragraph,
    count_sentences,
)
from academic_engine.models.analysis import CoherenceResult


def test_paragraph_score_counts_sentences() -> None:
    """It should score `A. B. C.` as 65."""

    result = analyze_paragraph("A. B. C.")
    assert result.score == 65
    assert len(result.suggestions) == 3


def test_sentence_splitting_handles_runs_and_blanks() -> None:
    """It should treat `!!!` and `??` as one terminator and skip blank fragments."""

    assert count_sentences("Wait!!! Really?? Yes.") == 3
    assert count_sentences("No terminator here") == 1
    assert count_sentences("  ...  ") == 0
    assert analyze_paragraph("").score == 50


def test_paragraph_score_is_clamped() -> None:
    """It should not exceed 100."""

    assert analyze_paragraph("Short. " * 20).score == 100


def test_suggestions_do_not_depend_on_score() -> None:
    """It should return the same advice for low and high scores."""

    assert analyze_paragraph("One.").suggestions == analyze_paragraph("S. " * 15).suggestions


def test_rating_bands() -> None:
    """It should map scores to qualitative bands."""

    assert CoherenceResult(score=80).rating == "excellent"
    assert CoherenceResult(score=65).rating == "good"
    assert CoherenceResult(score=59).rating == "needs_improvement"
    assert "Excellent" in CoherenceResult(score=95).describe()


def test_document_analysis_shape() -> None:
    """It should return fixed coherence, three suggestions and at most five keywords."""

    text = "research methods research data analysis methods research results discussion theory"
    result = analyze_document(text)
    assert result.coherence == DOCUMENT_COHERENCE == 75
    assert len(result.suggestions) == 3
    assert len(result.keywords) == 5
    assert result.keywords[0].keyword == "research"
