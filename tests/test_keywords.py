"""Tests for keyword extraction."""

from __future__ import annotations

from academic_engine.analysis.keywords import extract, optimize, related_phrases, tokenize


def test_extract_ranks_by_frequency_and_drops_short_tokens() -> None:
    """It should rank `brown` over `quick` and ignore tokens of three chars or fewer."""

    results = extract("the quick quick brown brown brown fox", 2)

    assert [(r.keyword, r.frequency, r.relevance) for r in results] == [
        ("brown", 3, 30),
        ("quick", 2, 20),
    ]
    assert results[0].suggestions == ["browns", "browning", "browned"]


def test_extract_breaks_ties_by_first_occurrence() -> None:
    """It should keep first-seen order among equal counts."""

    results = extract("gamma alpha beta alpha gamma beta delta", 4)
    assert [r.keyword for r in results] == ["gamma", "alpha", "beta", "delta"]


def test_extract_is_case_insensitive_and_splits_on_punctuation() -> None:
    """It should lower-case and split on any non-alphanumeric run."""

    assert tokenize("Model, MODEL; model_data--2024!") == ["model", "model", "model", "data", "2024"]
    results = extract("Model, MODEL; model", 5)
    assert len(results) == 1
    assert results[0].keyword == "model"
    assert results[0].frequency == 3


def test_relevance_is_capped() -> None:
    """It should cap relevance at 100."""

    results = extract(" ".join(["citation"] * 14), 1)
    assert results[0].frequency == 14
    assert results[0].relevance == 100


def test_extract_limits_and_empty_inputs() -> None:
    """It should honour top_n and return nothing for empty input or non-positive top_n."""

    text = "one1 two2 three3 four4 five5 six66 seven7"
    assert len(extract(text, 3)) == 3
    assert extract("", 5) == []
    assert extract("a an the", 5) == []
    assert extract(text, 0) == []


def test_optimize_appends_phrases() -> None:
    """It should keep morphological variants first, then related phrases."""

    results = optimize("network network layer", 1)
    assert results[0].keyword == "network"
    assert results[0].suggestions == [
        "networks",
        "networking",
        "networked",
        *related_phrases("network"),
    ]
    assert related_phrases("graph") == ["graph analysis", "graph research", "graph study", "graph framework"]
