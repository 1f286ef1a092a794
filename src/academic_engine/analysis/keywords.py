"""Frequency-based keyword extraction."""

from __future__ import annotations

import re
from collections import Counter

from academic_engine.models.analysis import KeywordResult

_SPLIT_RE = re.compile(r"[^a-z0-9]+")

MIN_TOKEN_LENGTH = 4

_MORPHOLOGICAL_SUFFIXES: tuple[str, ...] = ("s", "ing", "ed")
_PHRASE_SUFFIXES: tuple[str, ...] = ("analysis", "research", "study", "framework")


def tokenize(text: str) -> list[str]:
    """Lower-case `text` and return its tokens longer than three characters, in order."""

    return [t for t in _SPLIT_RE.split(text.lower()) if len(t) >= MIN_TOKEN_LENGTH]


def relevance_for(frequency: int) -> int:
    return min(frequency * 10, 100)


def morphological_variants(token: str) -> list[str]:
    """`token` + s / ing / ed, leaving out any variant equal to the token."""

    return [v for v in (token + suffix for suffix in _MORPHOLOGICAL_SUFFIXES) if v != token]


def related_phrases(keyword: str) -> list[str]:
    """Longer search phrases built around a keyword."""

    return [f"{keyword} {suffix}" for suffix in _PHRASE_SUFFIXES]


def rank_terms(text: str, top_n: int) -> list[tuple[str, int]]:
    """Top `top_n` (token, count) pairs, by count then by first occurrence."""

    if top_n <= 0:
        return []
    # Counter keeps first-occurrence order; sorted() is stable, so ties keep it too
    counts = Counter(tokenize(text))
    return sorted(counts.items(), key=lambda kv: kv[1], reverse=True)[:top_n]


def extract(text: str, top_n: int) -> list[KeywordResult]:
    """Extract the most frequent terms of `text`.

    Args:
        text: Free text.
        top_n: Maximum number of keywords to return.

    Returns:
        Keywords sorted by descending frequency; ties keep first-occurrence order.
    """

    return [
        KeywordResult(
            keyword=token,
            relevance=relevance_for(count),
            frequency=count,
            suggestions=morphological_variants(token),
        )
        for token, count in rank_terms(text, top_n)
    ]


def optimize(text: str, top_n: int) -> list[KeywordResult]:
    """Like `extract`, with related search phrases appended to each keyword's suggestions."""

    return [
        kw.model_copy(update={"suggestions": [*kw.suggestions, *related_phrases(kw.keyword)]})
        for kw in extract(text, top_n)
    ]
