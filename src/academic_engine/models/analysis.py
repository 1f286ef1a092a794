"""Transient analysis result models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


CoherenceRating = Literal["excellent", "good", "needs_improvement"]

_RATING_TEXT: dict[str, str] = {
    "excellent": "Excellent paragraph coherence and flow.",
    "good": "Good paragraph structure with some room for improvement.",
    "needs_improvement": "Paragraph needs significant improvement in coherence.",
}


class KeywordResult(BaseModel):
    """A ranked keyword from a single extraction call."""

    keyword: str
    relevance: int = Field(ge=0, le=100)
    frequency: int = Field(ge=1)
    suggestions: list[str] = Field(default_factory=list)


class CoherenceResult(BaseModel):
    """Coherence score for a paragraph."""

    score: int = Field(ge=0, le=100)
    suggestions: list[str] = Field(default_factory=list)

    @property
    def rating(self) -> CoherenceRating:
        if self.score >= 80:
            return "excellent"
        if self.score >= 60:
            return "good"
        return "needs_improvement"

    def describe(self) -> str:
        """Human wording for the score band."""

        return _RATING_TEXT[self.rating]


class DocumentAnalysis(BaseModel):
    """Whole-document writing analysis."""

    suggestions: list[str] = Field(default_factory=list)
    coherence: int = Field(ge=0, le=100)
    keywords: list[KeywordResult] = Field(default_factory=list)
