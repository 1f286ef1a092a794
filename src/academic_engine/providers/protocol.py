"""Analysis provider capability."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Literal

from academic_engine.models.analysis import CoherenceResult, DocumentAnalysis
from academic_engine.models.outline import PaperOutline

ProviderKind = Literal["heuristic", "openai"]


class AnalysisProvider(ABC):
    """Pluggable implementation of outline generation and text analysis.

    Implementations are synchronous; a remote call either returns or raises `ProviderError`.
    """

    kind: ProviderKind

    @abstractmethod
    def generate_outline(self, topic: str, description: str) -> PaperOutline:
        """Produce a paper outline for a topic."""

    @abstractmethod
    def analyze_text(self, text: str) -> DocumentAnalysis:
        """Whole-document suggestions, coherence and keywords."""

    @abstractmethod
    def analyze_paragraph(self, text: str) -> CoherenceResult:
        """Paragraph coherence score and suggestions."""
