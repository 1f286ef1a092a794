"""Deterministic built-in provider."""

from __future__ import annotations

from academic_engine.analysis.coherence import analyze_document, analyze_paragraph
from academic_engine.models.analysis import CoherenceResult, DocumentAnalysis
from academic_engine.models.outline import PaperOutline
from academic_engine.outline.template import build_template_outline
from academic_engine.providers.protocol import AnalysisProvider


class HeuristicProvider(AnalysisProvider):
    """Template outlines and frequency/sentence-count heuristics."""

    kind = "heuristic"

    def __init__(self, keyword_count: int = 5) -> None:
        self.keyword_count = keyword_count

    def generate_outline(self, topic: str, description: str) -> PaperOutline:
        return build_template_outline(topic, description)

    def analyze_text(self, text: str) -> DocumentAnalysis:
        return analyze_document(text, self.keyword_count)

    def analyze_paragraph(self, text: str) -> CoherenceResult:
        return analyze_paragraph(text)
