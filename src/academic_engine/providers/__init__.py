"""Analysis providers.

`heuristic` is the deterministic default; `openai` delegates to a chat model.
"""

from __future__ import annotations

from academic_engine.config import Settings
from academic_engine.providers.heuristic import HeuristicProvider
from academic_engine.providers.protocol import AnalysisProvider, ProviderKind


def create_provider(settings: Settings) -> AnalysisProvider:
    """Build the provider selected by `settings.provider`."""

    if settings.provider == "openai":
        from academic_engine.llm.client import LLMClient
        from academic_engine.providers.openai_provider import OpenAIProvider

        return OpenAIProvider(LLMClient(settings), keyword_count=settings.document_keyword_count)
    return HeuristicProvider(keyword_count=settings.document_keyword_count)


__all__ = ["AnalysisProvider", "HeuristicProvider", "ProviderKind", "create_provider"]
