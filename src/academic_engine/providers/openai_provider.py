"""Remote-model provider backed by an OpenAI-compatible chat API.

The model is asked for strict JSON; replies are parsed tolerantly and validated with pydantic so
the returned objects have exactly the same shape as the heuristic provider's.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Protocol, Sequence

from pydantic import BaseModel, Field, ValidationError as PydanticValidationError

from academic_engine.analysis.keywords import extract
from academic_engine.errors import ProviderError
from academic_engine.llm.client import ChatMessage
from academic_engine.logging import get_logger
from academic_engine.models.analysis import CoherenceResult, DocumentAnalysis, KeywordResult
from academic_engine.models.outline import OutlineSection, PaperOutline
from academic_engine.outline.template import SECTION_TITLES
from academic_engine.providers.protocol import AnalysisProvider
from academic_engine.utils.ids import new_id
from academic_engine.utils.json_extract import extract_json_object

logger = get_logger(__name__)

_SYSTEM_PROMPT = (
    "You are an academic writing assistant. "
    "Always answer with a single JSON object and nothing else."
)


class ChatCompleter(Protocol):
    def complete(self, messages: Sequence[ChatMessage], *, temperature: float = 0.2) -> str: ...


class _SectionReply(BaseModel):
    title: str
    description: str = ""


class _OutlineReply(BaseModel):
    sections: list[_SectionReply]


class _DocumentReply(BaseModel):
    suggestions: list[str] = Field(min_length=1)
    coherence: float = Field(allow_inf_nan=False)
    keywords: list[KeywordResult] | None = None


class _ParagraphReply(BaseModel):
    score: float = Field(allow_inf_nan=False)
    suggestions: list[str] = Field(min_length=1)


def _clamp_score(value: float) -> int:
    return max(0, min(int(round(value)), 100))


class OpenAIProvider(AnalysisProvider):
    """Provider that delegates to a chat-completion model."""

    kind = "openai"

    def __init__(self, llm: ChatCompleter, keyword_count: int = 5, temperature: float = 0.2) -> None:
        self._llm = llm
        self.keyword_count = keyword_count
        self.temperature = temperature

    def _ask(self, prompt: str, schema: type[BaseModel]) -> Any:
        reply = self._llm.complete(
            [ChatMessage(role="system", content=_SYSTEM_PROMPT), ChatMessage(role="user", content=prompt)],
            temperature=self.temperature,
        )
        obj = extract_json_object(reply)
        if obj is None:
            logger.warning("Model reply had no JSON object (%d chars)", len(reply))
            raise ProviderError("model reply did not contain a JSON object")
        try:
            return schema.model_validate(obj)
        except PydanticValidationError as e:
            raise ProviderError(f"model reply did not match {schema.__name__}: {e}") from e

    def generate_outline(self, topic: str, description: str) -> PaperOutline:
        titles = ", ".join(SECTION_TITLES)
        prompt = (
            f"Write a paper outline for the topic below.\n"
            f"Use exactly these sections, in this order: {titles}.\n"
            'Return {"sections": [{"title": "...", "description": "one sentence"}, ...]}.\n\n'
            f"Topic: {topic}\nDescription: {description}"
        )
        reply: _OutlineReply = self._ask(prompt, _OutlineReply)
        return PaperOutline(
            id=new_id(),
            title=topic,
            description=description,
            created_at=datetime.now(timezone.utc),
            sections=[
                OutlineSection(id=new_id(), title=s.title.strip(), description=s.description.strip())
                for s in reply.sections
            ],
        )

    def analyze_text(self, text: str) -> DocumentAnalysis:
        prompt = (
            "Review the academic text below for structure and clarity.\n"
            'Return {"suggestions": ["three concrete suggestions"], "coherence": 0-100}.\n\n'
            f"Text:\n{text}"
        )
        reply: _DocumentReply = self._ask(prompt, _DocumentReply)
        keywords = reply.keywords if reply.keywords else extract(text, self.keyword_count)
        return DocumentAnalysis(
            suggestions=reply.suggestions,
            coherence=_clamp_score(reply.coherence),
            keywords=keywords,
        )

    def analyze_paragraph(self, text: str) -> CoherenceResult:
        prompt = (
            "Rate how coherent the paragraph below is (topic sentence, transitions, support).\n"
            'Return {"score": 0-100, "suggestions": ["three concrete suggestions"]}.\n\n'
            f"Paragraph:\n{text}"
        )
        reply: _ParagraphReply = self._ask(prompt, _ParagraphReply)
        return CoherenceResult(score=_clamp_score(reply.score), suggestions=reply.suggestions)
