"""Tests for analysis providers and model-reply parsing."""

from __future__ import annotations

import json
from types import SimpleNamespace
from typing import Sequence

import pytest

from academic_engine.config import Settings
from academic_engine.errors import ProviderError
from academic_engine.llm.client import ChatMessage, LLMClient
from academic_engine.outline.generator import OutlineGenerator
from academic_engine.outline.template import SECTION_TITLES
from academic_engine.providers import HeuristicProvider, create_provider
from academic_engine.providers.openai_provider import OpenAIProvider
from academic_engine.store import MemoryCollectionStore
from academic_engine.utils.json_extract import extract_json_object


class StubLLM:
    """Returns canned replies and records prompts."""

    def __init__(self, *replies: str) -> None:
        self.replies = list(replies)
        self.prompts: list[list[ChatMessage]] = []

    def complete(self, messages: Sequence[ChatMessage], *, temperature: float = 0.2) -> str:
        self.prompts.append(list(messages))
        return self.replies.pop(0)


def _outline_reply(titles: Sequence[str]) -> str:
    sections = [{"title": t, "description": f"About {t.lower()}."} for t in titles]
    return "Here is the outline:\n```json\n" + json.dumps({"sections": sections}) + "\n```"


def test_extract_json_object_strategies() -> None:
    """It should read fenced, bare and prose-wrapped objects."""

    assert extract_json_object('```json\n{"a": 1}\n```') == {"a": 1}
    assert extract_json_object('{"a": 2}') == {"a": 2}
    assert extract_json_object('Sure! {"a": {"b": 3}} Hope this helps.') == {"a": {"b": 3}}
    assert extract_json_object("no json here") is None
    assert extract_json_object("") is None


def test_create_provider_by_kind() -> None:
    """It should default to heuristic and require an API key for openai."""

    assert isinstance(create_provider(Settings(provider="heuristic")), HeuristicProvider)
    with pytest.raises(ValueError):
        create_provider(Settings(provider="openai", openai_api_key=None))


def test_openai_outline_goes_through_template_check() -> None:
    """It should build an outline from the model reply with engine-assigned ids."""

    llm = StubLLM(_outline_reply(SECTION_TITLES))
    gen = OutlineGenerator(MemoryCollectionStore(), OpenAIProvider(llm))
    gen.load()

    outline = gen.generate("Coral reefs", "Bleaching events")

    assert outline.section_titles() == list(SECTION_TITLES)
    assert outline.sections[1].description == "About literature review."
    assert len({s.id for s in outline.sections}) == 6
    assert "Coral reefs" in llm.prompts[0][1].content
    assert llm.prompts[0][0].role == "system"


def test_openai_outline_with_wrong_sections_is_rejected() -> None:
    """It should raise ProviderError when the model drops a section."""

    llm = StubLLM(_outline_reply(SECTION_TITLES[:5]))
    gen = OutlineGenerator(MemoryCollectionStore(), OpenAIProvider(llm))
    gen.load()

    with pytest.raises(ProviderError):
        gen.generate("Coral reefs", "")
    assert gen.list() == []


def test_openai_paragraph_score_is_clamped() -> None:
    """It should clamp out-of-range model scores."""

    provider = OpenAIProvider(StubLLM('{"score": 130, "suggestions": ["Tighten transitions."]}'))
    result = provider.analyze_paragraph("Some paragraph. With two sentences.")
    assert result.score == 100
    assert result.suggestions == ["Tighten transitions."]


def test_openai_document_falls_back_to_local_keywords() -> None:
    """It should compute keywords locally when the model does not send any."""

    text = "graph graph graph node node edge"
    provider = OpenAIProvider(StubLLM('{"suggestions": ["a", "b", "c"], "coherence": 61.6}'), keyword_count=2)

    result = provider.analyze_text(text)

    assert result.coherence == 62
    assert [k.keyword for k in result.keywords] == ["graph", "node"]


@pytest.mark.parametrize(
    "reply",
    [
        "I cannot help with that.",
        '{"score": "high"}',
        '{"suggestions": []}',
        '{"score": NaN, "suggestions": ["x"]}',
        '{"score": Infinity, "suggestions": ["x"]}',
    ],
)
def test_openai_bad_replies_raise_provider_error(reply: str) -> None:
    """It should turn unparseable, invalid or non-finite replies into ProviderError."""

    with pytest.raises(ProviderError):
        OpenAIProvider(StubLLM(reply)).analyze_paragraph("A paragraph to rate.")


def test_openai_document_non_finite_coherence_is_rejected() -> None:
    """It should reject a NaN document coherence instead of crashing on rounding."""

    provider = OpenAIProvider(StubLLM('{"suggestions": ["a"], "coherence": NaN}'))

    with pytest.raises(ProviderError):
        provider.analyze_text("graph graph node edge")


class EmptyCompletions:
    """Chat-completions endpoint that answers with no choices."""

    def create(self, **kwargs: object) -> SimpleNamespace:
        return SimpleNamespace(choices=[])


def test_llm_client_empty_choices_raise_provider_error() -> None:
    """It should report a response without choices as ProviderError."""

    client = LLMClient(Settings(openai_api_key="test-key"))
    client._client = SimpleNamespace(chat=SimpleNamespace(completions=EmptyCompletions()))

    with pytest.raises(ProviderError):
        client.complete([ChatMessage(role="user", content="hello")])
