"""Tests for outline generation and tree editing."""

from __future__ import annotations

import json

import pytest

from academic_engine.errors import ProviderError, ValidationError
from academic_engine.models.outline import OutlineSection, PaperOutline
from academic_engine.outline import tree
from academic_engine.outline.generator import OutlineGenerator
from academic_engine.outline.template import SECTION_TITLES, build_template_outline
from academic_engine.providers.heuristic import HeuristicProvider
from academic_engine.store import MemoryCollectionStore


class FixedOutlineProvider(HeuristicProvider):
    """Provider returning a prepared outline."""

    def __init__(self, outline: PaperOutline) -> None:
        super().__init__()
        self.outline = outline

    def generate_outline(self, topic: str, description: str) -> PaperOutline:
        return self.outline


def _generator(store: MemoryCollectionStore | None = None, provider=None) -> OutlineGenerator:
    gen = OutlineGenerator(store or MemoryCollectionStore(), provider or HeuristicProvider())
    gen.load()
    return gen


def test_generate_builds_six_fixed_sections() -> None:
    """It should produce the six template sections with unique ids."""

    store = MemoryCollectionStore()
    outline = _generator(store).generate("Sleep and memory", "Effects of sleep on recall")

    assert outline.title == "Sleep and memory"
    assert outline.description == "Effects of sleep on recall"
    assert outline.section_titles() == [
        "Introduction",
        "Literature Review",
        "Methodology",
        "Results",
        "Discussion",
        "Conclusion",
    ]
    assert all(s.description and s.subsections == [] for s in outline.sections)
    ids = [outline.id, *(s.id for s in outline.sections)]
    assert len(set(ids)) == 7

    stored = json.loads(store.raw("paper_outlines"))
    assert stored[0]["id"] == outline.id
    assert "createdAt" in stored[0]


def test_generate_twice_gives_distinct_ids_same_structure() -> None:
    """It should be structurally idempotent but never reuse ids."""

    gen = _generator()
    a = gen.generate("Topic", "desc")
    b = gen.generate("Topic", "desc")

    assert a.id != b.id
    assert a.section_titles() == b.section_titles()
    assert not {s.id for s in a.sections} & {s.id for s in b.sections}
    assert [o.id for o in gen.list()] == [a.id, b.id]


def test_generate_rejects_blank_topic() -> None:
    """It should raise before calling the provider or storing anything."""

    store = MemoryCollectionStore()
    with pytest.raises(ValidationError):
        _generator(store).generate("  ", "desc")
    assert store.exists("paper_outlines") is False


def test_generate_enforces_template_for_other_providers() -> None:
    """It should refuse outlines whose sections break the fixed order."""

    bad = build_template_outline("t", "d")
    bad = bad.model_copy(update={"sections": list(reversed(bad.sections))})
    store = MemoryCollectionStore()
    gen = _generator(store, FixedOutlineProvider(bad))

    with pytest.raises(ProviderError):
        gen.generate("t", "d")
    assert gen.list() == []
    assert store.exists("paper_outlines") is False


def test_generate_reassigns_provider_ids() -> None:
    """It should give every node a fresh id even if the provider repeats them."""

    sections = [OutlineSection(id="same", title=t, description="x") for t in SECTION_TITLES]
    provided = PaperOutline(id="fixed", title="t", sections=sections)

    outline = _generator(provider=FixedOutlineProvider(provided)).generate("t", "d")

    ids = [s.id for s in outline.sections]
    assert len(set(ids)) == 6
    assert "same" not in ids
    assert outline.id != "fixed"


def test_delete_and_get() -> None:
    """It should delete by id and treat unknown ids as a no-op."""

    store = MemoryCollectionStore()
    gen = _generator(store)
    outline = gen.generate("T", "D")

    assert gen.get(outline.id) == outline
    assert gen.delete("nope") is False
    assert gen.delete(outline.id) is True
    assert _generator(store).list() == []


def test_created_at_accepts_epoch_millis() -> None:
    """It should load records written with millisecond timestamps."""

    outline = PaperOutline.model_validate(
        {"id": "o", "title": "t", "description": "", "createdAt": 1700000000000, "sections": []}
    )
    assert outline.created_at.year == 2023
    assert outline.created_at.tzinfo is not None


def test_tree_helpers_do_not_mutate_input() -> None:
    """It should return new outlines and keep the original intact."""

    original = build_template_outline("T", "D")
    intro = original.sections[0]

    grown = tree.add_subsection(original, intro.id)
    grown = tree.add_section(grown, "Appendix", "Extra tables")

    assert original.sections[0].subsections == []
    assert len(original.sections) == 6
    assert grown.sections[0].subsections[0].title == tree.DEFAULT_SUBSECTION_TITLE
    assert grown.sections[-1].title == "Appendix"
    assert grown.id == original.id


def test_tree_nested_edit_and_remove() -> None:
    """It should find, update and remove sections at any depth."""

    outline = build_template_outline("T", "D")
    methods = outline.sections[2]
    outline = tree.add_subsection(outline, methods.id, "Participants")
    child = outline.sections[2].subsections[0]
    outline = tree.add_subsection(outline, child.id, "Recruitment")
    grandchild = outline.sections[2].subsections[0].subsections[0]

    outline = tree.update_section(outline, grandchild.id, description="Flyers and mailing lists")
    assert tree.find_section(outline, grandchild.id).description == "Flyers and mailing lists"
    assert tree.find_section(outline, grandchild.id).title == "Recruitment"

    outline = tree.remove_section(outline, child.id)
    assert outline.sections[2].subsections == []
    assert tree.find_section(outline, grandchild.id) is None


def test_tree_errors() -> None:
    """It should reject blank titles and unknown section ids."""

    outline = build_template_outline("T", "D")
    with pytest.raises(ValidationError):
        tree.add_section(outline, " ")
    with pytest.raises(ValidationError):
        tree.update_section(outline, outline.sections[0].id, title="")
    with pytest.raises(KeyError):
        tree.remove_section(outline, "missing")


def test_replace_persists_edits_and_checks_ids() -> None:
    """It should store an edited outline and refuse duplicate section ids."""

    store = MemoryCollectionStore()
    gen = _generator(store)
    outline = gen.generate("T", "D")

    edited = tree.add_section(outline, "Acknowledgements")
    assert gen.replace(edited) is True
    assert _generator(store).get(outline.id).section_titles()[-1] == "Acknowledgements"

    dup = edited.model_copy(update={"sections": [*edited.sections, edited.sections[0]]})
    with pytest.raises(ValidationError):
        gen.replace(dup)

    assert gen.replace(edited.model_copy(update={"id": "unknown"})) is False
