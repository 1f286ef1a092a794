"""Pure editing helpers for outline trees.

Every helper returns a new `PaperOutline` and leaves its input untouched. Callers resubmit the
result through `OutlineGenerator.replace` (or the facade) to persist it.
"""

from __future__ import annotations

from typing import Callable

from academic_engine.errors import ValidationError
from academic_engine.models.outline import OutlineSection, PaperOutline
from academic_engine.utils.ids import new_id

DEFAULT_SUBSECTION_TITLE = "New Subsection"

_SectionEdit = Callable[[OutlineSection], OutlineSection | None]


def _require_title(title: str) -> str:
    if not title or not title.strip():
        raise ValidationError("Section title must not be empty")
    return title.strip()


def _rewrite(sections: list[OutlineSection], section_id: str, edit: _SectionEdit) -> tuple[list[OutlineSection], bool]:
    """Apply `edit` to the section with `section_id`, anywhere in the tree.

    `edit` returning None removes the section.
    """

    out: list[OutlineSection] = []
    hit = False
    for section in sections:
        if not hit and section.id == section_id:
            hit = True
            replacement = edit(section)
            if replacement is not None:
                out.append(replacement)
            continue
        if not hit and section.subsections:
            children, hit = _rewrite(section.subsections, section_id, edit)
            if hit:
                section = section.model_copy(update={"subsections": children})
        out.append(section)
    return out, hit


def _apply(outline: PaperOutline, section_id: str, edit: _SectionEdit) -> PaperOutline:
    sections, hit = _rewrite(outline.sections, section_id, edit)
    if not hit:
        raise KeyError(section_id)
    return outline.model_copy(update={"sections": sections})


def find_section(outline: PaperOutline, section_id: str) -> OutlineSection | None:
    """Depth-first lookup of a section by id."""

    stack = list(reversed(outline.sections))
    while stack:
        section = stack.pop()
        if section.id == section_id:
            return section
        stack.extend(reversed(section.subsections))
    return None


def add_section(outline: PaperOutline, title: str, description: str = "") -> PaperOutline:
    """Append a top-level section."""

    section = OutlineSection(id=new_id(), title=_require_title(title), description=description)
    return outline.model_copy(update={"sections": [*outline.sections, section]})


def add_subsection(
    outline: PaperOutline,
    parent_id: str,
    title: str = DEFAULT_SUBSECTION_TITLE,
    description: str = "",
) -> PaperOutline:
    """Append a child to the section `parent_id`.

    Raises:
        KeyError: No section has that id.
    """

    child = OutlineSection(id=new_id(), title=_require_title(title), description=description)
    return _apply(
        outline,
        parent_id,
        lambda s: s.model_copy(update={"subsections": [*s.subsections, child]}),
    )


def update_section(
    outline: PaperOutline,
    section_id: str,
    *,
    title: str | None = None,
    description: str | None = None,
) -> PaperOutline:
    """Change a section's title and/or description. Its id and children are kept."""

    update: dict[str, str] = {}
    if title is not None:
        update["title"] = _require_title(title)
    if description is not None:
        update["description"] = description
    return _apply(outline, section_id, lambda s: s.model_copy(update=update))


def remove_section(outline: PaperOutline, section_id: str) -> PaperOutline:
    """Drop a section (and its subtree)."""

    return _apply(outline, section_id, lambda s: None)


def iter_ids(sections: list[OutlineSection]) -> list[str]:
    """All section ids of a tree, depth-first."""

    ids: list[str] = []
    for section in sections:
        ids.append(section.id)
        ids.extend(iter_ids(section.subsections))
    return ids
