"""Paper outline generation and editing."""

from __future__ import annotations

from academic_engine.outline.generator import OutlineGenerator
from academic_engine.outline.template import SECTION_TEMPLATE, SECTION_TITLES, build_template_outline
from academic_engine.outline.tree import (
    add_section,
    add_subsection,
    find_section,
    remove_section,
    update_section,
)

__all__ = [
    "OutlineGenerator",
    "SECTION_TEMPLATE",
    "SECTION_TITLES",
    "add_section",
    "add_subsection",
    "build_template_outline",
    "find_section",
    "remove_section",
    "update_section",
]
