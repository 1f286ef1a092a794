"""Citation management and formatting."""

from __future__ import annotations

from academic_engine.citations.formatting import format_apa, format_mla, surname_first
from academic_engine.citations.manager import CitationManager

__all__ = ["CitationManager", "format_apa", "format_mla", "surname_first"]
