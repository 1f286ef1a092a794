"""Content engine facade.

`ContentEngine` is the single API surface for UI layers. One instance is the process-scoped
context: construct it once (see `build_engine`) and pass it explicitly to consumers.

Every mutating call updates memory first and then rewrites the whole collection. When the store
raises `StorageError`, the in-memory state already holds the change; `reload()` discards it.
"""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import Callable, Iterable

from pydantic import ValidationError as PydanticValidationError

from academic_engine.analysis import keywords as keyword_engine
from academic_engine.citations.manager import CitationManager
from academic_engine.config import Settings, load_settings
from academic_engine.errors import ValidationError
from academic_engine.logging import engine_context, get_logger, set_operation
from academic_engine.models.analysis import CoherenceResult, DocumentAnalysis, KeywordResult
from academic_engine.models.citation import Citation, CitationDraft, CitationStyle
from academic_engine.models.outline import PaperOutline
from academic_engine.outline import tree
from academic_engine.outline.generator import OutlineGenerator
from academic_engine.providers import AnalysisProvider, create_provider
from academic_engine.store import CollectionStore, create_store
from academic_engine.utils.ids import new_id

logger = get_logger(__name__)


def _require_text(text: str, minimum: int, what: str) -> str:
    if text is None or len(text.strip()) < minimum:
        raise ValidationError(f"{what} must be at least {minimum} characters")
    return text


class ContentEngine:
    """Citations, keyword extraction, coherence analysis and outlines behind one object."""

    def __init__(
        self,
        store: CollectionStore,
        *,
        settings: Settings | None = None,
        provider: AnalysisProvider | None = None,
    ) -> None:
        self.settings = settings or Settings()
        self.session_id = new_id()
        self.store = store
        self.provider = provider or create_provider(self.settings)

        self.citations = CitationManager(store, self.settings.citations_collection)
        self.outlines = OutlineGenerator(store, self.provider, self.settings.outlines_collection)
        self.reload()

    def _op(self, name: str) -> AbstractContextManager[None]:
        return engine_context(session=self.session_id, op=name)

    def reload(self) -> None:
        """Re-read both collections from the store, dropping unsaved in-memory changes."""

        with self._op("reload"):
            set_operation("reload.citations")
            self.citations.load()
            set_operation("reload.outlines")
            self.outlines.load()

    # Citations

    def add_citation(self, draft: CitationDraft | dict) -> Citation:
        with self._op("add_citation"):
            if isinstance(draft, dict):
                try:
                    draft = CitationDraft.model_validate(draft)
                except PydanticValidationError as e:
                    raise ValidationError(f"Invalid citation: {e}") from e
            return self.citations.add(draft)

    def update_citation(self, citation: Citation) -> bool:
        with self._op("update_citation"):
            return self.citations.replace(citation)

    def delete_citation(self, citation_id: str) -> bool:
        with self._op("delete_citation"):
            return self.citations.delete(citation_id)

    def get_citation(self, citation_id: str) -> Citation | None:
        return self.citations.get(citation_id)

    def list_citations(self) -> list[Citation]:
        return self.citations.list()

    def find_citations(self, keywords: Iterable[str]) -> list[Citation]:
        return self.citations.find_by_keyword(keywords)

    def citations_for_pdf(self, pdf_id: str) -> list[Citation]:
        return self.citations.find_by_pdf(pdf_id)

    def format_citation(self, citation: Citation | str, style: CitationStyle | str = CitationStyle.APA) -> str:
        """Render a citation (or the stored citation with that id).

        Raises:
            KeyError: An id was given and no citation has it.
        """

        if isinstance(citation, str):
            found = self.citations.get(citation)
            if found is None:
                raise KeyError(citation)
            citation = found
        return self.citations.format(citation, style)

    # Analysis

    def extract_keywords(self, text: str, top_n: int | None = None) -> list[KeywordResult]:
        """Standalone keyword extraction (defaults to `standalone_keyword_count` terms)."""

        _require_text(text, self.settings.min_document_chars, "Text")
        return keyword_engine.extract(text, self._keyword_count(top_n))

    def optimize_keywords(self, text: str, top_n: int | None = None) -> list[KeywordResult]:
        _require_text(text, self.settings.min_document_chars, "Text")
        return keyword_engine.optimize(text, self._keyword_count(top_n))

    def _keyword_count(self, top_n: int | None) -> int:
        # 0 and negatives are passed through: they mean "no keywords"
        return self.settings.standalone_keyword_count if top_n is None else top_n

    def analyze_text(self, text: str) -> DocumentAnalysis:
        with self._op("analyze_text"):
            _require_text(text, self.settings.min_document_chars, "Text")
            return self.provider.analyze_text(text)

    def analyze_paragraph(self, text: str) -> CoherenceResult:
        with self._op("analyze_paragraph"):
            _require_text(text, self.settings.min_paragraph_chars, "Paragraph")
            return self.provider.analyze_paragraph(text)

    # Outlines

    def generate_outline(self, topic: str, description: str = "") -> PaperOutline:
        with self._op("generate_outline"):
            return self.outlines.generate(topic, description)

    def list_outlines(self) -> list[PaperOutline]:
        return self.outlines.list()

    def get_outline(self, outline_id: str) -> PaperOutline | None:
        return self.outlines.get(outline_id)

    def update_outline(self, outline: PaperOutline) -> bool:
        with self._op("update_outline"):
            return self.outlines.replace(outline)

    def delete_outline(self, outline_id: str) -> bool:
        with self._op("delete_outline"):
            return self.outlines.delete(outline_id)

    def _edit_outline(
        self, outline_id: str, op: str, edit: Callable[[PaperOutline], PaperOutline]
    ) -> PaperOutline:
        with self._op(op):
            outline = self.outlines.get(outline_id)
            if outline is None:
                raise KeyError(outline_id)
            edited = edit(outline)
            set_operation(f"{op}.save")
            self.outlines.replace(edited)
            logger.debug("Outline %s edited", outline_id)
            return edited

    def add_section(self, outline_id: str, title: str, description: str = "") -> PaperOutline:
        return self._edit_outline(outline_id, "add_section", lambda o: tree.add_section(o, title, description))

    def add_subsection(
        self,
        outline_id: str,
        parent_id: str,
        title: str = tree.DEFAULT_SUBSECTION_TITLE,
        description: str = "",
    ) -> PaperOutline:
        return self._edit_outline(
            outline_id,
            "add_subsection",
            lambda o: tree.add_subsection(o, parent_id, title, description),
        )

    def update_section(
        self,
        outline_id: str,
        section_id: str,
        *,
        title: str | None = None,
        description: str | None = None,
    ) -> PaperOutline:
        return self._edit_outline(
            outline_id,
            "update_section",
            lambda o: tree.update_section(o, section_id, title=title, description=description),
        )

    def remove_section(self, outline_id: str, section_id: str) -> PaperOutline:
        return self._edit_outline(outline_id, "remove_section", lambda o: tree.remove_section(o, section_id))


def build_engine(settings: Settings | None = None) -> ContentEngine:
    """Create an engine from settings (loaded from the environment when omitted)."""

    settings = settings or load_settings()
    return ContentEngine(create_store(settings), settings=settings, provider=create_provider(settings))
