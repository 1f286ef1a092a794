"""Citation manager.

Holds the ordered citation collection in memory and rewrites the whole collection through the
store after every mutation.
"""

from __future__ import annotations

from typing import Iterable

from pydantic import ValidationError as PydanticValidationError

from academic_engine.citations.formatting import format_apa, format_mla
from academic_engine.errors import ValidationError
from academic_engine.logging import get_logger
from academic_engine.models.citation import Citation, CitationDraft, CitationStyle
from academic_engine.store.protocol import CollectionStore
from academic_engine.utils.ids import new_id

logger = get_logger(__name__)


def _check_draft(draft: CitationDraft) -> CitationDraft:
    if not draft.title or not draft.title.strip():
        raise ValidationError("Citation title must not be empty")
    authors = [a.strip() for a in draft.authors if a and a.strip()]
    if not authors:
        raise ValidationError("Citation needs at least one author")
    return draft.model_copy(update={"authors": authors})


class CitationManager:
    """CRUD over citations plus APA/MLA rendering."""

    def __init__(self, store: CollectionStore, collection: str = "citations") -> None:
        self._store = store
        self._collection = collection
        self._citations: list[Citation] = []

    @property
    def collection(self) -> str:
        return self._collection

    def load(self) -> None:
        """Replace in-memory state with the stored collection.

        Records that no longer validate are skipped so one bad entry does not hide the rest.
        """

        citations: list[Citation] = []
        for raw in self._store.load(self._collection):
            try:
                citations.append(Citation.model_validate(raw))
            except PydanticValidationError:
                logger.warning("Skipping malformed citation record in %r: %r", self._collection, raw)
        self._citations = citations
        logger.info("Loaded %d citations from %r", len(citations), self._collection)

    def _persist(self) -> None:
        self._store.save(self._collection, [c.to_record() for c in self._citations])

    def add(self, draft: CitationDraft) -> Citation:
        """Validate, assign an id, append and persist.

        Raises:
            ValidationError: Title is blank or there are no authors.
            StorageError: The collection could not be written.
        """

        draft = _check_draft(draft)
        citation = Citation(id=new_id(), **draft.model_dump())
        self._citations.append(citation)
        self._persist()
        logger.info("Added citation %s", citation.id)
        return citation.model_copy(deep=True)

    def replace(self, citation: Citation) -> bool:
        """Swap the stored record that has `citation.id` for `citation`.

        Returns False when no record has that id.
        """

        checked = _check_draft(citation.draft())
        for idx, existing in enumerate(self._citations):
            if existing.id == citation.id:
                self._citations[idx] = Citation(id=citation.id, **checked.model_dump())
                self._persist()
                return True
        return False

    def delete(self, citation_id: str) -> bool:
        for idx, existing in enumerate(self._citations):
            if existing.id == citation_id:
                del self._citations[idx]
                self._persist()
                logger.info("Deleted citation %s", citation_id)
                return True
        return False

    def get(self, citation_id: str) -> Citation | None:
        for c in self._citations:
            if c.id == citation_id:
                return c.model_copy(deep=True)
        return None

    def list(self) -> list[Citation]:  # noqa: A003
        """All citations in insertion order (copies)."""

        return [c.model_copy(deep=True) for c in self._citations]

    def find_by_keyword(self, keywords: Iterable[str]) -> list[Citation]:
        """Citations whose title contains any keyword, case-insensitively."""

        needles = [k.lower() for k in keywords if k and k.strip()]
        if not needles:
            return []
        out: list[Citation] = []
        for c in self._citations:
            title = c.title.lower()
            if any(n in title for n in needles):
                out.append(c.model_copy(deep=True))
        return out

    def find_by_pdf(self, pdf_id: str) -> list[Citation]:
        """Citations linked to a PDF record."""

        return [c.model_copy(deep=True) for c in self._citations if c.pdf_id == pdf_id]

    @staticmethod
    def format_apa(citation: Citation) -> str:
        return format_apa(citation)

    @staticmethod
    def format_mla(citation: Citation) -> str:
        return format_mla(citation)

    @staticmethod
    def format(citation: Citation, style: CitationStyle | str) -> str:  # noqa: A003
        try:
            style = style if isinstance(style, CitationStyle) else CitationStyle(style.strip().lower())
        except ValueError:
            raise ValidationError(f"Unknown citation style: {style!r}") from None
        if style is CitationStyle.APA:
            return format_apa(citation)
        return format_mla(citation)
