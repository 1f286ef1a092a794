"""Outline generator and the outline collection it owns."""

from __future__ import annotations

from pydantic import ValidationError as PydanticValidationError

from academic_engine.errors import ProviderError, ValidationError
from academic_engine.logging import get_logger
from academic_engine.models.outline import OutlineSection, PaperOutline
from academic_engine.outline.template import SECTION_TITLES
from academic_engine.outline.tree import iter_ids
from academic_engine.providers.protocol import AnalysisProvider
from academic_engine.store.protocol import CollectionStore
from academic_engine.utils.ids import new_id

logger = get_logger(__name__)


def _enforce_template(outline: PaperOutline) -> PaperOutline:
    """Check a provider's outline against the template and give every node a fresh id.

    Raises:
        ProviderError: Sections are missing, extra, or out of order.
    """

    titles = tuple(s.title for s in outline.sections)
    if titles != SECTION_TITLES:
        raise ProviderError(f"outline sections {list(titles)} do not match {list(SECTION_TITLES)}")

    def reid(section: OutlineSection) -> OutlineSection:
        return section.model_copy(
            update={"id": new_id(), "subsections": [reid(child) for child in section.subsections]}
        )

    return outline.model_copy(update={"id": new_id(), "sections": [reid(s) for s in outline.sections]})


class OutlineGenerator:
    """Generates outlines through a provider and keeps the outline collection."""

    def __init__(
        self,
        store: CollectionStore,
        provider: AnalysisProvider,
        collection: str = "paper_outlines",
    ) -> None:
        self._store = store
        self._collection = collection
        self._provider = provider
        self._outlines: list[PaperOutline] = []

    @property
    def collection(self) -> str:
        return self._collection

    def load(self) -> None:
        """Replace in-memory state with the stored collection, skipping malformed records."""

        outlines: list[PaperOutline] = []
        for raw in self._store.load(self._collection):
            try:
                outlines.append(PaperOutline.model_validate(raw))
            except PydanticValidationError:
                logger.warning("Skipping malformed outline record in %r", self._collection)
        self._outlines = outlines
        logger.info("Loaded %d outlines from %r", len(outlines), self._collection)

    def _persist(self) -> None:
        self._store.save(self._collection, [o.to_record() for o in self._outlines])

    def generate(self, topic: str, description: str = "") -> PaperOutline:
        """Build a six-section outline for `topic`, store it and return it.

        Raises:
            ValidationError: `topic` is blank.
            ProviderError: The provider failed or broke the section template.
            StorageError: The collection could not be written.
        """

        if not topic or not topic.strip():
            raise ValidationError("Outline topic must not be empty")

        outline = _enforce_template(self._provider.generate_outline(topic, description))
        self._outlines.append(outline)
        self._persist()
        logger.info("Generated outline %s with %d sections", outline.id, len(outline.sections))
        return outline.model_copy(deep=True)

    def replace(self, outline: PaperOutline) -> bool:
        """Store an edited outline in place of the one with the same id.

        Returns False when no outline has that id.
        """

        ids = iter_ids(outline.sections)
        if len(ids) != len(set(ids)):
            raise ValidationError("Outline section ids must be unique")
        for idx, existing in enumerate(self._outlines):
            if existing.id == outline.id:
                self._outlines[idx] = outline.model_copy(deep=True)
                self._persist()
                return True
        return False

    def delete(self, outline_id: str) -> bool:
        for idx, existing in enumerate(self._outlines):
            if existing.id == outline_id:
                del self._outlines[idx]
                self._persist()
                logger.info("Deleted outline %s", outline_id)
                return True
        return False

    def get(self, outline_id: str) -> PaperOutline | None:
        for o in self._outlines:
            if o.id == outline_id:
                return o.model_copy(deep=True)
        return None

    def list(self) -> list[PaperOutline]:  # noqa: A003
        return [o.model_copy(deep=True) for o in self._outlines]
