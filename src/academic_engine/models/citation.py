"""Citation models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class CitationStyle(str, Enum):
    """Supported citation rendering styles."""

    APA = "apa"
    MLA = "mla"


class CitationDraft(BaseModel):
    """A citation as submitted by a caller, before an id is assigned.

    Shape checks (non-empty title, at least one author) are done by the citation manager so they
    surface as the engine's own `ValidationError`.
    """

    model_config = ConfigDict(populate_by_name=True)

    title: str
    authors: list[str] = Field(default_factory=list)
    year: int
    source: str = ""
    url: str | None = None
    pdf_id: str | None = Field(default=None, alias="pdfId")


class Citation(BaseModel):
    """A stored bibliographic reference.

    `pdf_id` points at a record in the external PDF store; the engine only keeps and forwards it.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str
    title: str
    authors: list[str] = Field(min_length=1)
    year: int
    source: str = ""
    url: str | None = None
    pdf_id: str | None = Field(default=None, alias="pdfId")

    def to_record(self) -> dict:
        """Serialize to the persisted (camelCase) record layout."""

        return self.model_dump(mode="json", by_alias=True)

    def draft(self) -> CitationDraft:
        """Return this citation's fields without the id."""

        return CitationDraft.model_validate(self.model_dump(exclude={"id"}))
