"""Paper outline models."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class OutlineSection(BaseModel):
    """A node of the outline tree.

    The generator only produces top-level sections, but `subsections` nests to any depth.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    description: str = ""
    subsections: list["OutlineSection"] = Field(default_factory=list)


class PaperOutline(BaseModel):
    """A section plan for a paper."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str
    title: str
    description: str = ""
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), alias="createdAt")
    sections: list[OutlineSection] = Field(default_factory=list)

    @field_validator("created_at", mode="before")
    @classmethod
    def _accept_epoch_millis(cls, value: Any) -> Any:
        # Older stores kept createdAt as epoch milliseconds
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return datetime.fromtimestamp(value / 1000.0, tz=timezone.utc)
        return value

    def section_titles(self) -> list[str]:
        """Top-level section titles in order."""

        return [s.title for s in self.sections]

    def to_record(self) -> dict:
        """Serialize to the persisted (camelCase) record layout."""

        return self.model_dump(mode="json", by_alias=True)
