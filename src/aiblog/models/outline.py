"""Outline models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class HeadingLevel(str, Enum):
    """Rank of a heading that qualifies for the outline."""

    SECTION = "section"
    SUBSECTION = "subsection"

    @property
    def tag(self) -> str:
        return _LEVEL_TAGS[self]

    @classmethod
    def from_tag(cls, tag: str) -> "HeadingLevel":
        """Map an element name (`h2`/`h3`) to its level."""

        try:
            return _TAG_LEVELS[tag.lower()]
        except KeyError:
            raise ValueError(f"not an outline heading: {tag}") from None


_LEVEL_TAGS = {HeadingLevel.SECTION: "h2", HeadingLevel.SUBSECTION: "h3"}
_TAG_LEVELS = {tag: level for level, tag in _LEVEL_TAGS.items()}


class OutlineState(str, Enum):
    EMPTY = "empty"
    POPULATED = "populated"


class HeadingEntry(BaseModel):
    """A single navigable heading reference."""

    model_config = ConfigDict(frozen=True)

    text: str
    id: str = Field(min_length=1)
    level: HeadingLevel


class Outline(BaseModel):
    """Ordered headings of one document, in order of appearance.

    An empty outline means the document has no qualifying headings (or has not been scanned
    yet) and the navigation panel is not shown.
    """

    document_id: str | None = None
    entries: list[HeadingEntry] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.entries

    @property
    def state(self) -> OutlineState:
        return OutlineState.EMPTY if self.is_empty else OutlineState.POPULATED

    @property
    def ids(self) -> list[str]:
        return [e.id for e in self.entries]

    def __len__(self) -> int:
        return len(self.entries)
