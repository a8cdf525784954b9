"""Data models for article paragraphs, inline markups, and rendered fragments"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Kind(str, Enum):
    """Every type token the article format can carry, for paragraphs and markups alike."""
    P    = "P"
    H3   = "H3"
    H4   = "H4"
    CODE = "CODE"
    PRE  = "PRE"
    ULI  = "ULI"
    BQ   = "BQ"
    A    = "A"
    IMG  = "IMG"


class BlockKind(str, Enum):
    """Kinds a paragraph may render as. IMG is block-only."""
    P    = "P"
    H3   = "H3"
    H4   = "H4"
    CODE = "CODE"
    PRE  = "PRE"
    ULI  = "ULI"
    BQ   = "BQ"
    IMG  = "IMG"


class InlineKind(str, Enum):
    """Kinds a markup span may render as. A is inline-only."""
    P    = "P"
    H3   = "H3"
    H4   = "H4"
    CODE = "CODE"
    PRE  = "PRE"
    ULI  = "ULI"
    BQ   = "BQ"
    A    = "A"


class Layout(str, Enum):
    INSET_CENTER = "INSET_CENTER"


class Metadata(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    image_ref: str = Field(alias="__ref", strict=True)


class Markup(BaseModel):
    """An inline span over [start, end) of the owning paragraph's text, in codepoints."""
    start: int            = Field(ge=0, strict=True)
    end:   int            = Field(ge=0, strict=True)
    type:  Kind
    href:  Optional[str]  = Field(default=None, strict=True)

    @model_validator(mode="after")
    def _ordered(self) -> "Markup":
        if self.start > self.end:
            raise ValueError(f"markup start {self.start} is after end {self.end}")
        return self


class Paragraph(BaseModel):
    """One block of article text with its inline markups."""
    text:     str                = Field(strict=True)
    type:     Kind
    markups:  list[Markup]       # order as given; not sorted
    layout:   Optional[Layout]   = None     # carried through; no rendering effect
    metadata: Optional[Metadata] = None     # required for IMG paragraphs

    @model_validator(mode="after")
    def _markups_in_range(self) -> "Paragraph":
        length = len(self.text)
        for m in self.markups:
            if m.end > length:
                raise ValueError(f"markup [{m.start}, {m.end}) exceeds text length {length}")
        return self


@dataclass(frozen=True)
class Fragment:
    """A rendered paragraph tagged with the block kind it came from."""
    kind: BlockKind
    html: str
