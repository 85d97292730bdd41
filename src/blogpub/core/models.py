"""Data models for the metadata, render, and record-building pipeline"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


@dataclass
class MetadataBlock:
    """Scalar and list-valued metadata keyed by lowercase name."""
    scalars: dict[str, str]       = field(default_factory=dict)
    lists:   dict[str, list[str]] = field(default_factory=dict)

    def scalar(self, key: str) -> str:
        """Return the scalar value for key (case-insensitive), or '' if absent."""
        return self.scalars.get(key.lower(), "")

    def list(self, key: str) -> list[str]:
        """Return a copy of the list value for key (case-insensitive), or []."""
        return list(self.lists.get(key.lower(), []))

    def is_empty(self) -> bool:
        return not self.scalars and not self.lists


@dataclass(frozen=True)
class RenderedBlock:
    """Block renderer output: HTML fragment, first paragraph text, implicit title."""
    html:            str
    first_paragraph: str = ""
    title:           Optional[str] = None   # text of the first level-1 heading


class DocumentRecord(BaseModel):
    """A fully built document, ready for page rendering."""
    model_config = ConfigDict(frozen=True)

    title:       str
    slug:        str
    authors:     tuple[str, ...] = ()
    author_line: str = ""
    tags:        tuple[str, ...] = ()
    date:        datetime
    date_iso:    str
    date_human:  str
    content:     str             # already HTML-safe
    excerpt:     str = ""
    source_path: str
    output_path: str
    href:        str


class Collection(BaseModel):
    """Ordered records handed to the listing page."""
    model_config = ConfigDict(frozen=True)

    posts: tuple[DocumentRecord, ...] = ()
