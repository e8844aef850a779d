"""Data structures shared by the archive, markup and segmentation stages."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class EventKind(str, Enum):
    """Structural event kinds produced by the markup reader."""

    START = "start"
    END = "end"
    TEXT = "text"


@dataclass(frozen=True, slots=True)
class MarkupEvent:
    """One structural event in document order.

    ``name`` is the qualified element name for START/END events and ``None``
    for TEXT events; ``text`` is only set for TEXT events.
    """

    kind: EventKind
    name: str | None = None
    text: str | None = None


@dataclass(frozen=True, slots=True)
class BoundaryMarker:
    """A run of terminal punctuation followed by whitespace."""

    start: int
    end: int
    punctuation: str


@dataclass(slots=True)
class ExtractedDocument:
    """Extraction output handed to the viewer."""

    source_path: str
    text: str = ""
    sentences: list[str] = field(default_factory=list)
