"""Punctuation-driven sentence segmentation."""

from __future__ import annotations

import re

from odtview.ingestion.models import BoundaryMarker
from odtview.ingestion.normalization import normalize_whitespace

TERMINAL_PUNCTUATION = ".!?"

_BOUNDARY_RE = re.compile(rf"([{re.escape(TERMINAL_PUNCTUATION)}]+)\s+")


def find_boundary_markers(text: str) -> list[BoundaryMarker]:
    """Locate every punctuation run that is followed by whitespace."""

    return [
        BoundaryMarker(start=match.start(), end=match.end(), punctuation=match.group(1))
        for match in _BOUNDARY_RE.finditer(text)
    ]


def split_sentences(text: str) -> list[str]:
    """Split text into sentences that keep their closing punctuation.

    Each segment before a boundary marker gets the marker's punctuation
    appended; the trailing segment is kept as-is. Segments that are empty
    after trimming are dropped along with their punctuation.
    """

    normalized = normalize_whitespace(text)
    sentences: list[str] = []
    cursor = 0

    for marker in find_boundary_markers(normalized):
        segment = normalized[cursor : marker.start].strip()
        cursor = marker.end
        if segment:
            sentences.append(segment + marker.punctuation)

    tail = normalized[cursor:].strip()
    if tail:
        sentences.append(tail)
    return sentences
