"""Editable in-memory copy of a document's sentences."""

from __future__ import annotations

from collections.abc import Sequence


class SentenceSession:
    """Cursor over a private copy of the sentence list.

    Positions exposed to humans are 1-based; ``index`` is 0-based. Edits stay
    in memory and never reach the source document.
    """

    def __init__(self, sentences: Sequence[str]) -> None:
        self._original = list(sentences)
        self._sentences = list(sentences)
        self._index = 0

    def __len__(self) -> int:
        return len(self._sentences)

    @property
    def index(self) -> int:
        return self._index

    @property
    def position(self) -> int:
        return self._index + 1

    @property
    def sentences(self) -> list[str]:
        return list(self._sentences)

    @property
    def current(self) -> str:
        if not self._sentences:
            raise IndexError("Session has no sentences")
        return self._sentences[self._index]

    @property
    def at_start(self) -> bool:
        return self._index == 0

    @property
    def at_end(self) -> bool:
        return self._index >= len(self._sentences) - 1

    def next(self) -> bool:
        """Advance one sentence; return False when already at the last one."""
        if self.at_end:
            return False
        self._index += 1
        return True

    def previous(self) -> bool:
        """Step back one sentence; return False when already at the first one."""
        if self.at_start:
            return False
        self._index -= 1
        return True

    def goto(self, position: int) -> None:
        """Jump to a 1-based position."""
        if not 1 <= position <= len(self._sentences):
            raise ValueError(f"Position must be between 1 and {len(self._sentences)}")
        self._index = position - 1

    def edit(self, text: str) -> None:
        """Replace the current sentence."""
        cleaned = text.strip()
        if not cleaned:
            raise ValueError("Sentence text cannot be empty")
        if not self._sentences:
            raise IndexError("Session has no sentences")
        self._sentences[self._index] = cleaned

    def is_modified(self, index: int) -> bool:
        return self._sentences[index] != self._original[index]

    def modified_indices(self) -> list[int]:
        return [index for index in range(len(self._sentences)) if self.is_modified(index)]
