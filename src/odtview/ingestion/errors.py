"""Domain errors raised while turning a document into sentences."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(slots=True)
class DocumentError(Exception):
    """Base error for archive, markup and parse failures."""

    message: str
    path: Path | None = None

    def __str__(self) -> str:
        if self.path is None:
            return self.message
        return f"{self.message} (path={self.path})"


class ArchiveIOError(DocumentError):
    """The document file or one of its streams could not be read."""


class ArchiveNotFoundError(ArchiveIOError):
    """The document path does not exist."""


class BadArchiveError(DocumentError):
    """The byte stream is not a readable zip container."""


class MemberNotFoundError(DocumentError):
    """A required archive member is missing."""


class CorruptDataError(DocumentError):
    """A member failed to decompress or its checksum did not match."""


@dataclass(slots=True)
class MarkupError(DocumentError):
    """Malformed markup, reported with the parser position."""

    line: int | None = None
    column: int | None = None

    def __str__(self) -> str:
        location = ""
        if self.line is not None:
            location = f" at line {self.line}"
            if self.column is not None:
                location += f", column {self.column}"
        text = f"{self.message}{location}"
        if self.path is None:
            return text
        return f"{text} (path={self.path})"
