"""Ingestion package interfaces."""

from .errors import (
    ArchiveIOError,
    ArchiveNotFoundError,
    BadArchiveError,
    CorruptDataError,
    DocumentError,
    MarkupError,
    MemberNotFoundError,
)
from .parser import DocumentParser, parse_document

__all__ = [
    "ArchiveIOError",
    "ArchiveNotFoundError",
    "BadArchiveError",
    "CorruptDataError",
    "DocumentError",
    "DocumentParser",
    "MarkupError",
    "MemberNotFoundError",
    "parse_document",
]
