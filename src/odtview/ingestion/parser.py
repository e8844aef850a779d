"""Composition of archive loading, text extraction and segmentation."""

from __future__ import annotations

import logging
from pathlib import Path

from odtview.ingestion.archive import ODT_MIMETYPE, DocumentArchive
from odtview.ingestion.errors import DocumentError
from odtview.ingestion.markup import extract_text
from odtview.ingestion.models import ExtractedDocument
from odtview.ingestion.segmentation import split_sentences

LOGGER = logging.getLogger(__name__)

DEFAULT_CONTENT_MEMBER = "content.xml"


class DocumentParser:
    """Turn a document container into an ordered list of sentences.

    The parser holds configuration only, so one instance can be reused for
    any number of documents.
    """

    def __init__(self, content_member: str = DEFAULT_CONTENT_MEMBER) -> None:
        if not content_member:
            raise ValueError("content_member cannot be empty")
        self._content_member = content_member

    @property
    def content_member(self) -> str:
        return self._content_member

    def extract(self, path: str | Path) -> ExtractedDocument:
        """Read the content member and return its text and sentences."""

        source = Path(path)
        try:
            with DocumentArchive.open(source) as archive:
                self._check_mimetype(archive)
                markup = archive.read_member(self._content_member)
            text = extract_text(markup)
        except DocumentError as exc:
            if exc.path is None:
                exc.path = source
            raise

        sentences = split_sentences(text)
        LOGGER.debug("Parsed %d sentences from %s", len(sentences), source)
        return ExtractedDocument(source_path=str(source), text=text, sentences=sentences)

    def parse(self, path: str | Path) -> list[str]:
        """Return the sentences of the document at ``path``."""

        return self.extract(path).sentences

    def _check_mimetype(self, archive: DocumentArchive) -> None:
        try:
            mimetype = archive.mimetype()
        except DocumentError as exc:
            LOGGER.warning("Skipping unreadable mimetype in %s: %s", archive.path, exc.message)
            return
        if mimetype is not None and mimetype != ODT_MIMETYPE:
            LOGGER.warning("Unexpected document mimetype %r in %s", mimetype, archive.path)


def parse_document(path: str | Path) -> list[str]:
    """Parse one document with the default content member."""

    return DocumentParser().parse(path)
