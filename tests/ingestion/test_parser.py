from __future__ import annotations

import logging
from pathlib import Path
from zipfile import ZIP_DEFLATED, ZIP_STORED, ZipFile

import pytest

from odtview.ingestion import parse_document
from odtview.ingestion.archive import ODT_MIMETYPE
from odtview.ingestion.errors import ArchiveIOError, ArchiveNotFoundError, MarkupError, MemberNotFoundError
from odtview.ingestion.parser import DocumentParser

_MANIFEST = """<?xml version="1.0" encoding="UTF-8"?>
<manifest:manifest xmlns:manifest="urn:oasis:names:tc:opendocument:xmlns:manifest:1.0">
    <manifest:file-entry manifest:full-path="/" manifest:media-type="application/vnd.oasis.opendocument.text"/>
    <manifest:file-entry manifest:full-path="content.xml" manifest:media-type="text/xml"/>
</manifest:manifest>"""

_CONTENT_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<office:document-content
    xmlns:office="urn:oasis:names:tc:opendocument:xmlns:office:1.0"
    xmlns:text="urn:oasis:names:tc:opendocument:xmlns:text:1.0">
    <office:body>
        <office:text>
            {body}
        </office:text>
    </office:body>
</office:document-content>"""


def _build_odt(
    path: Path,
    body: str,
    *,
    mimetype: str = ODT_MIMETYPE,
    content_member: str = "content.xml",
) -> Path:
    with ZipFile(path, "w") as archive:
        archive.writestr("mimetype", mimetype, compress_type=ZIP_STORED)
        archive.writestr("META-INF/manifest.xml", _MANIFEST, compress_type=ZIP_DEFLATED)
        archive.writestr(content_member, _CONTENT_TEMPLATE.format(body=body), compress_type=ZIP_DEFLATED)
    return path


def test_parse_document_splits_paragraphs_and_headings(tmp_path: Path) -> None:
    body = """
        <text:p>This is the first paragraph with two sentences. Here is the second sentence!</text:p>
        <text:p>This is a second paragraph. It also has multiple sentences? Yes, it does.</text:p>
        <text:h>This is a heading.</text:h>
        <text:p>Final paragraph after the heading.</text:p>
    """
    source = _build_odt(tmp_path / "test_document.odt", body)

    sentences = parse_document(source)

    assert sentences == [
        "This is the first paragraph with two sentences.",
        "Here is the second sentence!",
        "This is a second paragraph.",
        "It also has multiple sentences?",
        "Yes, it does.",
        "This is a heading.",
        "Final paragraph after the heading.",
    ]


def test_paragraph_without_punctuation_is_separated_from_the_next(tmp_path: Path) -> None:
    body = "<text:h>Heading without stop</text:h><text:p>Body <text:span>with span</text:span> text.</text:p>"
    source = _build_odt(tmp_path / "doc.odt", body)

    document = DocumentParser().extract(source)

    assert document.source_path == str(source)
    assert document.text == "Heading without stop Body with span text. "
    assert document.sentences == ["Heading without stop Body with span text."]


def test_missing_file_raises_not_found(tmp_path: Path) -> None:
    with pytest.raises(ArchiveNotFoundError):
        parse_document(tmp_path / "nonexistent.odt")


def test_archive_without_content_member_raises_member_not_found(tmp_path: Path) -> None:
    source = tmp_path / "invalid.odt"
    with ZipFile(source, "w") as archive:
        archive.writestr("dummy.txt", "This is not an ODT file")

    with pytest.raises(MemberNotFoundError) as excinfo:
        parse_document(source)

    assert not isinstance(excinfo.value, ArchiveIOError)
    assert excinfo.value.path == source


def test_malformed_content_reports_document_path(tmp_path: Path) -> None:
    source = _build_odt(tmp_path / "broken.odt", "<text:p>Unclosed paragraph")

    with pytest.raises(MarkupError) as excinfo:
        parse_document(source)

    assert excinfo.value.path == source
    assert "broken.odt" in str(excinfo.value)


def test_unexpected_mimetype_is_logged_not_fatal(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    source = _build_odt(tmp_path / "sheet.odt", "<text:p>Still readable.</text:p>", mimetype="application/zip")

    with caplog.at_level(logging.WARNING, logger="odtview.ingestion.parser"):
        sentences = parse_document(source)

    assert sentences == ["Still readable."]
    assert "Unexpected document mimetype" in caplog.text


def test_parser_instance_is_reusable_across_documents(tmp_path: Path) -> None:
    first = _build_odt(tmp_path / "first.odt", "<text:p>One. Two.</text:p>")
    second = _build_odt(tmp_path / "second.odt", "<text:p>Three!</text:p>")
    parser = DocumentParser()

    assert parser.parse(first) == ["One.", "Two."]
    assert parser.parse(second) == ["Three!"]
    assert parser.parse(first) == ["One.", "Two."]


def test_custom_content_member(tmp_path: Path) -> None:
    source = _build_odt(tmp_path / "custom.odt", "<text:p>Custom member.</text:p>", content_member="body.xml")

    assert DocumentParser(content_member="body.xml").parse(source) == ["Custom member."]
    with pytest.raises(MemberNotFoundError):
        DocumentParser().parse(source)


def test_empty_content_member_name_is_rejected() -> None:
    with pytest.raises(ValueError, match="content_member"):
        DocumentParser(content_member="")


def test_corrupt_mimetype_member_is_logged_not_fatal(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    source = _build_odt(tmp_path / "damaged.odt", "<text:p>Fine. Text.</text:p>")
    raw = source.read_bytes()
    source.write_bytes(raw.replace(ODT_MIMETYPE.encode("ascii"), b"application/vnd.oasis.opendocument.texT", 1))

    with caplog.at_level(logging.WARNING, logger="odtview.ingestion.parser"):
        sentences = parse_document(source)

    assert sentences == ["Fine.", "Text."]
    assert "Skipping unreadable mimetype" in caplog.text
