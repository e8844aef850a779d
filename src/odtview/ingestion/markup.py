"""Streaming text extraction from document markup."""

from __future__ import annotations

from collections.abc import Iterator
from io import BytesIO
import logging
import re

from lxml import etree

from odtview.ingestion.errors import MarkupError
from odtview.ingestion.models import EventKind, MarkupEvent

LOGGER = logging.getLogger(__name__)

PARAGRAPH_SEPARATOR = " "

# Qualified names exactly as written by the producer. The dot-style names are
# kept alongside the colon-style ones; see DESIGN.md.
TEXT_BEARING_START: frozenset[str] = frozenset({"text:p", "text:h", "text:span", "text.h", "text.span"})
PARAGRAPH_END: frozenset[str] = frozenset({"text:p", "text:h", "text.h"})
INLINE_END: frozenset[str] = frozenset({"text:span", "text.span"})

_PARSER_EVENTS = ("start", "end", "comment", "pi")
_ENCODING_DECL_RE = re.compile(r"\A(\ufeff?<\?xml\s[^>]*?\bencoding\s*=\s*)([\"'])[^\"']*\2")


def _qualified_name(element: etree._Element) -> str:
    localname = etree.QName(element).localname
    if element.prefix:
        return f"{element.prefix}:{localname}"
    return localname


def _release(element: etree._Element) -> None:
    """Drop a finished subtree and its already-emitted siblings."""

    element.clear(keep_tail=True)
    parent = element.getparent()
    if parent is None:
        return
    while element.getprevious() is not None:
        del parent[0]


def _as_utf8(source: str) -> bytes:
    """Encode decoded markup as UTF-8, rewriting any declared encoding to match."""

    return _ENCODING_DECL_RE.sub(r"\g<1>\g<2>UTF-8\g<2>", source, count=1).encode("utf-8")


def iter_markup_events(source: bytes | str) -> Iterator[MarkupEvent]:
    """Yield START/END/TEXT events in strict document order.

    Text is emitted once the parser has moved past it, so each TEXT event
    carries the complete character run between two tags. Malformed input
    raises ``MarkupError`` instead of ending the stream early.
    """

    payload = _as_utf8(source) if isinstance(source, str) else bytes(source)
    context = etree.iterparse(
        BytesIO(payload),
        events=_PARSER_EVENTS,
        resolve_entities=False,
        no_network=True,
        load_dtd=False,
        huge_tree=False,
    )

    # (node, "text" | "tail") whose character data has not been emitted yet
    pending: tuple[etree._Element, str] | None = None
    try:
        for action, node in context:
            if pending is not None:
                text = getattr(pending[0], pending[1])
                if text:
                    yield MarkupEvent(EventKind.TEXT, text=text)
                pending = None

            if action == "start":
                yield MarkupEvent(EventKind.START, name=_qualified_name(node))
                pending = (node, "text")
            elif action == "end":
                yield MarkupEvent(EventKind.END, name=_qualified_name(node))
                pending = (node, "tail")
                _release(node)
            else:
                pending = (node, "tail")
    except etree.XMLSyntaxError as exc:
        line, column = exc.position
        raise MarkupError(f"Malformed markup: {exc.msg}", line=line, column=column) from exc


def extract_text(markup: bytes | str) -> str:
    """Return the text of paragraphs, headings and inline runs.

    Paragraph and heading ends append a single separator space; inline runs
    add none. Text outside any text-bearing element is discarded.
    """

    parts: list[str] = []
    depth = 0

    for event in iter_markup_events(markup):
        if event.kind is EventKind.START:
            if event.name in TEXT_BEARING_START:
                depth += 1
        elif event.kind is EventKind.END:
            if event.name in PARAGRAPH_END:
                parts.append(PARAGRAPH_SEPARATOR)
                depth -= 1
            elif event.name in INLINE_END:
                depth -= 1
        elif depth > 0 and event.text:
            parts.append(event.text)

    text = "".join(parts)
    LOGGER.debug("Extracted %d characters of text", len(text))
    return text
