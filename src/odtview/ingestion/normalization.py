"""Whitespace normalization applied before sentence segmentation."""

from __future__ import annotations

import re

_WHITESPACE_RE = re.compile(r"\s+")
_LINE_BREAK_RE = re.compile(r"\r\n|[\r\n\v\f\x1c\x1d\x1e\x85\u2028\u2029]")


def replace_line_breaks(text: str) -> str:
    """Replace every line break with a single plain space."""

    return _LINE_BREAK_RE.sub(" ", text)


def collapse_whitespace(text: str) -> str:
    """Collapse each run of whitespace into one space without trimming."""

    return _WHITESPACE_RE.sub(" ", text)


def normalize_whitespace(text: str) -> str:
    """Trim the text, flatten line breaks and collapse repeated whitespace."""

    return collapse_whitespace(replace_line_breaks(text.strip()))
