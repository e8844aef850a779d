"""Text rendering for the terminal viewer."""

from __future__ import annotations

from collections.abc import Collection, Sequence
import textwrap

EDITED_MARKER = "(edited)"

HELP_TEXT = (
    "Commands:\n"
    "  n, Enter   next sentence\n"
    "  p          previous sentence\n"
    "  g <n>      go to sentence n\n"
    "  e          edit the current sentence\n"
    "  l          list all sentences\n"
    "  h          show this help\n"
    "  q          quit"
)


def render_sentence(
    *,
    sentence: str,
    position: int,
    total: int,
    edited: bool,
    box_width: int,
) -> str:
    """Draw one sentence inside a box with a position header."""
    inner = box_width - 4
    header = f"Sentence {position}/{total}"
    if edited:
        header = f"{header} {EDITED_MARKER}"

    lines = [f"┌{'─' * (box_width - 2)}┐", f"│ {header[:inner].ljust(inner)} │", f"├{'─' * (box_width - 2)}┤"]
    for row in textwrap.wrap(sentence, width=inner, break_long_words=True) or [""]:
        lines.append(f"│ {row.ljust(inner)} │")
    lines.append(f"└{'─' * (box_width - 2)}┘")
    return "\n".join(lines)


def render_sentence_list(*, sentences: Sequence[str], modified: Collection[int] = ()) -> str:
    """Numbered listing, 1-based, flagging edited entries."""
    rows: list[str] = []
    for idx, sentence in enumerate(sentences, 1):
        marker = f" {EDITED_MARKER}" if idx - 1 in modified else ""
        rows.append(f"{idx}. {sentence}{marker}")
    return "\n".join(rows)


def render_summary(sentences: Sequence[str]) -> str:
    """Plain listing used by the non-interactive print mode."""
    text = f"Found {len(sentences)} sentences"
    if sentences:
        text += "\n" + render_sentence_list(sentences=sentences)
    return text


def render_help() -> str:
    return HELP_TEXT
