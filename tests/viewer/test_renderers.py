from __future__ import annotations

from odtview.viewer.renderers import render_help, render_sentence, render_sentence_list, render_summary


def test_sentence_box_has_fixed_width_and_header() -> None:
    sentence = "A fairly long sentence that will need to wrap across more than one line of the box."

    rendered = render_sentence(sentence=sentence, position=2, total=5, edited=False, box_width=30)
    lines = rendered.splitlines()

    assert all(len(line) == 30 for line in lines)
    assert lines[0].startswith("┌") and lines[-1].endswith("┘")
    assert "Sentence 2/5" in lines[1]
    assert "(edited)" not in rendered
    body = " ".join(line.strip("│ ").strip() for line in lines[3:-1])
    assert body == sentence


def test_edited_sentence_is_marked() -> None:
    rendered = render_sentence(sentence="Changed.", position=1, total=1, edited=True, box_width=40)

    assert "Sentence 1/1 (edited)" in rendered


def test_sentence_list_is_one_based_and_flags_edits() -> None:
    rendered = render_sentence_list(sentences=["One.", "Two."], modified={1})

    assert rendered.splitlines() == ["1. One.", "2. Two. (edited)"]


def test_summary_matches_print_mode_format() -> None:
    assert render_summary(["One.", "Two!"]) == "Found 2 sentences\n1. One.\n2. Two!"
    assert render_summary([]) == "Found 0 sentences"


def test_help_lists_every_command() -> None:
    text = render_help()

    for command in ("n,", "p ", "g <n>", "e ", "l ", "h ", "q "):
        assert command in text
