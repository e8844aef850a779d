"""Interactive command loop for paging through sentences."""

from __future__ import annotations

from collections.abc import Callable
import logging

from odtview.viewer.renderers import render_help, render_sentence, render_sentence_list
from odtview.viewer.session import SentenceSession

LOGGER = logging.getLogger(__name__)

CLEAR_SCREEN = "\x1b[2J\x1b[H"
PROMPT = "[n]ext [p]rev [g]oto [e]dit [l]ist [h]elp [q]uit > "
EDIT_PROMPT = "New text (empty to cancel): "


class TerminalViewer:
    """Render the current sentence and apply one command per input line."""

    def __init__(
        self,
        session: SentenceSession,
        *,
        box_width: int,
        clear_screen: bool = True,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ) -> None:
        self._session = session
        self._box_width = box_width
        self._clear_screen = clear_screen
        self._input = input_fn
        self._output = output_fn

    @property
    def session(self) -> SentenceSession:
        return self._session

    def run(self) -> list[str]:
        """Run until quit or end of input; return the (possibly edited) sentences."""

        if not len(self._session):
            self._output("No sentences found.")
            return []

        status = ""
        while True:
            self._draw(status)
            try:
                raw = self._input(PROMPT)
            except (EOFError, KeyboardInterrupt):
                self._output("")
                break

            command, _, argument = raw.strip().partition(" ")
            command = command.lower()
            if command in {"q", "quit"}:
                break
            status = self._dispatch(command, argument.strip())

        modified = self._session.modified_indices()
        LOGGER.info("Viewer closed with %d edited sentence(s)", len(modified))
        return self._session.sentences

    def _dispatch(self, command: str, argument: str) -> str:
        session = self._session

        if command in {"", "n", "next"}:
            return "" if session.next() else "Already at the last sentence."
        if command in {"p", "prev", "previous"}:
            return "" if session.previous() else "Already at the first sentence."
        if command in {"g", "goto"}:
            return self._goto(argument)
        if command in {"e", "edit"}:
            return self._edit()
        if command in {"l", "list"}:
            return render_sentence_list(sentences=session.sentences, modified=set(session.modified_indices()))
        if command in {"h", "help", "?"}:
            return render_help()
        return f"Unknown command: {command}. Type h for help."

    def _goto(self, argument: str) -> str:
        if not argument:
            return "Usage: g <n>"
        try:
            position = int(argument)
        except ValueError:
            return f"Not a number: {argument}"
        try:
            self._session.goto(position)
        except ValueError as error:
            return str(error)
        return ""

    def _edit(self) -> str:
        try:
            replacement = self._input(EDIT_PROMPT)
        except (EOFError, KeyboardInterrupt):
            return "Edit cancelled."
        if not replacement.strip():
            return "Edit cancelled."
        self._session.edit(replacement)
        LOGGER.debug("Edited sentence %d", self._session.position)
        return "Sentence updated."

    def _draw(self, status: str) -> None:
        session = self._session
        screen = render_sentence(
            sentence=session.current,
            position=session.position,
            total=len(session),
            edited=session.is_modified(session.index),
            box_width=self._box_width,
        )
        if self._clear_screen:
            screen = CLEAR_SCREEN + screen
        if status:
            screen = f"{screen}\n{status}"
        self._output(screen)
