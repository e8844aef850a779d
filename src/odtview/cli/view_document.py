"""CLI entrypoint for paging through the sentences of a document."""

from __future__ import annotations

import argparse
import logging

from dotenv import load_dotenv

from odtview.ingestion.errors import DocumentError
from odtview.ingestion.parser import DocumentParser
from odtview.viewer.config import MIN_BOX_WIDTH, ViewerSettings
from odtview.viewer.renderers import render_summary
from odtview.viewer.session import SentenceSession
from odtview.viewer.terminal import TerminalViewer


load_dotenv()

LOGGER = logging.getLogger(__name__)

_LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Page through the sentences of an ODT document")
    parser.add_argument("--path", required=True, help="Document file to open")
    parser.add_argument("--print", action="store_true", help="Print a numbered sentence list and exit")
    parser.add_argument("--box-width", type=int, default=None, help="Width of the sentence box in columns")
    parser.add_argument("--no-clear", action="store_true", help="Do not clear the screen between pages")
    parser.add_argument("--content-member", default=None, help="Archive member holding the document markup")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)

    try:
        settings = ViewerSettings.from_env()
    except ValueError as error:
        logging.basicConfig(level=logging.WARNING, format=_LOG_FORMAT)
        LOGGER.error("Configuration error: %s", error)
        return 2

    logging.basicConfig(level=settings.log_level_value, format=_LOG_FORMAT)

    box_width = args.box_width if args.box_width is not None else settings.box_width
    if box_width < MIN_BOX_WIDTH:
        LOGGER.error("--box-width must be >= %d", MIN_BOX_WIDTH)
        return 2

    parser = DocumentParser(content_member=args.content_member or settings.content_member)
    try:
        sentences = parser.parse(args.path)
    except DocumentError as error:
        LOGGER.error("Failed to parse document: %s", error)
        return 1

    if args.print:
        print(render_summary(sentences))
        return 0

    viewer = TerminalViewer(
        SentenceSession(sentences),
        box_width=box_width,
        clear_screen=settings.clear_screen and not args.no_clear,
    )
    try:
        viewer.run()
    except KeyboardInterrupt:
        LOGGER.info("Viewer interrupted")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
