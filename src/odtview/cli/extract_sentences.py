"""CLI command that dumps a document's sentences as JSON."""

from __future__ import annotations

import argparse
import json
import logging

from dotenv import load_dotenv

from odtview.ingestion.errors import DocumentError
from odtview.ingestion.parser import DEFAULT_CONTENT_MEMBER, DocumentParser


load_dotenv()

LOGGER = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Extract sentences from an ODT document as JSON")
    parser.add_argument("--path", required=True, help="Document file to parse")
    parser.add_argument("--content-member", default=DEFAULT_CONTENT_MEMBER, help="Archive member holding the markup")
    parser.add_argument("--include-text", action="store_true", help="Include the raw extracted text")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.WARNING, format="%(asctime)s %(levelname)s %(message)s")

    try:
        document = DocumentParser(content_member=args.content_member).extract(args.path)
    except DocumentError as error:
        LOGGER.error("Failed to parse document: %s", error)
        failure = {"path": args.path, "error": str(error), "error_type": type(error).__name__}
        print(json.dumps(failure, ensure_ascii=True, indent=2))
        return 1

    payload: dict[str, object] = {
        "path": document.source_path,
        "sentence_count": len(document.sentences),
        "sentences": document.sentences,
    }
    if args.include_text:
        payload["text"] = document.text
    print(json.dumps(payload, ensure_ascii=True, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
