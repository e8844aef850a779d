"""Zip container access for word-processor documents."""

from __future__ import annotations

import logging
from pathlib import Path
from types import TracebackType
from zipfile import BadZipFile, ZipFile
import zlib

from odtview.ingestion.errors import (
    ArchiveIOError,
    ArchiveNotFoundError,
    BadArchiveError,
    CorruptDataError,
    MemberNotFoundError,
)

LOGGER = logging.getLogger(__name__)

ODT_MIMETYPE = "application/vnd.oasis.opendocument.text"
MIMETYPE_MEMBER = "mimetype"


class DocumentArchive:
    """Open zip container with by-name member lookup.

    Members are decompressed on every ``read_member`` call and never cached.
    Use as a context manager so the underlying file handle is released on
    every exit path.
    """

    def __init__(self, path: Path, archive: ZipFile) -> None:
        self._path = path
        self._archive: ZipFile | None = archive

    @classmethod
    def open(cls, path: str | Path) -> DocumentArchive:
        source = Path(path)
        try:
            archive = ZipFile(source, "r")
        except FileNotFoundError as exc:
            raise ArchiveNotFoundError("Document file does not exist", source) from exc
        except (BadZipFile, EOFError) as exc:
            raise BadArchiveError(f"Not a valid zip container: {exc}", source) from exc
        except OSError as exc:
            raise ArchiveIOError(f"Failed to open document: {exc}", source) from exc

        LOGGER.debug("Opened archive %s", source)
        return cls(source, archive)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def closed(self) -> bool:
        return self._archive is None

    def member_names(self) -> list[str]:
        """Return file member names in archive order, directories excluded."""

        archive = self._require_open()
        return [name for name in archive.namelist() if not name.endswith("/")]

    def read_member(self, name: str) -> bytes:
        """Decompress and return one member looked up by its exact name."""

        archive = self._require_open()
        try:
            info = archive.getinfo(name)
        except KeyError as exc:
            raise MemberNotFoundError(f"Archive member not found: {name}", self._path) from exc

        try:
            payload = archive.read(info)
        except BadZipFile as exc:
            raise CorruptDataError(f"Archive member {name} is corrupt: {exc}", self._path) from exc
        except (zlib.error, EOFError) as exc:
            raise CorruptDataError(f"Failed to decompress archive member {name}: {exc}", self._path) from exc
        except NotImplementedError as exc:
            raise CorruptDataError(f"Unsupported compression for archive member {name}: {exc}", self._path) from exc
        except RuntimeError as exc:
            # zipfile raises RuntimeError for encrypted members
            raise CorruptDataError(f"Archive member {name} is unreadable: {exc}", self._path) from exc
        except OSError as exc:
            raise ArchiveIOError(f"Failed to read archive member {name}: {exc}", self._path) from exc

        LOGGER.debug("Read member %s (%d bytes) from %s", name, len(payload), self._path)
        return payload

    def mimetype(self) -> str | None:
        """Return the declared document mimetype, or None when not declared."""

        try:
            raw = self.read_member(MIMETYPE_MEMBER)
        except MemberNotFoundError:
            return None
        return raw.decode("ascii", errors="replace").strip()

    def close(self) -> None:
        if self._archive is None:
            return
        self._archive.close()
        self._archive = None

    def __enter__(self) -> DocumentArchive:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()

    def _require_open(self) -> ZipFile:
        if self._archive is None:
            raise ArchiveIOError("Archive is closed", self._path)
        return self._archive


def read_member(path: str | Path, name: str) -> bytes:
    """Open ``path``, read a single member and release the file."""

    with DocumentArchive.open(path) as archive:
        return archive.read_member(name)
