"""HeaderEngine: check, add and delete a header in a single file."""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import IO, AnyStr

from fileheader.composer import header_delimiters, split_magic_line, wrap_header
from fileheader.exceptions import BinaryDetected, HeaderIOError, UnrecognizedExtension
from fileheader.types import Header
from fileheader.utils import atomic_write, read_text_exact

logger = logging.getLogger("fileheader.engine")


class HeaderEngine:
    """Applies one ``Header`` to individual files.

    Holds no per-file state, so one engine may be shared by many threads as
    long as they do not touch the same file.
    """

    def __init__(self, header: Header):
        self.header = header

    def header_present(self, stream: IO[AnyStr]) -> bool:
        """Return True if the stream already has the header.

        Raises ``BinaryDetected`` (and lets ``OSError`` through) unchanged.
        """
        return self.header.checker.check(stream)

    def wrapped_header(self, path: str | Path) -> str:
        """The header framed for ``path``'s comment syntax."""
        delim = header_delimiters(path)
        if delim is None:
            raise UnrecognizedExtension(Path(path))
        return wrap_header(self.header.text, delim)

    def add_header_if_missing(self, path: str | Path) -> bool:
        """Add the header if it's not already present.

        Returns True if the file was rewritten.
        """
        p = Path(path)
        contents = self._read(p)
        if self._present_in(p, contents):
            logger.debug("Header already present: %s", p)
            return False

        wrapped = self.wrapped_header(p)
        magic, rest = split_magic_line(contents)
        # blank line separates the header from the previous contents
        self._write(p, magic + wrapped + "\n" + rest)
        logger.info("Added header: %s", p)
        return True

    def delete_header_if_present(self, path: str | Path) -> bool:
        """Remove the header if it was added in exactly the form we add it.

        The checker may only look for part of the header; deletion only
        happens when the entire wrapped block, including the blank separator
        line, is found verbatim. Only the first copy is removed.

        Returns True if the file was rewritten.
        """
        p = Path(path)
        contents = self._read(p)
        if not self._present_in(p, contents):
            logger.debug("Header not present: %s", p)
            return False

        block = self.wrapped_header(p) + "\n"
        if block not in contents:
            logger.debug("Header detected but not in its generated form: %s", p)
            return False

        self._write(p, contents.replace(block, "", 1))
        logger.info("Deleted header: %s", p)
        return True

    # ── helpers ──────────────────────────────────────────────────────

    def _present_in(self, path: Path, contents: str) -> bool:
        try:
            return self.header_present(io.StringIO(contents))
        except BinaryDetected as exc:
            raise HeaderIOError(path, exc) from exc

    @staticmethod
    def _read(path: Path) -> str:
        try:
            return read_text_exact(path)
        except (OSError, UnicodeDecodeError) as exc:
            raise HeaderIOError(path, exc) from exc

    @staticmethod
    def _write(path: Path, contents: str) -> None:
        try:
            atomic_write(path, contents)
        except (OSError, UnicodeError) as exc:
            raise HeaderIOError(path, exc) from exc
