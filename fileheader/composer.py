"""Comment wrapping and magic first line handling."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from fileheader.constants import (
    DELIMITERS_BY_EXTENSION,
    DELIMITERS_BY_FILENAME,
    MAGIC_FIRST_LINES,
)
from fileheader.types import DelimiterSet


def header_delimiters(path: str | Path) -> Optional[DelimiterSet]:
    """Return the delimiters for ``path``'s syntax, or None if unknown.

    The extension is tried first; the whole file name only when the
    extension has no mapping.
    """
    p = Path(path)
    ext = p.suffix[1:] if p.suffix else ""
    delim = DELIMITERS_BY_EXTENSION.get(ext)
    if delim is None:
        delim = DELIMITERS_BY_FILENAME.get(p.name)
    return delim


def wrap_header(text: str, delim: DelimiterSet) -> str:
    """Frame plain header text with comment delimiters.

    Trailing spaces and tabs are removed from every content line, so an
    empty line under a ``" * "`` prefix becomes ``" *"``.
    """
    out: list[str] = []
    if delim.first_line:
        out.append(delim.first_line + "\n")
    # assumes the header uses \n
    for line in text.split("\n"):
        out.append((delim.content_line_prefix + line).rstrip(" \t") + "\n")
    if delim.last_line:
        out.append(delim.last_line + "\n")
    return "".join(out)


def is_magic_line(line: str) -> bool:
    return any(marker in line for marker in MAGIC_FIRST_LINES)


def split_magic_line(contents: str) -> tuple[str, str]:
    """Split off a first line that must stay first.

    Returns ``(magic, rest)`` where ``magic`` includes its newline, or
    ``("", contents)`` when the first line is not special. A file without
    any newline has no first line to keep.
    """
    first_line, sep, rest = contents.partition("\n")
    if sep and is_magic_line(first_line):
        return first_line + sep, rest
    return "", contents
