"""Data types for the header engines."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from pathlib import Path

from fileheader.checker import HeaderChecker


@dataclass(frozen=True)
class Header:
    """A file header to check for, or add to, files.

    ``text`` is the plain header without comment syntax; delimiters are
    added per file type when the header is written.
    """

    checker: HeaderChecker
    text: str


@dataclass(frozen=True)
class DelimiterSet:
    """Comment framing for one file syntax."""

    first_line: str         # line before the header, "" for none
    content_line_prefix: str
    last_line: str          # line after the header, "" for none


class CheckStatus(enum.Enum):
    """Reasons why a scanned file is reported."""

    HEADER_NOT_FOUND = "header_not_found"
    BINARY_FILE = "binary_file"


@dataclass(frozen=True)
class FileResult:
    """The output of checking a single file."""

    path: Path
    status: CheckStatus


@dataclass
class ScanResults:
    """Aggregated results for recursively checking a directory tree."""

    no_header_files: list[Path] = field(default_factory=list)
    binary_files: list[Path] = field(default_factory=list)

    def has_failure(self) -> bool:
        """True if any scanned file lacked a header or was binary."""
        return bool(self.no_header_files or self.binary_files)

    def add(self, result: FileResult) -> None:
        if result.status is CheckStatus.HEADER_NOT_FOUND:
            self.no_header_files.append(result.path)
        else:
            self.binary_files.append(result.path)
