"""
file-header — Custom Exceptions.

Typed error hierarchy shared by the scan and batch engines.
"""

from __future__ import annotations

from pathlib import Path


class FileHeaderError(Exception):
    """Base exception for all file-header errors."""


class HeaderIOError(FileHeaderError):
    """Raised when a file cannot be opened, read, decoded or written.

    For add/delete operations an undecodable (non UTF-8) file is reported
    here rather than as ``BinaryDetected``.
    """

    def __init__(self, path: Path, cause: BaseException):
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"I/O error at {str(self.path)!r}: {cause}")


class UnrecognizedExtension(FileHeaderError):
    """Raised when no comment delimiters are known for a file."""

    def __init__(self, path: Path):
        self.path = Path(path)
        super().__init__(f"Unknown file extension: {str(self.path)!r}")


class BinaryDetected(FileHeaderError):
    """Raised by a checker when the scanned window is not UTF-8 text."""


class TraversalError(FileHeaderError):
    """Raised when the directory walk itself fails."""

    def __init__(self, path: Path | str | None, cause: BaseException):
        self.path = Path(path) if path is not None else None
        self.cause = cause
        super().__init__(f"Directory walk error at {str(self.path)!r}: {cause}")


class UnknownLicense(FileHeaderError):
    """Raised when a license id is not in the catalog."""


class MissingTokenValue(FileHeaderError, KeyError):
    """Raised when a license template is rendered without a required value."""
