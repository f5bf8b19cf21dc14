"""
file-header — check for, add, or remove headers (licenses, attribution)
in source files across a directory tree.

Usage:
    from fileheader import SingleLineChecker, Header, check_headers_recursively

    checker = SingleLineChecker("Foo License", 10)
    header = Header(checker, "Foo License\\nmore license text")
    results = check_headers_recursively("/some/dir", lambda p: True, header, 4)
    print(results.no_header_files)
"""

__version__ = "0.1.3"

from fileheader.batch import add_headers_recursively, delete_headers_recursively
from fileheader.checker import HeaderChecker, SingleLineChecker
from fileheader.engine import HeaderEngine
from fileheader.exceptions import (
    BinaryDetected,
    FileHeaderError,
    HeaderIOError,
    TraversalError,
    UnrecognizedExtension,
)
from fileheader.scanner import check_headers_recursively
from fileheader.types import DelimiterSet, Header, ScanResults
from fileheader.walk import find_files

__all__ = [
    "BinaryDetected",
    "DelimiterSet",
    "FileHeaderError",
    "Header",
    "HeaderChecker",
    "HeaderEngine",
    "HeaderIOError",
    "ScanResults",
    "SingleLineChecker",
    "TraversalError",
    "UnrecognizedExtension",
    "__version__",
    "add_headers_recursively",
    "check_headers_recursively",
    "delete_headers_recursively",
    "find_files",
]
