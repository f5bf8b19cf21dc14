"""Serial recursive add/delete of headers."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from fileheader.engine import HeaderEngine
from fileheader.types import Header
from fileheader.walk import PathPredicate, find_files

logger = logging.getLogger("fileheader.batch")


def add_headers_recursively(
    root: str | Path,
    path_predicate: PathPredicate,
    header: Header,
) -> list[Path]:
    """Add ``header`` to every matching file under ``root`` that lacks it.

    Returns the paths that had headers added.
    """
    # no threading: adding headers is only done occasionally
    engine = HeaderEngine(header)
    return _recursive_optional_operation(root, path_predicate, engine.add_header_if_missing)


def delete_headers_recursively(
    root: str | Path,
    path_predicate: PathPredicate,
    header: Header,
) -> list[Path]:
    """Delete ``header`` from every matching file under ``root`` that has it.

    Returns the paths that had headers removed.
    """
    engine = HeaderEngine(header)
    return _recursive_optional_operation(root, path_predicate, engine.delete_header_if_present)


def _recursive_optional_operation(
    root: str | Path,
    path_predicate: PathPredicate,
    operation: Callable[[Path], bool],
) -> list[Path]:
    """Apply ``operation`` to each discovered path, one at a time.

    Returns the paths for which ``operation`` returned True. The first
    error propagates immediately; files already rewritten stay rewritten.
    """
    changed: list[Path] = []
    for path in find_files(root, path_predicate):
        if operation(path):
            changed.append(path)
    logger.info("%s: %d file(s) changed under %s", operation.__name__, len(changed), root)
    return changed
