"""Recursive file discovery."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Callable, Iterator

from fileheader.exceptions import TraversalError

logger = logging.getLogger("fileheader.walk")

PathPredicate = Callable[[Path], bool]


def _raise_traversal_error(exc: OSError) -> None:
    raise TraversalError(exc.filename, exc) from exc


def find_files(root: str | Path, path_predicate: PathPredicate) -> Iterator[Path]:
    """Yield every file under ``root`` that matches ``path_predicate``.

    Every directory is descended into whatever the predicate says about it;
    only files are passed to the predicate and yielded. Symlinked
    directories are not followed. Order is the filesystem's.

    Raises ``TraversalError`` if the walk fails, e.g. when ``root`` does not
    exist or a directory cannot be listed.
    """
    root = Path(root)
    if root.is_file():
        # os.walk yields nothing for a file root
        if path_predicate(root):
            yield root
        return

    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise_traversal_error):
        base = Path(dirpath)
        for name in filenames:
            fp = base / name
            if path_predicate(fp):
                yield fp
        logger.debug("Walked %s (%d subdirectories)", base, len(dirnames))
