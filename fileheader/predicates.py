"""Glob based path predicates for the walkers."""

from __future__ import annotations

from fnmatch import fnmatchcase
from pathlib import Path
from typing import Iterable, Optional

from fileheader import config
from fileheader.walk import PathPredicate


def _matches(path: Path, relative: str, patterns: tuple[str, ...]) -> bool:
    return any(
        fnmatchcase(relative, pat) or fnmatchcase(path.name, pat) for pat in patterns
    )


def build_predicate(
    root: str | Path,
    include: Iterable[str] = (),
    exclude: Iterable[str] = (),
    skip_dirs: Optional[Iterable[str]] = None,
) -> PathPredicate:
    """Build a path predicate from glob patterns.

    A path is rejected if any of its components (below ``root``) is a
    skipped directory or if it matches an ``exclude`` glob. When ``include``
    globs are given it must also match one of them. Globs are tried against
    both the root-relative path (``/`` separated) and the bare file name.
    """
    root = Path(root)
    include = tuple(include)
    exclude = tuple(exclude)
    skipped = frozenset(config.SKIP_DIRS if skip_dirs is None else skip_dirs)

    def predicate(path: Path) -> bool:
        try:
            rel = path.relative_to(root)
        except ValueError:
            rel = path
        if any(part in skipped for part in rel.parts[:-1]):
            return False
        relative = rel.as_posix()
        if exclude and _matches(path, relative, exclude):
            return False
        if include and not _matches(path, relative, include):
            return False
        return True

    return predicate
