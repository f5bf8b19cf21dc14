"""Utilities for reading and rewriting source files."""

from __future__ import annotations

import errno
import os
import stat
import tempfile
from pathlib import Path


def read_text_exact(path: Path) -> str:
    """Read a whole file as UTF-8 without newline translation."""
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()


def _write_in_place(target: Path, data: bytes) -> None:
    with open(target, "wb") as f:
        f.write(data)


def atomic_write(path: Path, content: str) -> None:
    """Atomic write: write to a temp file then os.replace().

    The temp file lives next to the real target (symlinks are resolved) so
    the replace stays on one filesystem, and the original permission bits
    are carried over. A target we may not write to is refused with
    PermissionError, as opening it for writing would be.

    Hard-linked files and files owned by someone else are truncated and
    rewritten in place instead, so every link sees the change and the owner
    is kept.
    """
    data = content.encode("utf-8")
    target = Path(os.path.realpath(path))
    st = os.stat(target)
    if not os.access(target, os.W_OK):
        raise PermissionError(errno.EACCES, os.strerror(errno.EACCES), str(path))
    owned = not hasattr(os, "geteuid") or st.st_uid == os.geteuid()
    if st.st_nlink > 1 or not owned:
        _write_in_place(target, data)
        return

    fd, tmp_path = tempfile.mkstemp(
        dir=str(target.parent),
        prefix=f".{target.name}.",
        suffix=".tmp",
    )
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        os.chmod(tmp_path, stat.S_IMODE(st.st_mode))
        os.replace(tmp_path, str(target))
    except BaseException:
        try:
            os.unlink(tmp_path)
        except OSError:
            pass
        raise
