"""
file-header — Configuration.
Shared settings read from the environment.
"""

import os

DEFAULT_SKIP_DIRS = (
    ".git,node_modules,__pycache__,.venv,venv,target,dist,build,"
    ".tox,.mypy_cache,.pytest_cache,.ruff_cache"
)


def _cpu_workers() -> int:
    return os.cpu_count() or 4


def reload() -> None:
    """Re-read every setting from the environment."""
    global WORKERS, MAX_LINES, LOG_LEVEL, SKIP_DIRS

    # Thread count for the concurrent scanner
    WORKERS = int(os.environ.get("FILEHEADER_WORKERS", str(_cpu_workers())))

    # Lines searched for the pattern when a header is built from plain text
    MAX_LINES = int(os.environ.get("FILEHEADER_MAX_LINES", "10"))

    LOG_LEVEL = os.environ.get("FILEHEADER_LOG_LEVEL", "WARNING").upper()

    SKIP_DIRS = frozenset(
        d.strip()
        for d in os.environ.get("FILEHEADER_SKIP_DIRS", DEFAULT_SKIP_DIRS).split(",")
        if d.strip()
    )


WORKERS: int
MAX_LINES: int
LOG_LEVEL: str
SKIP_DIRS: frozenset[str]

reload()
