"""Concurrent recursive header scanning."""

from __future__ import annotations

import logging
import queue
import threading
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Optional

from fileheader.engine import HeaderEngine
from fileheader.exceptions import BinaryDetected, FileHeaderError, HeaderIOError
from fileheader.types import CheckStatus, FileResult, Header, ScanResults
from fileheader.walk import PathPredicate, find_files

logger = logging.getLogger("fileheader.scan")

# Tells a worker that no more paths will arrive
_DONE = object()


class _Run:
    """Shared state of one scan: queues plus the first fatal error."""

    def __init__(self) -> None:
        self.paths: queue.Queue = queue.Queue()
        self.results: queue.Queue[FileResult] = queue.Queue()
        self.aborted = threading.Event()
        self._lock = threading.Lock()
        self._error: Optional[FileHeaderError] = None

    def fail(self, error: FileHeaderError) -> None:
        with self._lock:
            if self._error is None:
                self._error = error
                logger.error("Aborting scan: %s", error)
            else:
                logger.debug("Additional error after abort: %s", error)
        self.aborted.set()

    @property
    def error(self) -> Optional[FileHeaderError]:
        with self._lock:
            return self._error


def _check_one(engine: HeaderEngine, path: Path) -> Optional[FileResult]:
    try:
        with open(path, "rb") as f:
            present = engine.header_present(f)
    except BinaryDetected:
        logger.debug("Binary file: %s", path)
        return FileResult(path, CheckStatus.BINARY_FILE)
    except OSError as exc:
        raise HeaderIOError(path, exc) from exc
    if present:
        return None
    logger.debug("Header not found: %s", path)
    return FileResult(path, CheckStatus.HEADER_NOT_FOUND)


def _worker(engine: HeaderEngine, run: _Run) -> None:
    while True:
        path = run.paths.get()
        if path is _DONE:
            return
        # after an abort the queue is drained without doing any work
        if run.aborted.is_set():
            continue
        try:
            result = _check_one(engine, path)
        except FileHeaderError as exc:
            run.fail(exc)
            continue
        if result is not None:
            run.results.put(result)


def check_headers_recursively(
    root: str | Path,
    path_predicate: PathPredicate,
    header: Header,
    num_threads: int,
) -> ScanResults:
    """Recursively check for ``header`` in every file in ``root`` that
    matches ``path_predicate``.

    Files are enumerated on the calling thread while ``num_threads`` worker
    threads check them. Returns the paths without the header and the paths
    that were not UTF-8 text; their order depends on thread scheduling.

    The first I/O or traversal error stops the scan. All workers are joined
    before that error is raised; later errors are only logged.
    """
    if num_threads < 1:
        raise ValueError(f"num_threads must be at least 1, got {num_threads}")

    engine = HeaderEngine(header)
    run = _Run()
    logger.info("Scanning %s with %d threads", root, num_threads)

    with ThreadPoolExecutor(max_workers=num_threads, thread_name_prefix="fileheader-scan") as pool:
        futures = [pool.submit(_worker, engine, run) for _ in range(num_threads)]
        try:
            for path in find_files(root, path_predicate):
                if run.aborted.is_set():
                    break
                run.paths.put(path)
        except FileHeaderError as exc:
            run.fail(exc)
        finally:
            for _ in futures:
                run.paths.put(_DONE)
    # leaving the executor joins every worker
    for future in futures:
        future.result()

    if run.error is not None:
        raise run.error

    results = ScanResults()
    while not run.results.empty():
        results.add(run.results.get_nowait())
    logger.info(
        "Scan finished: %d without header, %d binary",
        len(results.no_header_files),
        len(results.binary_files),
    )
    return results
