"""Multi-file scanning."""

from __future__ import annotations

import os
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Callable, Sequence

from textsearcher.core.config import default_max_workers
from textsearcher.core.logging import get_logger
from textsearcher.core.metrics import FILES_MATCHED, FILES_SCANNED, SCAN_DURATION
from textsearcher.search.matcher import evaluate_file, evaluate_file_context
from textsearcher.search.query import QueryGroup
from textsearcher.search.types import ContextWindow, FileMatchResult

logger = get_logger(__name__)

PathLike = str | os.PathLike[str]


def scan(
    group: QueryGroup,
    paths: Sequence[PathLike],
    window: ContextWindow | None = None,
    parallel: bool = True,
    max_workers: int | None = None,
) -> list[FileMatchResult]:
    """Evaluate ``group`` against every file in ``paths``.

    Unreadable and non-matching files are left out. Sequential scans keep the
    input order; parallel scans return results in completion order.
    """
    evaluate = _evaluator(group, window)
    mode = "parallel" if parallel and len(paths) > 1 else "sequential"
    started = time.perf_counter()

    if mode == "parallel":
        results = _scan_parallel(evaluate, paths, max_workers or default_max_workers())
    else:
        results = [result for result in map(evaluate, paths) if result is not None]

    duration = time.perf_counter() - started
    FILES_SCANNED.labels(mode=mode).inc(len(paths))
    FILES_MATCHED.labels(mode=mode).inc(len(results))
    SCAN_DURATION.labels(mode=mode).observe(duration)
    logger.info(
        "Scanned %s files (%s), %s matched in %.3fs",
        len(paths),
        mode,
        len(results),
        duration,
        extra={"ctx_files": len(paths), "ctx_matched": len(results), "ctx_mode": mode},
    )
    return results


def _evaluator(
    group: QueryGroup, window: ContextWindow | None
) -> Callable[[PathLike], FileMatchResult | None]:
    if window is None:
        return lambda path: evaluate_file(group, path)
    return lambda path: evaluate_file_context(group, path, window.before, window.after)


def _scan_parallel(
    evaluate: Callable[[PathLike], FileMatchResult | None],
    paths: Sequence[PathLike],
    max_workers: int,
) -> list[FileMatchResult]:
    results: list[FileMatchResult] = []
    with ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="ScanWorker") as executor:
        futures = [executor.submit(evaluate, path) for path in paths]
        for future in as_completed(futures):
            result = future.result()
            if result is not None:
                results.append(result)
    return results


def search_text(
    group: QueryGroup,
    paths: Sequence[PathLike],
    before: int | None = None,
    after: int | None = None,
    *,
    parallel: bool = True,
    max_workers: int | None = None,
) -> list[FileMatchResult]:
    """Search ``paths``; a context window is extracted only if both radii are given."""
    window = ContextWindow.from_options(before, after)
    return scan(group, paths, window=window, parallel=parallel, max_workers=max_workers)


__all__ = ["scan", "search_text"]
