"""Evaluate query groups against text and files."""

from __future__ import annotations

import os
from pathlib import Path

from textsearcher.core.logging import get_logger
from textsearcher.search.query import QueryGroup
from textsearcher.search.types import FileMatchResult
from textsearcher.search.window import approx_substring, byte_offset

logger = get_logger(__name__)


def match_str(group: QueryGroup, contents: str) -> bool:
    """Return True iff every pattern of ``group`` occurs in ``contents``."""
    for pattern in group.patterns:
        if pattern.search(contents) is None:
            return False
    return True


matches_text = match_str


def read_text(path: str | os.PathLike[str]) -> tuple[str, bytes] | None:
    """Read ``path`` as strict UTF-8, returning ``None`` when that fails."""
    try:
        raw = Path(path).read_bytes()
        return raw.decode("utf-8"), raw
    except (OSError, ValueError) as exc:
        # ValueError covers UnicodeDecodeError and paths with embedded NUL bytes
        logger.debug("Skipping unreadable file %s: %s", path, exc)
        return None


def evaluate_file(group: QueryGroup, path: str | os.PathLike[str]) -> FileMatchResult | None:
    loaded = read_text(path)
    if loaded is None:
        return None
    contents, _ = loaded
    if not match_str(group, contents):
        return None
    return FileMatchResult(path=os.fspath(path))


def evaluate_file_context(
    group: QueryGroup,
    path: str | os.PathLike[str],
    before: int,
    after: int,
) -> FileMatchResult | None:
    """Like :func:`evaluate_file`, plus a snippet around the leading match.

    Only the first match of the leading pattern anchors the snippet; the other
    patterns still have to match somewhere in the file.
    """
    loaded = read_text(path)
    if loaded is None:
        return None
    contents, raw = loaded

    found = group.leading.search(contents)
    if found is None:
        return None
    for pattern in group.patterns[1:]:
        if pattern.search(contents) is None:
            return None

    start = byte_offset(contents, found.start())
    end = start + len(found.group(0).encode("utf-8"))
    approx_start = max(start - before, 0)
    approx_end = min(end + after, len(raw))
    return FileMatchResult(
        path=os.fspath(path),
        context=approx_substring(raw, approx_start, approx_end),
    )


__all__ = [
    "evaluate_file",
    "evaluate_file_context",
    "match_str",
    "matches_text",
    "read_text",
]
