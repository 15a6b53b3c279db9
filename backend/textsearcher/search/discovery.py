"""Expand user supplied paths into the flat file list the scanner expects."""

from __future__ import annotations

import fnmatch
from pathlib import Path
from typing import Iterable, Iterator

from textsearcher.core.logging import get_logger

logger = get_logger(__name__)


def expand_paths(
    paths: Iterable[str | Path],
    include: str | None = None,
    exclude: str | None = None,
) -> list[str]:
    """Return files as-is and walk directories, filtering by glob patterns.

    Globs are comma separated and may use one ``{a,b}`` group, e.g.
    ``**/*.{md,txt}``. Missing paths are passed through so the scanner can
    skip them like any other unreadable file.
    """
    expanded: list[str] = []
    for raw in paths:
        path = Path(raw).expanduser()
        if path.is_dir():
            found = sorted(_walk(path, include, exclude))
            logger.debug("Expanded %s into %s files", path, len(found))
            expanded.extend(str(item) for item in found)
        else:
            expanded.append(str(path))
    return expanded


def _walk(base: Path, include: str | None, exclude: str | None) -> Iterator[Path]:
    for file_path in base.resolve().rglob("*"):
        if file_path.is_file() and matches_patterns(file_path, include, exclude):
            yield file_path


def matches_patterns(path: Path, include: str | None, exclude: str | None) -> bool:
    path_str = path.as_posix()
    if exclude and any(fnmatch.fnmatch(path_str, pattern) for pattern in expand_globs(exclude)):
        return False
    if include:
        return any(fnmatch.fnmatch(path_str, pattern) for pattern in expand_globs(include))
    return True


def expand_globs(pattern: str) -> list[str]:
    """Split ``pattern`` on top-level commas and expand brace groups."""
    patterns: list[str] = []
    for part in _split_top_level(pattern):
        part = part.strip()
        if not part:
            continue
        if "{" in part and "}" in part:
            prefix = part[: part.index("{")]
            suffix = part[part.index("}") + 1 :]
            options = part[part.index("{") + 1 : part.index("}")].split(",")
            patterns.extend(f"{prefix}{option.strip()}{suffix}" for option in options)
        else:
            patterns.append(part)
    return patterns or [pattern]


def _split_top_level(pattern: str) -> list[str]:
    parts: list[str] = []
    depth = 0
    current: list[str] = []
    for ch in pattern:
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth = max(depth - 1, 0)
        if ch == "," and depth == 0:
            parts.append("".join(current))
            current = []
        else:
            current.append(ch)
    parts.append("".join(current))
    return parts


__all__ = ["expand_paths", "expand_globs", "matches_patterns"]
