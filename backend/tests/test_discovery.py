"""Tests for path expansion."""

from __future__ import annotations

from pathlib import Path

from textsearcher.search.discovery import expand_globs, expand_paths


def test_expand_globs() -> None:
    assert expand_globs("**/*.{md,txt}") == ["**/*.md", "**/*.txt"]
    assert expand_globs("**/*.log, **/*.{a,b}") == ["**/*.log", "**/*.a", "**/*.b"]


def test_expand_paths_filters_directories(tmp_path: Path) -> None:
    (tmp_path / "keep.txt").write_text("x", encoding="utf-8")
    (tmp_path / "skip.bin").write_text("x", encoding="utf-8")
    hidden = tmp_path / ".git"
    hidden.mkdir()
    (hidden / "HEAD.txt").write_text("x", encoding="utf-8")
    missing = tmp_path / "missing.txt"

    found = expand_paths([tmp_path, missing], "**/*.{txt,md}", "**/{.git,node_modules}/**")

    assert [Path(item).name for item in found] == ["keep.txt", "missing.txt"]
