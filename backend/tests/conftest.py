"""Test fixtures for textsearcher."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

BACKEND_ROOT = Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))


@pytest.fixture(autouse=True)
def reset_state(monkeypatch: pytest.MonkeyPatch) -> None:
    """Reset cached settings and TXTS_ environment between tests."""
    for key in list(os.environ):
        if key.startswith("TXTS_"):
            monkeypatch.delenv(key, raising=False)

    from textsearcher.api import dependencies as deps
    from textsearcher.core.config import get_settings

    get_settings.cache_clear()
    deps.get_app_settings.cache_clear()
    yield
    get_settings.cache_clear()
    deps.get_app_settings.cache_clear()


@pytest.fixture
def corpus(tmp_path: Path) -> dict[str, Path]:
    """Small on-disk corpus shared by scanner, API and CLI tests."""
    files = {
        "hello.txt": "bar baz",
        "world.txt": "world",
        "cjk.txt": "前言\n这是一份 中 文 文档, about OCR noise.\n",
    }
    paths: dict[str, Path] = {}
    for name, text in files.items():
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        paths[name] = path
    broken = tmp_path / "broken.txt"
    broken.write_bytes(b"bar baz \xff\xfe")
    paths["broken.txt"] = broken
    return paths
