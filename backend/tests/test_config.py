"""Tests for settings loading."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from textsearcher.core.config import Settings, get_settings


def test_defaults() -> None:
    settings = Settings()
    assert settings.parallel is True
    assert settings.max_workers >= 1
    assert settings.context_before is None
    assert settings.context_after is None


def test_yaml_and_env_overlay(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    config = tmp_path / "config.yaml"
    config.write_text(
        "scan:\n  parallel: false\n  max_workers: 3\ncontext:\n  before: 10\n  after: 20\nlogging:\n  level: debug\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("TXTS_CONFIG", str(config))
    monkeypatch.setenv("TXTS_MAX_WORKERS", "7")

    settings = get_settings()

    assert settings.parallel is False
    assert settings.max_workers == 7
    assert settings.context_before == 10
    assert settings.context_after == 20
    assert settings.log_level == "DEBUG"


def test_invalid_values_rejected() -> None:
    with pytest.raises(ValidationError):
        Settings(max_workers=0)
    with pytest.raises(ValidationError):
        Settings(context_before=-1)
