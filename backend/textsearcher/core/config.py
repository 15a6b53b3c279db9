"""Application configuration handling."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import BaseModel, Field, field_validator

ENV_PREFIX = "TXTS_"
DEFAULT_CONFIG_PATH = Path("~/.config/textsearcher/config.yaml")

_YAML_KEY_MAP: Mapping[tuple[str, ...], str] = {
    ("scan", "parallel"): "parallel",
    ("scan", "max_workers"): "max_workers",
    ("context", "before"): "context_before",
    ("context", "after"): "context_after",
    ("discovery", "include_glob"): "include_glob",
    ("discovery", "exclude_glob"): "exclude_glob",
    ("logging", "level"): "log_level",
    ("logging", "json"): "log_json",
}


def default_max_workers() -> int:
    return min(32, (os.cpu_count() or 1) + 4)


class Settings(BaseModel):
    """Runtime configuration loaded from YAML file and environment variables."""

    parallel: bool = True
    max_workers: int = Field(default_factory=default_max_workers, ge=1)
    context_before: int | None = Field(default=None, ge=0)
    context_after: int | None = Field(default=None, ge=0)
    include_glob: str = "**/*.{txt,md,text,log}"
    exclude_glob: str = "**/{.git,node_modules}/**"
    log_level: str = "INFO"
    log_json: bool = True

    model_config = {
        "validate_assignment": True,
        "extra": "ignore",
    }

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, value: Any) -> str:
        if not isinstance(value, str):
            raise TypeError("log_level must be a string")
        return value.upper()

    @classmethod
    def from_yaml(cls, path: Path | None = None) -> "Settings":
        """Load YAML config and overlay env vars; fall back to defaults."""
        config_path = cls._resolve_config_path(path)
        data: dict[str, Any] = {}
        if config_path and config_path.exists():
            with config_path.open("r", encoding="utf-8") as fh:
                raw = yaml.safe_load(fh) or {}
            data.update(_flatten_yaml(raw))
        data.update(_load_env_overrides())
        return cls(**data)

    @staticmethod
    def _resolve_config_path(path: Path | None) -> Path | None:
        if path is not None:
            return path.expanduser()
        env_path = os.environ.get(f"{ENV_PREFIX}CONFIG")
        if env_path:
            return Path(env_path).expanduser()
        resolved_default = DEFAULT_CONFIG_PATH.expanduser()
        return resolved_default if resolved_default.exists() else None


def _flatten_yaml(raw: Mapping[str, Any], prefix: tuple[str, ...] = ()) -> dict[str, Any]:
    """Flatten nested YAML configuration to Settings field names."""
    flat: dict[str, Any] = {}
    for key, value in raw.items():
        next_prefix = prefix + (key,)
        if isinstance(value, Mapping):
            flat.update(_flatten_yaml(value, prefix=next_prefix))
        else:
            mapped_key = _YAML_KEY_MAP.get(next_prefix)
            if mapped_key:
                flat[mapped_key] = value
            elif key in Settings.model_fields:
                flat[key] = value
    return flat


def _load_env_overrides() -> dict[str, Any]:
    """Map environment variables with TXTS_ prefix into Settings fields."""
    overrides: dict[str, Any] = {}
    for key, value in os.environ.items():
        if not key.startswith(ENV_PREFIX):
            continue
        field_name = key[len(ENV_PREFIX) :].lower()
        if field_name in Settings.model_fields:
            overrides[field_name] = value
    return overrides


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached settings accessor for dependency injection."""
    return Settings.from_yaml()


__all__ = ["Settings", "default_max_workers", "get_settings"]
