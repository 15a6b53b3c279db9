"""Logging setup for the ``textsearcher`` logger tree.

Library modules only ask for loggers; handlers are installed by the hosting
surfaces (API app, CLI) through :func:`configure_logging`, using the level and
format chosen in :class:`~textsearcher.core.config.Settings`.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime, timezone
from typing import Any

import orjson

from textsearcher.core.config import Settings, get_settings

ROOT_LOGGER = "textsearcher"
CONTEXT_PREFIX = "ctx_"
PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class ScanLogFormatter(logging.Formatter):
    """One JSON object per line; ``ctx_*`` extras are grouped under ``context``."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        context = {
            key[len(CONTEXT_PREFIX) :]: value
            for key, value in record.__dict__.items()
            if key.startswith(CONTEXT_PREFIX)
        }
        if context:
            payload["context"] = context
        if record.exc_info:
            payload["error"] = self.formatException(record.exc_info)
        return orjson.dumps(payload, default=str).decode("utf-8")


def configure_logging(settings: Settings | None = None, level: str | None = None) -> logging.Logger:
    """Attach a single stderr handler to the package logger.

    ``level`` overrides ``settings.log_level`` (the CLI uses it for ``--verbose``).
    Calling this again replaces the previous handler.
    """
    settings = settings or get_settings()
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ScanLogFormatter() if settings.log_json else logging.Formatter(PLAIN_FORMAT))

    package_logger = logging.getLogger(ROOT_LOGGER)
    package_logger.setLevel((level or settings.log_level).upper())
    package_logger.handlers = [handler]
    package_logger.propagate = False
    return package_logger


def get_logger(name: str = ROOT_LOGGER) -> logging.Logger:
    return logging.getLogger(name)


__all__ = ["ScanLogFormatter", "configure_logging", "get_logger"]
