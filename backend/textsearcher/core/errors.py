"""Exception hierarchy for textsearcher."""

from __future__ import annotations


class TextSearcherError(Exception):
    """Base class for errors raised by textsearcher."""


class QueryConfigError(TextSearcherError, ValueError):
    """Raised when a query description or scan option is structurally invalid."""


class PatternCompileError(TextSearcherError, RuntimeError):
    """Raised when a generated pattern source fails to compile."""

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"failed to compile pattern {source!r}: {reason}")
        self.source = source
        self.reason = reason


__all__ = ["TextSearcherError", "QueryConfigError", "PatternCompileError"]
