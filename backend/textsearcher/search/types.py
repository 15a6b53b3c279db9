"""Common search data structures."""

from __future__ import annotations

from dataclasses import dataclass

from textsearcher.core.errors import QueryConfigError


@dataclass(frozen=True, slots=True)
class FileMatchResult:
    """A file that satisfied every pattern of a query."""

    path: str
    context: str | None = None


@dataclass(frozen=True, slots=True)
class ContextWindow:
    """Number of bytes to keep before and after the leading match."""

    before: int
    after: int

    def __post_init__(self) -> None:
        if self.before < 0 or self.after < 0:
            raise QueryConfigError(
                f"context window must be non-negative, got before={self.before} after={self.after}"
            )

    @classmethod
    def from_options(cls, before: int | None, after: int | None) -> "ContextWindow | None":
        """Build a window only when both radii are given."""
        if before is None or after is None:
            return None
        return cls(before=before, after=after)


__all__ = ["FileMatchResult", "ContextWindow"]
