"""AND-of-OR query groups."""

from __future__ import annotations

import re
from typing import Iterable, Sequence

from textsearcher.core.errors import QueryConfigError
from textsearcher.search.atoms import alternation_source, compile_source


class QueryGroup:
    """AND of patterns, where each pattern is the OR of some atoms.

    ``QueryGroup([["bar"], ["baz", "qux"]])`` matches a document containing
    ``bar`` and at least one of ``baz`` or ``qux``. The first pattern doubles as
    the leading pattern used to anchor context windows.
    """

    __slots__ = ("_patterns",)

    def __init__(self, and_of_or_atoms: Iterable[Sequence[str]]) -> None:
        and_of_or_atoms = tuple(and_of_or_atoms)
        if not and_of_or_atoms:
            raise QueryConfigError("query group must not be empty")
        patterns: list[re.Pattern[str]] = []
        for or_group in and_of_or_atoms:
            if isinstance(or_group, str):
                raise QueryConfigError(
                    f"each query position must be a list of atoms, got string {or_group!r}"
                )
            patterns.append(compile_source(alternation_source(or_group)))
        self._patterns = tuple(patterns)

    @classmethod
    def anchored(cls, primary: str, or_groups: Sequence[Sequence[str]] = ()) -> "QueryGroup":
        """Build a group whose leading pattern is the single ``primary`` atom."""
        return cls([[primary], *or_groups])

    @property
    def patterns(self) -> tuple[re.Pattern[str], ...]:
        return self._patterns

    @property
    def leading(self) -> re.Pattern[str]:
        return self._patterns[0]

    @property
    def sources(self) -> list[str]:
        return [pattern.pattern for pattern in self._patterns]

    def __len__(self) -> int:
        return len(self._patterns)

    def __repr__(self) -> str:
        return f"QueryGroup({self.sources!r})"


__all__ = ["QueryGroup"]
