"""Atom to regex compilation.

An atom is a free-text fragment such as a word, a phrase or a mix of Latin and
CJK text. Text extracted from PDFs or OCR output routinely gains or loses
whitespace, so atoms are not matched literally. Instead every character is
classified and the pattern source is assembled token by token:

* runs of Latin (or any non-CJK) characters stay rigid literals;
* blanks between two tokens become ``\\s+``;
* every CJK character is its own token, and neighbouring CJK characters are
  joined by ``\\s*`` so that spurious spaces in the haystack are tolerated;
* a change of script (CJK to Latin or back) is joined by ``\\s*``.

Leading and trailing blanks are dropped, and literal fragments are escaped, so
the generated source is always a valid pattern.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Iterable, NamedTuple

from textsearcher.core.errors import PatternCompileError

PATTERN_FLAGS = re.MULTILINE | re.IGNORECASE

SEP_ANY = r"\s*"
SEP_SOME = r"\s+"

_BLANKS = frozenset(" \t\n\r")


class CharClass(Enum):
    TERM = "term"
    BLANK = "blank"
    HAN = "han"
    OTHER = "other"


class _Step(NamedTuple):
    commit: bool
    separator: str | None
    append: bool


_IGNORE = _Step(commit=False, separator=None, append=False)


def classify(ch: str | None) -> CharClass:
    """Return the class of ``ch``; ``None`` stands for the start/end sentinel."""
    if ch is None:
        return CharClass.TERM
    if ch in _BLANKS:
        return CharClass.BLANK
    if "\u4e00" <= ch <= "\u9fa5" or "\u3040" <= ch <= "\u30ff":
        return CharClass.HAN
    return CharClass.OTHER


def _transition(prev: CharClass, cur: CharClass, committed: bool) -> _Step:
    if prev is CharClass.TERM:
        if cur in (CharClass.HAN, CharClass.OTHER):
            return _Step(commit=False, separator=None, append=True)
        return _IGNORE
    if prev is CharClass.BLANK:
        # blanks never become the previous class
        return _IGNORE
    if cur in (CharClass.TERM, CharClass.BLANK):
        return _Step(commit=not committed, separator=None, append=False)
    if prev is CharClass.HAN and cur is CharClass.HAN:
        if committed:
            return _Step(commit=False, separator=SEP_SOME, append=True)
        return _Step(commit=True, separator=SEP_ANY, append=True)
    if prev is not cur:
        return _Step(commit=not committed, separator=SEP_ANY, append=True)
    # OTHER -> OTHER
    return _Step(commit=False, separator=SEP_SOME if committed else None, append=True)


def _with_sentinel(atom: str) -> Iterable[str | None]:
    yield from atom
    yield None


def compile_atom(atom: str) -> str:
    """Return the pattern source for a single atom.

    Blank-only and empty atoms yield ``""``, which matches everywhere.
    """
    parts: list[str] = []
    word: list[str] = []
    prev = CharClass.TERM
    committed = False

    for ch in _with_sentinel(atom):
        cur = classify(ch)
        step = _transition(prev, cur, committed)
        if step.commit:
            parts.append(re.escape("".join(word)))
            word.clear()
            committed = True
        if step.separator is not None:
            parts.append(step.separator)
        if step.append:
            word.append(ch)
            committed = False
            prev = cur

    return "".join(parts)


def compile_source(source: str) -> re.Pattern[str]:
    """Compile a generated source with the fixed flag set."""
    try:
        return re.compile(source, PATTERN_FLAGS)
    except re.error as exc:
        raise PatternCompileError(source, str(exc)) from exc


def compile_pattern(atom: str) -> re.Pattern[str]:
    """Compile one atom into a ready-to-use pattern."""
    return compile_source(compile_atom(atom))


def alternation_source(atoms: Iterable[str]) -> str:
    """Join the compiled sources of ``atoms`` with ``|``."""
    return "|".join(compile_atom(atom) for atom in atoms)


__all__ = [
    "CharClass",
    "PATTERN_FLAGS",
    "alternation_source",
    "classify",
    "compile_atom",
    "compile_pattern",
    "compile_source",
]
