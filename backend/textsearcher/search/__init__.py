"""Atom compilation, query groups and multi-file scanning."""

from .atoms import compile_atom, compile_pattern
from .query import QueryGroup
from .types import ContextWindow, FileMatchResult
from .matcher import match_str, matches_text
from .window import approx_substring
from .scanner import scan, search_text

__all__ = [
    "compile_atom",
    "compile_pattern",
    "QueryGroup",
    "ContextWindow",
    "FileMatchResult",
    "match_str",
    "matches_text",
    "approx_substring",
    "scan",
    "search_text",
]
