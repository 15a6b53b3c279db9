"""Noise-tolerant boolean text search over many files."""

from textsearcher.core.errors import PatternCompileError, QueryConfigError, TextSearcherError
from textsearcher.search import (
    ContextWindow,
    FileMatchResult,
    QueryGroup,
    approx_substring,
    compile_atom,
    match_str,
    matches_text,
    scan,
    search_text,
)

__version__ = "0.1.0"

__all__ = [
    "ContextWindow",
    "FileMatchResult",
    "PatternCompileError",
    "QueryConfigError",
    "QueryGroup",
    "TextSearcherError",
    "approx_substring",
    "compile_atom",
    "match_str",
    "matches_text",
    "scan",
    "search_text",
]
