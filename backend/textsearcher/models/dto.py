"""Pydantic DTOs exposed via API."""

from __future__ import annotations

from pydantic import BaseModel, Field


class SearchRequest(BaseModel):
    groups: list[list[str]] = Field(..., min_length=1, description="AND of OR-groups of atoms")
    paths: list[str] = Field(default_factory=list, description="Files or directories to scan")
    before: int | None = Field(default=None, ge=0, description="Context bytes before the match")
    after: int | None = Field(default=None, ge=0, description="Context bytes after the match")
    parallel: bool | None = None


class SearchHit(BaseModel):
    path: str
    context: str | None = None


class SearchResponse(BaseModel):
    count: int
    results: list[SearchHit]


class MatchRequest(BaseModel):
    groups: list[list[str]] = Field(..., min_length=1)
    text: str


class MatchResponse(BaseModel):
    matched: bool


class CompileRequest(BaseModel):
    atoms: list[str]


class CompileResponse(BaseModel):
    patterns: list[str]


__all__ = [
    "SearchRequest",
    "SearchHit",
    "SearchResponse",
    "MatchRequest",
    "MatchResponse",
    "CompileRequest",
    "CompileResponse",
]
