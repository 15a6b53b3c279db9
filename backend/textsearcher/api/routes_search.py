"""Search API routes."""

from __future__ import annotations

import time

from fastapi import APIRouter, Depends, HTTPException

from textsearcher.api.dependencies import get_app_settings
from textsearcher.core.config import Settings
from textsearcher.core.errors import QueryConfigError
from textsearcher.core.metrics import REQUEST_COUNT, REQUEST_LATENCY
from textsearcher.models.dto import (
    CompileRequest,
    CompileResponse,
    MatchRequest,
    MatchResponse,
    SearchHit,
    SearchRequest,
    SearchResponse,
)
from textsearcher.search.atoms import compile_atom
from textsearcher.search.discovery import expand_paths
from textsearcher.search.matcher import match_str
from textsearcher.search.query import QueryGroup
from textsearcher.search.scanner import search_text

router = APIRouter()


def _build_group(groups: list[list[str]], endpoint: str) -> QueryGroup:
    try:
        return QueryGroup(groups)
    except QueryConfigError as exc:
        REQUEST_COUNT.labels(endpoint=endpoint, method="POST", status="422").inc()
        raise HTTPException(status_code=422, detail=str(exc)) from exc


@router.post("/search", response_model=SearchResponse, summary="Scan files for an AND-of-OR query")
def run_search(
    request: SearchRequest,
    settings: Settings = Depends(get_app_settings),
) -> SearchResponse:
    start_time = time.perf_counter()
    group = _build_group(request.groups, "search")
    paths = expand_paths(request.paths, settings.include_glob, settings.exclude_glob)
    before = request.before if request.before is not None else settings.context_before
    after = request.after if request.after is not None else settings.context_after
    parallel = request.parallel if request.parallel is not None else settings.parallel
    results = search_text(
        group,
        paths,
        before,
        after,
        parallel=parallel,
        max_workers=settings.max_workers,
    )
    REQUEST_LATENCY.labels(endpoint="search", method="POST").observe(time.perf_counter() - start_time)
    REQUEST_COUNT.labels(endpoint="search", method="POST", status="200").inc()
    return SearchResponse(
        count=len(results),
        results=[SearchHit(path=item.path, context=item.context) for item in results],
    )


@router.post("/match", response_model=MatchResponse, summary="Evaluate a query against inline text")
def run_match(request: MatchRequest) -> MatchResponse:
    start_time = time.perf_counter()
    group = _build_group(request.groups, "match")
    matched = match_str(group, request.text)
    REQUEST_LATENCY.labels(endpoint="match", method="POST").observe(time.perf_counter() - start_time)
    REQUEST_COUNT.labels(endpoint="match", method="POST", status="200").inc()
    return MatchResponse(matched=matched)


@router.post("/compile", response_model=CompileResponse, summary="Show the pattern built for each atom")
def run_compile(request: CompileRequest) -> CompileResponse:
    start_time = time.perf_counter()
    patterns = [compile_atom(atom) for atom in request.atoms]
    REQUEST_LATENCY.labels(endpoint="compile", method="POST").observe(time.perf_counter() - start_time)
    REQUEST_COUNT.labels(endpoint="compile", method="POST", status="200").inc()
    return CompileResponse(patterns=patterns)
