"""CLI entrypoint for textsearcher."""

from __future__ import annotations

import os
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Any, List, Optional

import orjson
import requests
import typer

from textsearcher.core.config import get_settings
from textsearcher.core.errors import QueryConfigError
from textsearcher.core.logging import configure_logging
from textsearcher.search.atoms import compile_atom
from textsearcher.search.discovery import expand_paths
from textsearcher.search.matcher import match_str
from textsearcher.search.query import QueryGroup
from textsearcher.search.scanner import search_text

app = typer.Typer(name="txts", help="Noise-tolerant boolean text search")

EXIT_CONFIG_ERROR = 2


def _resolve_host(override: Optional[str]) -> Optional[str]:
    if override:
        return override.rstrip("/")
    env_host = os.environ.get("TXTS_HOST")
    if env_host:
        return env_host.rstrip("/")
    return None


def _echo_json(payload: Any) -> None:
    typer.echo(orjson.dumps(payload, option=orjson.OPT_INDENT_2).decode("utf-8"))


def _parse_groups(groups: List[str], or_sep: str) -> list[list[str]]:
    return [group.split(or_sep) for group in groups]


def _build_group(groups: list[list[str]]) -> QueryGroup:
    try:
        return QueryGroup(groups)
    except QueryConfigError as exc:
        typer.echo(f"Invalid query: {exc}", err=True)
        raise typer.Exit(code=EXIT_CONFIG_ERROR)


def _request(host: str, path: str, payload: dict[str, Any]) -> dict[str, Any]:
    resp = requests.post(f"{host}{path}", json=payload, timeout=600)
    if not resp.ok:
        try:
            detail = resp.json()
        except ValueError:
            detail = resp.text
        typer.echo(f"Request failed ({resp.status_code}): {detail}", err=True)
        raise typer.Exit(code=1)
    return resp.json()


def _setup_logging(verbose: bool) -> None:
    configure_logging(get_settings(), level="DEBUG" if verbose else None)


@app.command()
def search(
    paths: List[Path] = typer.Argument(..., help="Files or directories to scan"),
    group: List[str] = typer.Option(..., "--group", "-g", help="One AND position; alternatives split by --or-sep"),
    or_sep: str = typer.Option("|", "--or-sep", help="Separator between OR alternatives in a group"),
    before: Optional[int] = typer.Option(None, "--before", "-B", min=0, help="Context bytes before the match"),
    after: Optional[int] = typer.Option(None, "--after", "-A", min=0, help="Context bytes after the match"),
    parallel: Optional[bool] = typer.Option(None, "--parallel/--sequential", help="Force execution mode"),
    host: Optional[str] = typer.Option(None, "--host", help="Send the search to a running server"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log skipped files"),
) -> None:
    """Print files matching every group, optionally with context."""
    _setup_logging(verbose)
    settings = get_settings()
    groups = _parse_groups(group, or_sep)
    before = before if before is not None else settings.context_before
    after = after if after is not None else settings.context_after

    remote = _resolve_host(host)
    if remote:
        payload: dict[str, Any] = {
            "groups": groups,
            "paths": [str(path.expanduser().resolve()) for path in paths],
            "before": before,
            "after": after,
        }
        if parallel is not None:
            payload["parallel"] = parallel
        _echo_json(_request(remote, "/search", payload))
        return

    query_group = _build_group(groups)
    files = expand_paths(paths, settings.include_glob, settings.exclude_glob)
    results = search_text(
        query_group,
        files,
        before,
        after,
        parallel=settings.parallel if parallel is None else parallel,
        max_workers=settings.max_workers,
    )
    _echo_json({"count": len(results), "results": [asdict(item) for item in results]})


@app.command()
def match(
    text: Optional[str] = typer.Argument(None, help="Text to test; read from stdin when omitted"),
    group: List[str] = typer.Option(..., "--group", "-g", help="One AND position; alternatives split by --or-sep"),
    or_sep: str = typer.Option("|", "--or-sep", help="Separator between OR alternatives in a group"),
) -> None:
    """Exit 0 when TEXT satisfies the query, 1 otherwise."""
    query_group = _build_group(_parse_groups(group, or_sep))
    contents = text if text is not None else sys.stdin.read()
    matched = match_str(query_group, contents)
    _echo_json({"matched": matched})
    raise typer.Exit(code=0 if matched else 1)


@app.command("compile")
def compile_atoms(
    atoms: List[str] = typer.Argument(..., help="Atoms to compile"),
) -> None:
    """Print the pattern source generated for each atom."""
    for atom in atoms:
        typer.echo(compile_atom(atom))


if __name__ == "__main__":
    app()
