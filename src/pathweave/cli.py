# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Command line interface exposing path inspection and search helpers."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Annotated

import typer

from .chainable import ChainablePath
from .errors import PathweaveError
from .globbing import glob_files
from .logging import fail, ok, warn
from .search import find_first, find_parent_with_file_matching

app = typer.Typer(
    name="pathweave",
    help="Inspect, relate and search filesystem paths.",
    no_args_is_help=True,
    add_completion=False,
)


@dataclass(slots=True)
class CLIState:
    """Presentation preferences shared by every command."""

    use_emoji: bool = True


def _state(ctx: typer.Context) -> CLIState:
    return ctx.obj if isinstance(ctx.obj, CLIState) else CLIState()


@contextmanager
def _report_errors(state: CLIState) -> Iterator[None]:
    """Translate pathweave errors into a failure message and exit code 1."""

    try:
        yield
    except PathweaveError as exc:
        fail(str(exc), use_emoji=state.use_emoji)
        raise typer.Exit(code=1) from exc


@app.callback()
def main(
    ctx: typer.Context,
    emoji: Annotated[bool, typer.Option("--emoji/--no-emoji", help="Toggle emoji in status messages.")] = True,
) -> None:
    """Inspect, relate and search filesystem paths."""

    ctx.obj = CLIState(use_emoji=emoji)


@app.command("show")
def show(ctx: typer.Context, path: Annotated[str, typer.Argument(help="Path to normalise.")]) -> None:
    """Print the canonical form of PATH and its derived properties."""

    with _report_errors(_state(ctx)):
        value = ChainablePath.from_string(path)
    typer.echo(f"canonical: {value.raw}")
    typer.echo(f"rooted: {str(value.is_rooted).lower()}")
    typer.echo(f"root: {value.root.raw}")
    typer.echo(f"parent: {value.directory.raw}")
    typer.echo(f"name: {value.name}")
    typer.echo(f"extension: {value.extension}")


@app.command("relative")
def relative(
    ctx: typer.Context,
    path: Annotated[str, typer.Argument(help="Target path.")],
    base: Annotated[str, typer.Argument(help="Directory the result is relative to.")],
) -> None:
    """Print PATH expressed relative to BASE."""

    with _report_errors(_state(ctx)):
        result = ChainablePath.from_string(path).as_relative_to(base)
    typer.echo(result.raw)


@app.command("find-first")
def find_first_command(
    ctx: typer.Context,
    paths: Annotated[list[str], typer.Argument(help="Candidate paths in priority order.")],
) -> None:
    """Print the first of PATHS that exists."""

    state = _state(ctx)
    with _report_errors(state):
        result = find_first(paths)
    if result.is_empty:
        warn("None of the candidates exist", use_emoji=state.use_emoji)
        raise typer.Exit(code=1)
    typer.echo(result.raw)


@app.command("find-parent")
def find_parent_command(
    ctx: typer.Context,
    path: Annotated[str, typer.Argument(help="File or directory to start from.")],
    wildcards: Annotated[list[str], typer.Argument(help="File name patterns to look for.")],
) -> None:
    """Print the closest ancestor of PATH holding a file matching WILDCARDS."""

    state = _state(ctx)
    with _report_errors(state):
        result = find_parent_with_file_matching(path, *wildcards)
    if result.is_null:
        warn(f"No ancestor of {path} contains {', '.join(wildcards)}", use_emoji=state.use_emoji)
        raise typer.Exit(code=1)
    typer.echo(result.raw)


@app.command("glob")
def glob_command(
    ctx: typer.Context,
    root: Annotated[str, typer.Argument(help="Directory to search beneath.")],
    patterns: Annotated[list[str], typer.Argument(help="Glob patterns (*, ** and ?).")],
) -> None:
    """Print every file beneath ROOT matching any of PATTERNS."""

    state = _state(ctx)
    with _report_errors(state):
        matches = glob_files(root, *patterns)
    for match in matches:
        typer.echo(match.raw)
    ok(f"{len(matches)} file(s) matched", use_emoji=state.use_emoji)


__all__ = ["app"]
