"""Typer CLI entrypoint for repman."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console

from . import __version__
from .commands import add_repository, locate_repository, show_status, sync_repository
from .config import configure_logging, resolve_root
from .exceptions import RepmanError

app = typer.Typer(
    help="A repository manager for organizing and managing multiple git repositories",
    add_completion=False,
    no_args_is_help=True,
)


@dataclass(slots=True)
class AppState:
    root: Path
    console: Console
    verbose: bool = False


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"repman {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the repman version and exit.",
    ),
) -> None:
    _ = version  # handled via callback
    configure_logging(verbose)
    try:
        root = resolve_root()
    except RepmanError as exc:
        _fail(str(exc))
    ctx.obj = AppState(root=root, console=Console(), verbose=verbose)


def _require_state(ctx: typer.Context) -> AppState:
    state = ctx.obj
    if not isinstance(state, AppState):  # pragma: no cover
        raise typer.Exit(1)
    return state


@app.command(help="Clone a repository into <root>/<owner>/<repo>")
def add(
    ctx: typer.Context,
    owner: str = typer.Argument(..., help="Repository owner/organization."),
    repo: str = typer.Argument(..., help="Repository name."),
) -> None:
    state = _require_state(ctx)
    try:
        add_repository(state.root, owner, repo, console=state.console)
    except RepmanError as exc:
        _fail(str(exc))


@app.command(help="Show status of all repositories")
def status(
    ctx: typer.Context,
    as_json: bool = typer.Option(False, "--json", help="Output JSON for scripting."),
) -> None:
    state = _require_state(ctx)
    try:
        show_status(state.root, console=state.console, as_json=as_json)
    except RepmanError as exc:
        _fail(str(exc))


@app.command(help="Sync a repository (add, commit, push)")
def sync(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Repository name (directory name)."),
    message: str = typer.Option(..., "--message", "-m", help="Commit message."),
) -> None:
    state = _require_state(ctx)
    try:
        sync_repository(state.root, name, message, console=state.console)
    except RepmanError as exc:
        _fail(str(exc))


@app.command(help="Print the path of a repository for shell navigation")
def cd(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Repository name or owner/repo."),
    pick: bool = typer.Option(False, "--pick", help="Choose interactively when several repositories match."),
) -> None:
    state = _require_state(ctx)
    try:
        locate_repository(state.root, name, console=state.console, pick=pick)
    except RepmanError as exc:
        _fail(str(exc))


def _fail(message: str, code: int = 1) -> NoReturn:
    typer.secho(message, err=True, fg=typer.colors.RED)
    raise typer.Exit(code)


__all__ = ["app"]
