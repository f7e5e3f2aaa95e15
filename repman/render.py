"""Rich UI helpers for terminal output."""

from __future__ import annotations

import json
from typing import Sequence

from rich.console import Console
from rich.markup import escape

from .models import RepositoryRef, RepositoryStatus


def info(console: Console, message: str) -> None:
    console.print(f"[blue]ℹ[/blue] {message}", soft_wrap=True)


def success(console: Console, message: str) -> None:
    console.print(f"[green]✓[/green] {message}", soft_wrap=True)


def error(console: Console, message: str) -> None:
    console.print(f"[red]✗[/red] {message}", soft_wrap=True)


def repo_slug(repo: RepositoryRef) -> str:
    return f"[cyan]{escape(repo.owner)}[/cyan]/[bold]{escape(repo.name)}[/bold]"


def status_line(console: Console, row: RepositoryStatus) -> None:
    label = row.label
    console.print(f"{repo_slug(row.repo)} - [{label.style}]{label.text}[/{label.style}]")


def status_json(console: Console, rows: Sequence[RepositoryStatus]) -> None:
    data = [row.to_dict() for row in rows]
    console.out(json.dumps(data, indent=2), highlight=False)


def match_list(console: Console, matches: Sequence[RepositoryRef]) -> None:
    info(console, "Multiple repositories found:")
    for index, repo in enumerate(matches, start=1):
        console.print(f"  {index}: {repo_slug(repo)} -> {escape(str(repo.path))}", highlight=False, soft_wrap=True)
    console.print()
    console.print("Use the full format: repman cd owner/repo")
