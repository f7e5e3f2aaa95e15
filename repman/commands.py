"""High-level orchestration for the repman subcommands."""

from __future__ import annotations

import logging
import shlex
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from . import git, render
from .config import clone_url, ensure_directory, ensure_root
from .exceptions import (
    CloneError,
    CommitError,
    NotFoundError,
    PushError,
    StageError,
    ValidationError,
)
from .interactive import select_repository
from .models import RepositoryRef, RepositoryStatus, SyncOutcome
from .repos import find_repository, is_plain_name, match_repositories, scan, split_slug
from .status import repository_status

logger = logging.getLogger(__name__)


def add_repository(root: Path, owner: str, name: str, *, console: Console) -> Path:
    """Clone ``owner/name`` from GitHub unless it is already present."""

    _validate_component("Owner", owner)
    _validate_component("Repository name", name)
    if ensure_root(root):
        console.print(f"Created repository root directory: {escape(str(root))}", soft_wrap=True)
    owner_dir = root / owner
    target = owner_dir / name
    if target.exists():
        render.success(console, f"Repository already exists at: {escape(str(target))}")
        return target

    ensure_directory(owner_dir)
    url = clone_url(owner, name)
    console.print(f"Cloning [cyan]{escape(url)}[/cyan] to {escape(str(target))}...", soft_wrap=True)
    result = git.clone(url, target)
    if not result.success:
        raise CloneError(result.args, result.returncode, stdout=result.stdout, stderr=result.stderr)

    render.success(console, f"Successfully cloned to: {escape(str(target))}")
    console.print(f"Navigate to: [yellow]cd {escape(str(target))}[/yellow]", soft_wrap=True)
    return target


def show_status(root: Path, *, console: Console, as_json: bool = False) -> list[RepositoryStatus]:
    if not root.is_dir():
        if as_json:
            render.status_json(console, [])
        else:
            console.print(f"Repository root directory does not exist: {escape(str(root))}", soft_wrap=True)
        return []

    rows: list[RepositoryStatus] = []
    if not as_json:
        console.print("[bold]Repository Status:[/bold]")
        console.print()
    for repo in scan(root):
        row = RepositoryStatus(repo=repo, label=repository_status(repo.path))
        rows.append(row)
        if not as_json:
            render.status_line(console, row)

    if as_json:
        render.status_json(console, rows)
    elif not rows:
        console.print(f"No repositories found in {escape(str(root))}", soft_wrap=True)
    return rows


def sync_repository(root: Path, name: str, message: str, *, console: Console) -> SyncOutcome:
    """Stage everything, commit with ``message`` and push.

    Steps run strictly in order and the first failure aborts the sync. Earlier
    steps are not undone, so a failed push leaves the commit in place.
    """

    if not message.strip():
        raise ValidationError("Commit message cannot be empty.")
    _validate_component("Repository name", name)
    repo = find_repository(root, name)
    if repo is None:
        raise NotFoundError(f"Repository '{name}' not found")
    path = repo.path
    console.print(f"Syncing repository: {escape(str(path))}", soft_wrap=True)

    console.print("Adding all changes...")
    result = git.add_all(path)
    if not result.success:
        raise StageError(result.args, result.returncode, stdout=result.stdout, stderr=result.stderr)

    if not git.has_staged_changes(path):
        render.info(console, "No changes to commit")
        return SyncOutcome.NOTHING_TO_COMMIT

    console.print(f"Committing with message: '{escape(message)}'")
    result = git.commit(path, message)
    if not result.success:
        raise CommitError(result.args, result.returncode, stdout=result.stdout, stderr=result.stderr)

    console.print("Pushing to remote...")
    result = git.push(path)
    if not result.success:
        raise PushError(result.args, result.returncode, stdout=result.stdout, stderr=result.stderr)

    logger.debug("Synced %s", repo.slug)
    render.success(console, "Successfully synced repository!")
    return SyncOutcome.PUSHED


def locate_repository(root: Path, query: str, *, console: Console, pick: bool = False) -> Path | None:
    """Print a ``cd <path>`` line for the repository matching ``query``.

    An ``owner/name`` query is checked directly without scanning. Any other
    query is matched against every repository name; several hits are listed
    (or offered in a picker when ``pick`` is set).
    """

    if not root.is_dir():
        console.print(f"Repository root directory does not exist: {escape(str(root))}", soft_wrap=True)
        return None

    slug = split_slug(query)
    if slug is not None:
        owner, name = slug
        path = root / owner / name
        if path.exists():
            _emit_cd(console, path)
            return path
        render.error(console, f"Repository not found: {escape(str(path))}")
        return None

    matches = match_repositories(root, query)
    if not matches:
        render.error(console, f"No repositories found matching '{escape(query)}'")
        return None
    if len(matches) == 1:
        chosen: RepositoryRef = matches[0]
    elif pick:
        chosen = select_repository(matches)
    else:
        render.match_list(console, matches)
        return None
    _emit_cd(console, chosen.path)
    return chosen.path


def _emit_cd(console: Console, path: Path) -> None:
    console.out(f"cd {shlex.quote(str(path))}", highlight=False)


def _validate_component(kind: str, value: str) -> None:
    if is_plain_name(value):
        return
    if not value.strip():
        raise ValidationError(f"{kind} cannot be empty.")
    if "/" in value or "\0" in value:
        raise ValidationError(f"{kind} cannot contain '/' or null characters.")
    if value in {".", ".."}:
        raise ValidationError(f"{kind} cannot be '.' or '..'.")
