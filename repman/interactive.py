"""Interactive prompt helpers built on InquirerPy."""

from __future__ import annotations

import sys
from typing import Any, Sequence

from InquirerPy import inquirer
from InquirerPy.base.control import Choice

from .exceptions import UserAbort, ValidationError
from .models import RepositoryRef


def _ensure_tty() -> None:
    if not sys.stdin.isatty():
        raise ValidationError(
            "Interactive mode requires a TTY. Use the owner/repo form to pick a repository non-interactively."
        )


def fuzzy_select(message: str, choices: Sequence[Choice | str]) -> Any:
    _ensure_tty()
    try:
        return inquirer.fuzzy(message=message, choices=choices).execute()
    except KeyboardInterrupt as exc:
        raise UserAbort("Selection cancelled.") from exc


def build_repository_choices(repos: Sequence[RepositoryRef]) -> list[Choice]:
    """Return one choice per repository, keyed by its slug."""

    seen: set[str] = set()
    result: list[Choice] = []
    for repo in repos:
        if repo.slug in seen:
            continue
        seen.add(repo.slug)
        result.append(Choice(value=repo.slug, name=f"{repo.slug} · {repo.path}"))
    return result


def select_repository(repos: Sequence[RepositoryRef]) -> RepositoryRef:
    lookup = {repo.slug: repo for repo in repos}
    selection = fuzzy_select("Select repository", build_repository_choices(repos))
    try:
        return lookup[str(selection)]
    except KeyError as exc:
        raise ValidationError("Selected repository could not be resolved.") from exc
