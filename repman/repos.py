"""Discover repositories laid out as ``<root>/<owner>/<name>``."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

from .exceptions import RootDirectoryError
from .models import RepositoryRef

logger = logging.getLogger(__name__)


def scan(root: Path) -> Iterator[RepositoryRef]:
    """Yield every repository directory two levels below ``root``.

    Files at either level are ignored. Entries are visited sorted by owner
    and then by name so repeated runs list repositories in the same order.
    The filesystem is re-read on every call. An unreadable root raises
    ``RootDirectoryError``; an unreadable owner directory is skipped.
    """

    if not root.is_dir():
        return
    for owner_dir in _root_owners(root):
        try:
            repo_dirs = _child_dirs(owner_dir)
        except OSError as exc:
            logger.warning("Skipping %s: %s", owner_dir, exc.strerror or exc)
            continue
        for repo_dir in repo_dirs:
            yield RepositoryRef(owner=owner_dir.name, name=repo_dir.name, path=repo_dir)


def find_repository(root: Path, name: str) -> RepositoryRef | None:
    """Return the first owner's repository literally named ``name``."""

    if not is_plain_name(name) or not root.is_dir():
        return None
    for owner_dir in _root_owners(root):
        candidate = owner_dir / name
        try:
            found = candidate.is_dir()
        except OSError as exc:
            logger.warning("Skipping %s: %s", owner_dir, exc.strerror or exc)
            continue
        if found:
            return RepositoryRef(owner=owner_dir.name, name=name, path=candidate)
    return None


def match_repositories(root: Path, query: str) -> list[RepositoryRef]:
    """Collect repositories whose name equals ``query`` or contains it.

    Substring matching ignores case. An exact hit does not hide other
    repositories that merely contain the query.
    """

    needle = query.lower()
    matches = [repo for repo in scan(root) if repo.name == query or needle in repo.name.lower()]
    logger.debug("Query %r matched %d repositories", query, len(matches))
    return matches


def split_slug(query: str) -> tuple[str, str] | None:
    parts = query.split("/")
    if len(parts) != 2:
        return None
    owner, name = parts
    if not owner or not name:
        return None
    return owner, name


def is_plain_name(value: str) -> bool:
    """True when ``value`` names a single directory entry below its parent."""

    return bool(value.strip()) and "/" not in value and "\0" not in value and value not in {".", ".."}


def _root_owners(root: Path) -> list[Path]:
    try:
        return _child_dirs(root)
    except OSError as exc:
        raise RootDirectoryError(f"Unable to read directory {root}: {exc.strerror or exc}") from exc


def _child_dirs(path: Path) -> list[Path]:
    return sorted(child for child in path.iterdir() if child.is_dir())
