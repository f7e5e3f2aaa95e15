"""Resolve the repository root and runtime settings."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .exceptions import ConfigError, RootDirectoryError

ROOT_ENV_VAR = "REPMAN_ROOT"
ROOT_DIRNAME = "repo"
CLONE_URL_TEMPLATE = "git@github.com:{owner}/{name}.git"

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def resolve_root() -> Path:
    """Return the directory holding every managed repository.

    ``REPMAN_ROOT`` wins when set; otherwise the root is ``~/repo``.
    """

    override = os.environ.get(ROOT_ENV_VAR)
    if override:
        return Path(override).expanduser()
    try:
        home = Path.home()
    except (KeyError, RuntimeError) as exc:
        raise ConfigError("Could not find home directory") from exc
    return home / ROOT_DIRNAME


def ensure_directory(path: Path) -> bool:
    """Create ``path`` and its parents, returning True when it was missing."""

    if path.is_dir():
        return False
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise RootDirectoryError(f"Unable to create directory {path}: {exc.strerror or exc}") from exc
    logger.debug("Created directory %s", path)
    return True


def ensure_root(root: Path) -> bool:
    return ensure_directory(root)


def clone_url(owner: str, name: str) -> str:
    return CLONE_URL_TEMPLATE.format(owner=owner, name=name)


__all__ = [
    "CLONE_URL_TEMPLATE",
    "ROOT_ENV_VAR",
    "clone_url",
    "configure_logging",
    "ensure_directory",
    "ensure_root",
    "resolve_root",
]
