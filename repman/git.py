"""Thin wrappers around git CLI commands."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Iterable

from .exceptions import ProcessError
from .models import GitResult

logger = logging.getLogger(__name__)


def run_git(args: Iterable[str], *, cwd: Path) -> GitResult:
    """Execute a git command in ``cwd`` and capture its output.

    A nonzero exit is returned to the caller; only a git that cannot be
    started raises.
    """

    cmd = ["git", *args]
    logger.debug("Running %s in %s", " ".join(cmd), cwd)
    try:
        proc = subprocess.run(
            cmd,
            cwd=str(cwd),
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as exc:
        raise ProcessError(cmd, exc.strerror or str(exc)) from exc
    if proc.returncode != 0:
        logger.debug("%s exited with %s", " ".join(cmd), proc.returncode)
    return GitResult(args=cmd, returncode=proc.returncode, stdout=proc.stdout, stderr=proc.stderr)


def clone(url: str, target: Path) -> GitResult:
    return run_git(["clone", url, str(target)], cwd=target.parent)


def status_porcelain(path: Path) -> GitResult:
    return run_git(["status", "--porcelain", "--branch"], cwd=path)


def add_all(path: Path) -> GitResult:
    return run_git(["add", "."], cwd=path)


def has_staged_changes(path: Path) -> bool:
    result = run_git(["diff", "--cached", "--quiet"], cwd=path)
    return not result.success


def commit(path: Path, message: str) -> GitResult:
    return run_git(["commit", "-m", message], cwd=path)


def push(path: Path) -> GitResult:
    return run_git(["push"], cwd=path)
