"""Shared fixtures for building repository trees."""

from __future__ import annotations

import io
from pathlib import Path

from rich.console import Console

from repman.models import GitResult


def make_tree(root: Path, *slugs: str) -> None:
    for slug in slugs:
        (root / slug).mkdir(parents=True, exist_ok=True)


def make_console(width: int = 200) -> tuple[Console, io.StringIO]:
    buffer = io.StringIO()
    return Console(file=buffer, width=width, color_system=None), buffer


def git_result(returncode: int = 0, stdout: str = "", stderr: str = "", args: list[str] | None = None) -> GitResult:
    return GitResult(args=args or ["git"], returncode=returncode, stdout=stdout, stderr=stderr)


_real_iterdir = Path.iterdir


def unreadable(dirname: str):
    """Return an iterdir replacement that fails for directories named ``dirname``."""

    def iterdir(self: Path):
        if self.name == dirname:
            raise PermissionError(13, "Permission denied", str(self))
        return _real_iterdir(self)

    return iterdir
