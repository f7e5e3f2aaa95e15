"""Classify `git status --porcelain --branch` output."""

from __future__ import annotations

import logging
from pathlib import Path

from . import git
from .exceptions import ProcessError
from .models import GitResult, StatusLabel

logger = logging.getLogger(__name__)


def classify(result: GitResult) -> StatusLabel:
    """Map one status query onto a label.

    The branch line is checked before the change lines, so a repository that
    is ahead of its upstream and also has local edits reports ``AHEAD``.
    """

    if not result.success:
        return StatusLabel.NOT_A_REPO
    lines = result.stdout.splitlines()
    if not lines:
        return StatusLabel.CLEAN
    branch_line = lines[0]
    if "[ahead" in branch_line:
        return StatusLabel.AHEAD
    if "[behind" in branch_line:
        return StatusLabel.BEHIND
    if any(line.strip() for line in lines[1:]):
        return StatusLabel.DIRTY
    return StatusLabel.CLEAN


def repository_status(path: Path) -> StatusLabel:
    try:
        return classify(git.status_porcelain(path))
    except (ProcessError, OSError) as exc:
        logger.warning("Unable to read status of %s: %s", path, exc)
        return StatusLabel.ERROR
