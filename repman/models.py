"""Dataclasses shared across modules."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


@dataclass(frozen=True)
class RepositoryRef:
    """A repository discovered at ``<root>/<owner>/<name>``."""

    owner: str
    name: str
    path: Path

    @property
    def slug(self) -> str:
        return f"{self.owner}/{self.name}"


class StatusLabel(Enum):
    """Synchronization state of a repository relative to its upstream."""

    CLEAN = ("Clean", "green")
    DIRTY = ("Dirty", "red")
    AHEAD = ("Ahead", "red")
    BEHIND = ("Behind", "yellow")
    NOT_A_REPO = ("Not a git repository", "dim")
    ERROR = ("Error", "red")

    def __init__(self, text: str, style: str) -> None:
        self.text = text
        self.style = style


@dataclass(frozen=True)
class RepositoryStatus:
    repo: RepositoryRef
    label: StatusLabel

    def to_dict(self) -> dict[str, str]:
        return {
            "owner": self.repo.owner,
            "name": self.repo.name,
            "path": str(self.repo.path),
            "status": self.label.text,
        }


@dataclass(frozen=True)
class GitResult:
    """Exit status and captured output of one git invocation."""

    args: list[str]
    returncode: int
    stdout: str
    stderr: str

    @property
    def success(self) -> bool:
        return self.returncode == 0


class SyncOutcome(Enum):
    NOTHING_TO_COMMIT = "nothing-to-commit"
    PUSHED = "pushed"
