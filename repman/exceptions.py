"""Custom error hierarchy for repman."""

from __future__ import annotations


class RepmanError(RuntimeError):
    """Base error for the CLI."""


class ConfigError(RepmanError):
    """Raised when the repository root cannot be resolved."""


class RootDirectoryError(RepmanError):
    """Raised when a managed directory cannot be created."""


class ProcessError(RepmanError):
    """Raised when git cannot be started at all."""

    def __init__(self, command: list[str], reason: str):
        self.command = command
        self.reason = reason
        super().__init__(f"Unable to run {' '.join(command)}: {reason}")


class GitCommandError(RepmanError):
    """Raised when git ran but reported failure."""

    action = "git command failed"

    def __init__(
        self,
        command: list[str],
        returncode: int,
        *,
        stdout: str | None = None,
        stderr: str | None = None,
    ):
        self.command = command
        self.returncode = returncode
        self.stdout = stdout or ""
        self.stderr = stderr or ""
        message = f"{self.action} (exit {returncode}): {' '.join(command)}"
        details = self.stderr.strip() or self.stdout.strip()
        if details:
            message = f"{message}\n{details}"
        super().__init__(message)


class CloneError(GitCommandError):
    action = "Failed to clone repository"


class StageError(GitCommandError):
    action = "Failed to add changes"


class CommitError(GitCommandError):
    action = "Failed to commit"


class PushError(GitCommandError):
    action = "Failed to push"


class NotFoundError(RepmanError):
    """Raised when a named repository is not under the root."""


class ValidationError(RepmanError):
    """Raised when user input fails validation."""


class UserAbort(RepmanError):
    """Raised when the user cancels an interactive flow."""


__all__ = [
    "RepmanError",
    "ConfigError",
    "RootDirectoryError",
    "ProcessError",
    "GitCommandError",
    "CloneError",
    "StageError",
    "CommitError",
    "PushError",
    "NotFoundError",
    "ValidationError",
    "UserAbort",
]
