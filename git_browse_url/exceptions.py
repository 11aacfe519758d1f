"""Custom error hierarchy for git-browse-url."""

from __future__ import annotations


class BrowseUrlError(RuntimeError):
    """Base error for the CLI."""


class MissingRemoteError(BrowseUrlError):
    """Raised when no remote is available to build a URL from."""

    def __init__(self, message: str = "No remote is found in the repository"):
        super().__init__(message)


class MissingBranchError(BrowseUrlError):
    """Raised when no branch could be determined."""

    def __init__(self, message: str = "No branches found in this repository"):
        super().__init__(message)


class GitCommandError(BrowseUrlError):
    """Raised when an underlying git command fails."""

    def __init__(self, command: list[str], returncode: int, stderr: str | None = None):
        self.command = command
        self.returncode = returncode
        self.stderr = stderr or ""
        message = f"git command failed (exit {returncode}): {' '.join(command)}"
        if self.stderr.strip():
            message = f"{message}\n{self.stderr.strip()}"
        super().__init__(message)


class ValidationError(BrowseUrlError):
    """Raised when configuration or user input fails validation."""


__all__ = [
    "BrowseUrlError",
    "MissingRemoteError",
    "MissingBranchError",
    "GitCommandError",
    "ValidationError",
]
