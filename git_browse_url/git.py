"""Thin wrappers around git CLI commands."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Iterable

from .exceptions import GitCommandError

logger = logging.getLogger(__name__)


def run_git(
    args: Iterable[str],
    *,
    cwd: Path,
    check: bool = True,
) -> subprocess.CompletedProcess[str]:
    """Execute a git command and optionally raise on failure."""

    cmd = ["git", *args]
    logger.debug("Running %s in %s", " ".join(cmd), cwd)
    proc = subprocess.run(
        cmd,
        cwd=str(cwd),
        capture_output=True,
        text=True,
        check=False,
    )
    if check and proc.returncode != 0:
        raise GitCommandError(cmd, proc.returncode, proc.stderr)
    return proc


def rev_parse_toplevel(path: Path) -> Path:
    proc = run_git(["rev-parse", "--show-toplevel"], cwd=path)
    return Path(proc.stdout.strip())


def remote_url(path: Path, remote: str = "origin") -> str:
    proc = run_git(["remote", "get-url", remote], cwd=path)
    return proc.stdout.strip()


def list_remotes(path: Path) -> list[str]:
    proc = run_git(["remote"], cwd=path)
    return [line.strip() for line in proc.stdout.splitlines() if line.strip()]


def default_remote(path: Path, preferred: str = "origin") -> str | None:
    remotes = list_remotes(path)
    if preferred in remotes:
        return preferred
    return remotes[0] if remotes else None


def current_branch(path: Path) -> str | None:
    # empty on a detached HEAD
    proc = run_git(["branch", "--show-current"], cwd=path)
    branch = proc.stdout.strip()
    return branch or None


__all__ = [
    "run_git",
    "rev_parse_toplevel",
    "remote_url",
    "list_remotes",
    "default_remote",
    "current_branch",
]
