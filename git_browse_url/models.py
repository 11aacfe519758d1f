"""Dataclasses shared across modules."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ViewMode(str, Enum):
    """Which remote view a URL points at."""

    TREE = "tree"
    BLOB = "blob"


@dataclass(frozen=True)
class BuildRequest:
    """Inputs for a single URL build.

    ``remote`` is a remote name such as ``origin``; the builder looks up the
    configured URL for it.
    """

    remote: str | None
    branch: str | None
    file: str = "./"
    line: int | None = None


@dataclass(frozen=True)
class ResolvedPath:
    """A path relative to the repository root, already percent-encoded."""

    relative_path: str
    mode: ViewMode
