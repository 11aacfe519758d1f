"""Resolve user supplied paths relative to the repository root."""

from __future__ import annotations

import os
import re
from typing import Callable
from urllib.parse import quote

from .models import ResolvedPath, ViewMode

# Same unreserved set as JavaScript's encodeURIComponent.
_SEGMENT_SAFE = "-_.!~*'()"

_SEPARATORS = re.compile(r"[\\/]" if os.sep == "\\" else r"/")


def encode_segment(segment: str) -> str:
    return quote(segment, safe=_SEGMENT_SAFE)


def encode_relative_path(relative_path: str) -> str:
    """Percent-encode each segment of ``relative_path`` and join with ``/``."""

    return "/".join(encode_segment(part) for part in _SEPARATORS.split(relative_path))


def absolute_path(file: str, cwd: str) -> str:
    return os.path.normpath(os.path.join(cwd, file))


def join_under_root(file: str, repo_root: str) -> str:
    """Join ``file`` beneath ``repo_root`` even when ``file`` starts with a separator."""

    return os.path.normpath(repo_root + os.sep + file)


def resolve_path(
    file: str,
    cwd: str,
    repo_root: str,
    exists: Callable[[str], bool] = os.path.exists,
) -> ResolvedPath:
    """Resolve ``file`` to a root-relative, URL-ready path.

    ``file`` is read relative to ``cwd`` first. When running from a
    subdirectory and that path does not exist, but the same string does exist
    under ``repo_root``, the root-relative reading wins. The cwd probe always
    runs before the root probe.
    """

    resolved = absolute_path(file, cwd)
    root_candidate = join_under_root(file, repo_root)
    if (
        os.path.normpath(cwd) != os.path.normpath(repo_root)
        and not exists(resolved)
        and exists(root_candidate)
    ):
        resolved = root_candidate

    relative = os.path.relpath(resolved, repo_root)
    if relative == os.curdir:
        relative = ""
    mode = ViewMode.TREE if relative == "" else ViewMode.BLOB
    return ResolvedPath(relative_path=encode_relative_path(relative), mode=mode)


__all__ = ["encode_segment", "encode_relative_path", "absolute_path", "join_under_root", "resolve_path"]
