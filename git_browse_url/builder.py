"""High-level orchestration for building browse URLs."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import partial
from pathlib import Path
from typing import Callable

from . import git
from .exceptions import MissingBranchError, MissingRemoteError
from .models import BuildRequest
from .paths import encode_segment, resolve_path
from .remote import resolve_remote_url

logger = logging.getLogger(__name__)


@dataclass
class UrlBuilder:
    """Assemble ``<base><mode>/<branch>/<path>#L<line>`` URLs.

    ``remote_lookup`` maps a remote name to its configured URL and
    ``root_lookup`` returns the repository's top-level directory.
    """

    remote_lookup: Callable[[str], str]
    root_lookup: Callable[[], str | Path]
    cwd: str
    exists: Callable[[str], bool] = os.path.exists

    @classmethod
    def for_repository(cls, path: Path) -> "UrlBuilder":
        return cls(
            remote_lookup=partial(git.remote_url, path),
            root_lookup=partial(git.rev_parse_toplevel, path),
            cwd=str(path),
        )

    def build(self, request: BuildRequest) -> str:
        if request.remote is None:
            raise MissingRemoteError()
        if request.branch is None:
            raise MissingBranchError()

        base_url = resolve_remote_url(self.remote_lookup(request.remote))
        root = str(self.root_lookup())
        logger.debug("Remote %s resolves to %s, root is %s", request.remote, base_url, root)

        resolved = resolve_path(request.file, self.cwd, root, self.exists)
        logger.debug("Path %r resolves to %r (%s)", request.file, resolved.relative_path, resolved.mode.value)

        line_number = "" if request.line is None else f"#L{request.line}"
        # branch names are encoded whole, "feature/x" becomes "feature%2Fx"
        return "".join(
            [
                base_url,
                resolved.mode.value,
                "/",
                encode_segment(request.branch),
                "/",
                resolved.relative_path,
                line_number,
            ]
        )


def build_url(
    request: BuildRequest,
    *,
    remote_lookup: Callable[[str], str],
    root_lookup: Callable[[], str | Path],
    cwd: str,
    exists: Callable[[str], bool] = os.path.exists,
) -> str:
    builder = UrlBuilder(remote_lookup=remote_lookup, root_lookup=root_lookup, cwd=cwd, exists=exists)
    return builder.build(request)


__all__ = ["UrlBuilder", "build_url"]
