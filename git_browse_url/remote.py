"""Turn git remote references into web base URLs."""

from __future__ import annotations

import re

_SSH_RE = re.compile(r"@(?P<domain>[^:]+):(?P<organization>[^/]+)/(?P<repository>.+)")

_GIT_SUFFIX = ".git"


def resolve_ssh_url(url: str) -> str:
    """Rewrite ``git@host:org/repo.git`` style remotes to an ``http://`` URL.

    SSH remotes say nothing about the web scheme, and self-hosted instances
    are not guaranteed to serve TLS, so ``http`` is used. Anything that does
    not look like an SSH remote is returned unchanged.
    """

    match = _SSH_RE.search(url)
    if match is None:
        return url
    domain = match.group("domain")
    organization = match.group("organization")
    repository = match.group("repository")
    return f"http://{domain}/{organization}/{repository}"


def strip_git_suffix(url: str) -> str:
    if url.endswith(_GIT_SUFFIX):
        return url[: -len(_GIT_SUFFIX)]
    return url


def ensure_trailing_slash(url: str) -> str:
    return url if url.endswith("/") else f"{url}/"


def resolve_remote_url(raw: str) -> str:
    """Return the canonical base URL for a raw remote reference.

    The result has no ``.git`` suffix and ends with exactly one ``/``.
    """

    url = resolve_ssh_url(raw)
    return ensure_trailing_slash(strip_git_suffix(url))


__all__ = [
    "resolve_ssh_url",
    "strip_git_suffix",
    "ensure_trailing_slash",
    "resolve_remote_url",
]
