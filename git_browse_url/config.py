"""Environment-driven settings and logging setup."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping

from .exceptions import ValidationError

REMOTE_ENV = "GIT_BROWSE_URL_REMOTE"
BRANCH_ENV = "GIT_BROWSE_URL_BRANCH"
OPEN_ENV = "GIT_BROWSE_URL_OPEN"

DEFAULT_REMOTE = "origin"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    """Defaults applied when the CLI flags are omitted."""

    remote: str | None = None
    branch: str | None = None
    open_browser: bool = False


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    env = os.environ if environ is None else environ
    return Settings(
        remote=_optional(env, REMOTE_ENV),
        branch=_optional(env, BRANCH_ENV),
        open_browser=_flag(env, OPEN_ENV),
    )


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def _optional(env: Mapping[str, str], var: str) -> str | None:
    raw = env.get(var, "").strip()
    return raw or None


def _flag(env: Mapping[str, str], var: str) -> bool:
    raw = env.get(var, "").strip().lower()
    if not raw or raw in _FALSY:
        return False
    if raw in _TRUTHY:
        return True
    raise ValidationError(
        f"Environment variable {var} must be one of {', '.join(sorted(_TRUTHY | _FALSY))}, got {raw!r}."
    )


__all__ = ["Settings", "load_settings", "configure_logging", "DEFAULT_REMOTE"]
