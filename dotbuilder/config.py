"""Configuration helpers for loading environment variables.

Rendering knobs are read from the process environment, with a project-level
``.env`` file loaded first so local overrides live in one place.  Consumers
should rely on :func:`get_env` (or the typed helpers below) instead of using
:func:`os.getenv` directly.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_INDENT_WIDTH = 2

_TRUTHY = {"1", "true", "yes", "on"}


@lru_cache(maxsize=1)
def _load_environment() -> None:
    """Load ``DOTBUILDER_*`` rendering settings from the project's ``.env`` file.

    A ``.env`` at the repository root is preferred, otherwise python-dotenv's
    own discovery runs.  Values already present in the process environment are
    never overridden, and the file is read once per process until the cache is
    cleared.
    """

    project_root = Path(__file__).resolve().parents[1]
    env_path = project_root / ".env"

    if env_path.exists():
        load_dotenv(env_path, override=False)
    else:
        load_dotenv(override=False)


def get_env(key: str, default: Optional[str] = None) -> Optional[str]:
    """Return the raw setting ``key`` after the ``.env`` file has been applied.

    Parameters
    ----------
    key:
        Setting name, e.g. ``DOTBUILDER_INDENT``.
    default:
        Returned when the setting is absent from both ``.env`` and the process
        environment.
    """

    _load_environment()
    return os.environ.get(key, default)


def indent_width() -> int:
    """Number of spaces per nesting level in serialized output."""

    raw = get_env("DOTBUILDER_INDENT")
    if raw is None:
        return DEFAULT_INDENT_WIDTH
    try:
        width = int(raw)
    except ValueError:
        return DEFAULT_INDENT_WIDTH
    return width if width >= 0 else DEFAULT_INDENT_WIDTH


def strict_ports() -> bool:
    """Whether reading an unattached cell address raises instead of warning."""

    return (get_env("DOTBUILDER_STRICT_PORTS") or "").strip().lower() in _TRUTHY


__all__ = ["get_env", "indent_width", "strict_ports"]
