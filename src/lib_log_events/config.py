"""Environment-driven configuration helpers.

Purpose
-------
Centralise how the CLI and host applications read mode flags from the process
environment, optionally seeded from a nearby ``.env`` file.

Contents
--------
* :data:`DOTENV_ENV_VAR` / :data:`ENV_PREFIX` – environment variable names.
* :func:`should_use_dotenv` / :func:`enable_dotenv` – opt-in ``.env`` loading
  backed by :mod:`dotenv`.
* :func:`env_flag` / :func:`mode_flags` – boolean parsing for mode options.

System Role
-----------
Outer-layer configuration consumed by :mod:`lib_log_events.cli`. The core
logger never reads the environment; mode options are plain mappings handed to
listeners such as :class:`lib_log_events.adapters.RichConsoleRenderer`.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable, Mapping

from dotenv import find_dotenv, load_dotenv

logger = logging.getLogger(__name__)

DOTENV_ENV_VAR = "LOG_EVENTS_USE_DOTENV"
"""Environment toggle enabling ``.env`` loading when no CLI flag is given."""

ENV_PREFIX = "LOG_EVENTS_"
"""Prefix of the per-mode flags, e.g. ``LOG_EVENTS_VERBOSE=1``."""

_TRUTHY = frozenset({"1", "true", "yes", "on", "y", "t"})
_FALSEY = frozenset(
    {"0", "false", "no", "off", "n", "f", "nil", "nope", "never", "none", "null", "undefined", "nada", "disabled"}
)

_DOTENV_LOADED: Path | None = None


def should_use_dotenv(*, explicit: bool | None = None, env_value: str | None = None) -> bool:
    """Decide whether ``.env`` loading is requested.

    An explicit CLI choice wins over the environment toggle.

    Examples
    --------
    >>> should_use_dotenv(explicit=False, env_value="1")
    False
    >>> should_use_dotenv(env_value="yes")
    True
    >>> should_use_dotenv()
    False
    """

    if explicit is not None:
        return explicit
    if env_value is None:
        return False
    return env_value.strip().lower() in _TRUTHY


def enable_dotenv(start: Path | None = None) -> Path | None:
    """Load the nearest ``.env`` upwards from ``start`` (default: CWD).

    Existing environment variables keep precedence. The file is loaded at most
    once per process; later calls return the path loaded first.

    Returns
    -------
    Path | None
        Resolved path of the loaded file, or ``None`` when none was found.
    """

    global _DOTENV_LOADED
    if _DOTENV_LOADED is not None:
        return _DOTENV_LOADED

    if start is None:
        found = find_dotenv(usecwd=True)
    else:
        found = _find_upwards(start)
    if not found:
        logger.debug("no .env file found")
        return None

    path = Path(found).resolve()
    load_dotenv(path, override=False)
    _DOTENV_LOADED = path
    logger.debug("loaded environment from %s", path)
    return path


def _find_upwards(start: Path) -> str:
    current = start.resolve()
    for candidate in (current, *current.parents):
        env_file = candidate / ".env"
        if env_file.is_file():
            return str(env_file)
    return ""


def _reset_dotenv_state_for_testing() -> None:
    """Forget which ``.env`` was loaded so tests can load again."""

    global _DOTENV_LOADED
    _DOTENV_LOADED = None


def parse_flag(value: str | None, default: bool = False) -> bool:
    """Interpret a flag string; unknown or empty values fall back to ``default``.

    Examples
    --------
    >>> parse_flag("Nope"), parse_flag("on"), parse_flag("maybe", default=True)
    (False, True, True)
    """

    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in _TRUTHY:
        return True
    if normalized in _FALSEY:
        return False
    return default


def env_flag(name: str, default: bool = False, environ: Mapping[str, str] | None = None) -> bool:
    """Return the boolean value of environment variable ``name``."""

    source = os.environ if environ is None else environ
    return parse_flag(source.get(name), default)


def mode_env_var(mode: str) -> str:
    """Return the environment variable holding ``mode``'s flag.

    >>> mode_env_var("verbose")
    'LOG_EVENTS_VERBOSE'
    """

    return ENV_PREFIX + mode.upper().replace("-", "_")


def mode_flags(modes: Iterable[str], environ: Mapping[str, str] | None = None) -> dict[str, bool]:
    """Read one boolean option per mode from the environment.

    Examples
    --------
    >>> mode_flags(["verbose", "debug"], {"LOG_EVENTS_VERBOSE": "true"})
    {'verbose': True, 'debug': False}
    """

    return {mode: env_flag(mode_env_var(mode), False, environ) for mode in modes}


__all__ = [
    "DOTENV_ENV_VAR",
    "ENV_PREFIX",
    "enable_dotenv",
    "env_flag",
    "mode_env_var",
    "mode_flags",
    "parse_flag",
    "should_use_dotenv",
]
