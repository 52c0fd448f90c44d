"""Domain-level exception hierarchy.

Purpose
-------
Expose the stable error taxonomy raised by descriptors, the chain stack, and
the dispatcher. The hierarchy lives in the domain layer so the application and
presentation layers can depend on it without reaching outward.

Contents
--------
* :class:`LogEventsError` – umbrella base class for all library failures.
* :class:`MissingNameError` – descriptor constructed without a name.
* :class:`InvalidKindError` – mode kind outside the closed set.
* :class:`UnknownEmitterError` – dispatch to an emitter that was never
  registered.
* :class:`ReservedNameError` – registration would shadow a logger attribute.

System Role
-----------
All errors are raised synchronously at the offending call. Nothing in the
library retries or recovers from them; callers catch :class:`LogEventsError` to
handle every failure uniformly.
"""

from __future__ import annotations

from typing import Iterable


class LogEventsError(Exception):
    """Base type for all exceptions emitted by ``lib_log_events``."""


class MissingNameError(LogEventsError, ValueError):
    """Raised when a mode or emitter descriptor is created without a name.

    Examples
    --------
    >>> str(MissingNameError())
    'expected options.name to be set'
    """

    def __init__(self, message: str = "expected options.name to be set") -> None:
        super().__init__(message)


class InvalidKindError(LogEventsError, ValueError):
    """Raised when a mode kind is not part of the allowed set.

    The message enumerates the allowed values and repeats the offending value
    verbatim so CLI users can correct their input.

    Examples
    --------
    >>> str(InvalidKindError(["mode", "toggle"], "bogus"))
    '"type" must be one of [mode, toggle] but got "bogus"'
    """

    def __init__(self, allowed: Iterable[str], value: object) -> None:
        self.allowed = tuple(allowed)
        self.value = value
        super().__init__(f'"type" must be one of [{", ".join(self.allowed)}] but got "{value}"')


class UnknownEmitterError(LogEventsError, LookupError):
    """Raised when the dispatcher is asked to emit through an unknown emitter.

    Examples
    --------
    >>> str(UnknownEmitterError("ghost"))
    'Unable to find emitter "ghost"'
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f'Unable to find emitter "{name}"')


class ReservedNameError(LogEventsError, ValueError):
    """Raised when a mode, style, or emitter name collides with a logger attribute."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f'"{name}" is reserved by the logger and cannot be registered')


__all__ = [
    "InvalidKindError",
    "LogEventsError",
    "MissingNameError",
    "ReservedNameError",
    "UnknownEmitterError",
]
