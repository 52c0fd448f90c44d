"""Named descriptors for chain-accessible modes and emitters.

Purpose
-------
Describe the capabilities a logger exposes: modes that tag a chain segment
(``verbose``, ``debug``, the ``not`` toggle) and emitters that name the event
published when the chain is invoked (``log``, ``info``, ``error``).

Contents
--------
* :func:`identity` – default transform returning its argument unchanged.
* :class:`ModeKind` – closed set of mode kinds with string conversion.
* :class:`ModeDescriptor` – mode record with validated kind.
* :class:`EmitterDescriptor` – emission channel with a numeric priority.

System Role
-----------
Descriptors are created once per registration by :class:`lib_log_events.Logger`
and referenced (never copied) by :class:`EmissionRecord` instances, so listeners
can compare modes by identity and call their transforms.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable

from .errors import InvalidKindError, MissingNameError

Transform = Callable[[Any], Any]


def identity(value: Any) -> Any:
    """Return ``value`` unchanged.

    >>> identity("msg")
    'msg'
    """

    return value


class ModeKind(Enum):
    """Kinds a mode may take; toggles never emit on their own."""

    MODE = "mode"
    TOGGLE = "toggle"

    @classmethod
    def allowed(cls) -> tuple[str, ...]:
        """Return the accepted string values in declaration order."""

        return tuple(member.value for member in cls)

    @classmethod
    def coerce(cls, value: "ModeKind | str") -> "ModeKind":
        """Translate ``value`` into a :class:`ModeKind` or raise :class:`InvalidKindError`.

        Examples
        --------
        >>> ModeKind.coerce("toggle") is ModeKind.TOGGLE
        True
        >>> try:
        ...     ModeKind.coerce("bogus")
        ... except InvalidKindError as exc:
        ...     print(exc)
        "type" must be one of [mode, toggle] but got "bogus"
        """

        if isinstance(value, ModeKind):
            return value
        try:
            return cls(value)
        except ValueError as exc:
            raise InvalidKindError(cls.allowed(), value) from exc


def _require_name(name: str | None) -> str:
    if not name:
        raise MissingNameError()
    return name


class ModeDescriptor:
    """Mode registered on a logger.

    Parameters
    ----------
    name:
        Required mode name, also the attribute used in chains.
    kind:
        :class:`ModeKind` or its string value; defaults to ``"mode"``.
    transform:
        Optional callable applied to message arguments by listeners.
    """

    __slots__ = ("_name", "_kind", "_transform")

    def __init__(
        self,
        name: str | None = None,
        kind: ModeKind | str = ModeKind.MODE,
        transform: Transform | None = None,
    ) -> None:
        self._name = _require_name(name)
        self._kind = ModeKind.coerce(kind)
        self._transform = transform

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = value

    @property
    def kind(self) -> ModeKind:
        return self._kind

    @kind.setter
    def kind(self, value: ModeKind | str) -> None:
        self._kind = ModeKind.coerce(value)

    @property
    def is_toggle(self) -> bool:
        return self._kind is ModeKind.TOGGLE

    @property
    def transform(self) -> Transform:
        """Return the configured transform or :func:`identity` when unset."""

        return self._transform or identity

    @transform.setter
    def transform(self, fn: Transform | None) -> None:
        self._transform = fn

    def __repr__(self) -> str:
        return self._name


class EmitterDescriptor:
    """Emission channel registered on a logger.

    ``priority`` mirrors classic log levels: higher numbers are less severe.
    """

    __slots__ = ("_name", "_priority", "_transform")

    def __init__(
        self,
        name: str | None = None,
        priority: int = 100,
        transform: Transform | None = None,
    ) -> None:
        self._name = _require_name(name)
        self._priority = priority
        self._transform = transform

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = value

    @property
    def priority(self) -> int:
        return self._priority

    @priority.setter
    def priority(self, value: int) -> None:
        self._priority = value

    @property
    def transform(self) -> Transform:
        """Return the configured transform or :func:`identity` when unset."""

        return self._transform or identity

    @transform.setter
    def transform(self, fn: Transform | None) -> None:
        self._transform = fn

    def __repr__(self) -> str:
        return self._name


__all__ = ["EmitterDescriptor", "ModeDescriptor", "ModeKind", "Transform", "identity"]
