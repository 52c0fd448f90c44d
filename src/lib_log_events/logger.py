"""Chainable logger façade wiring descriptors, the chain stack, and the bus.

Purpose
-------
Expose the registration API (:meth:`Logger.mode`, :meth:`Logger.style`,
:meth:`Logger.emitter`) and turn attribute chains such as
``logger.verbose.red.error("disk full")`` into published events.

Contents
--------
* :data:`DEFAULT_EMITTER` – name of the emitter registered on every logger.
* :class:`ToggleLink` / :class:`ChainLink` – tokens returned by chain access.
* :class:`Logger` – per-instance registries, stack, and dispatcher.
* :func:`create` – factory for isolated loggers.

System Role
-----------
Composition point of the package: the domain :class:`Stack` records chain
state, :func:`create_dispatch` drains it, and an :class:`EventBusPort` delivers
the events. Registries live on the instance, so two loggers never see each
other's modes, styles, or emitters.

Chain semantics
---------------
* Reading a mode adds it to the current record. The returned link is callable
  (``logger.verbose("msg")`` emits through ``log``) unless the mode is a
  toggle, whose link cannot be called.
* Reading a style queues it. Calling the link applies the style transform to
  the arguments and returns the result instead of emitting. Only the style
  is removed from the open record: modes read before it stay there, so
  ``logger.verbose(logger.red("x"))`` still emits with ``verbose``. A statement
  ending in a style call (``logger.verbose.red("x")``) therefore leaves
  ``verbose`` on the record the next chain continues.
* Reading an emitter completes the current record (continuing from the previous
  one when it is already complete). Calling the link publishes every record of
  the chain and returns the logger, so chains can continue after a call.
"""

from __future__ import annotations

import logging
from functools import partial
from types import MappingProxyType
from typing import Any, Callable, Mapping

from .adapters.event_bus import EventBus
from .application.ports import EventBusPort, Listener
from .application.use_cases import create_dispatch
from .domain import (
    EmitterDescriptor,
    MissingNameError,
    ModeDescriptor,
    ModeKind,
    ReservedNameError,
    Stack,
    UnknownEmitterError,
    identity,
)
from .domain.descriptors import Transform

_LOGGER = logging.getLogger(__name__)

DEFAULT_EMITTER = "log"

_MODE = "mode"
_STYLE = "style"
_EMITTER = "emitter"


class ToggleLink:
    """Non-callable chain token returned by toggle modes such as ``not_``.

    Attribute access continues the chain on the owning logger.
    """

    __slots__ = ("_logger", "_name")

    def __init__(self, logger: "Logger", name: str) -> None:
        self._logger = logger
        self._name = name

    @property
    def logger(self) -> "Logger":
        return self._logger

    def __getattr__(self, name: str) -> Any:
        return getattr(self._logger, name)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self._name}>"


class ChainLink(ToggleLink):
    """Callable chain token returned by modes, styles, and emitters."""

    __slots__ = ("_call",)

    def __init__(self, logger: "Logger", name: str, call: Callable[..., Any]) -> None:
        super().__init__(logger, name)
        self._call = call

    def __call__(self, *args: Any) -> Any:
        return self._call(*args)


class Logger:
    """Mode- and style-aware event emitter driven by attribute chains.

    Parameters
    ----------
    bus:
        Event bus used for registration notices and emitted records; a fresh
        :class:`EventBus` when omitted.

    Examples
    --------
    >>> logger = Logger()
    >>> _ = logger.mode("verbose").style("red").emitter("error").emitter("warn")
    >>> seen = []
    >>> _ = logger.on("*", lambda name, record: seen.append(record.to_dict()))
    >>> _ = logger.verbose.red.error.warn("foo")
    >>> [(item["name"], item["modes"], item["styles"], item["args"]) for item in seen]
    [('error', ['verbose'], ['red'], ['foo']), ('warn', ['verbose'], ['red'], ['foo'])]
    """

    def __init__(self, bus: EventBusPort | None = None) -> None:
        self._bus: EventBusPort = bus if bus is not None else EventBus()
        self._stack = Stack()
        self._modes: dict[str, ModeDescriptor] = {}
        self._styles: dict[str, Transform] = {}
        self._emitters: dict[str, EmitterDescriptor] = {}
        self._accessors: dict[str, str] = {}
        self._dispatch = create_dispatch(stack=self._stack, emitters=self._emitters, bus=self._bus)
        self.emitter(DEFAULT_EMITTER)

    # registration -------------------------------------------------------

    def mode(
        self,
        name: str,
        transform: Transform | None = None,
        *,
        kind: ModeKind | str = ModeKind.MODE,
    ) -> "Logger":
        """Register a mode reachable as ``logger.<name>``.

        ``kind="toggle"`` creates a mode that only tags the chain (e.g. ``not_``)
        and cannot be called with a message. Publishes ``"mode"`` with the name.

        Raises
        ------
        MissingNameError
            When ``name`` is empty.
        InvalidKindError
            When ``kind`` is not ``"mode"`` or ``"toggle"``.
        ReservedNameError
            When ``name`` would shadow a logger attribute.
        """

        descriptor = ModeDescriptor(name, kind=kind, transform=transform)
        self._register(name, _MODE)
        self._modes[name] = descriptor
        self._bus.publish("mode", name)
        return self

    def style(self, name: str, transform: Transform | None = None) -> "Logger":
        """Register a style reachable as ``logger.<name>``; publishes ``"style"``."""

        if not name:
            raise MissingNameError()
        self._register(name, _STYLE)
        self._styles[name] = transform or identity
        self._bus.publish("style", name)
        return self

    def emitter(self, name: str, priority: int = 100, transform: Transform | None = None) -> "Logger":
        """Register an emitter reachable as ``logger.<name>``; publishes ``"emitter"``.

        ``priority`` follows log-level conventions: lower numbers are more
        severe. Re-registering an existing name replaces its descriptor.
        """

        descriptor = EmitterDescriptor(name, priority=priority, transform=transform)
        self._register(name, _EMITTER)
        self._emitters[name] = descriptor
        self._bus.publish("emitter", name)
        return self

    def _register(self, name: str, kind: str) -> None:
        if name.startswith("_") or hasattr(type(self), name):
            raise ReservedNameError(name)
        previous = self._accessors.get(name)
        if previous is not None and previous != kind:
            self._registry(previous).pop(name, None)
            _LOGGER.debug("%s %r re-registered as %s", previous, name, kind)
        self._accessors[name] = kind
        _LOGGER.debug("registered %s %r", kind, name)

    def _registry(self, kind: str) -> dict[str, Any]:
        return {_MODE: self._modes, _STYLE: self._styles, _EMITTER: self._emitters}[kind]

    # chain access -------------------------------------------------------

    def __getattr__(self, name: str) -> ToggleLink:
        if name.startswith("_"):
            raise AttributeError(name)
        kind = self._accessors.get(name)
        if kind == _MODE:
            return self._read_mode(self._modes[name])
        if kind == _STYLE:
            return self._read_style(name)
        if kind == _EMITTER:
            return self._read_emitter(self._emitters[name])
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | set(self._accessors))

    def _read_mode(self, mode: ModeDescriptor) -> ToggleLink:
        self._stack.add_mode(mode)
        if mode.is_toggle:
            return ToggleLink(self, mode.name)
        return ChainLink(self, mode.name, self._call_mode)

    def _read_style(self, name: str) -> ChainLink:
        self._stack.add_style(name)
        return ChainLink(self, name, partial(self._call_style, name))

    def _read_emitter(self, emitter: EmitterDescriptor) -> ChainLink:
        self._stack.chain_emitter(emitter)
        return ChainLink(self, emitter.name, partial(self.emit, emitter.name))

    def _call_mode(self, *args: Any) -> "Logger":
        default = self._emitters.get(DEFAULT_EMITTER)
        if default is None:
            raise UnknownEmitterError(DEFAULT_EMITTER)
        self._stack.set_name(default)
        return self.emit(DEFAULT_EMITTER, *args)

    def _call_style(self, name: str, *args: Any) -> Any:
        self._stack.remove_style(name)
        return self._styles[name](*args)

    # emission -----------------------------------------------------------

    def emit(self, name: str, *args: Any) -> "Logger":
        """Publish every record of the current chain with ``args``.

        When no record of the chain was completed by ``name`` yet (for example
        ``logger.verbose; logger.emit("error", "x")``), ``name`` completes the
        current record first.

        For each record, ``"*"`` listeners receive ``(record.name, record)``
        before the record's own listeners receive ``(record)``.

        Raises
        ------
        UnknownEmitterError
            When ``name`` is not a registered emitter. The chain state is kept.
        """

        self._dispatch(name, *args)
        return self

    # subscription -------------------------------------------------------

    def on(self, event: str, listener: Listener) -> "Logger":
        """Subscribe ``listener`` to ``event`` (``"*"`` receives every record)."""

        self._bus.on(event, listener)
        return self

    def once(self, event: str, listener: Listener) -> "Logger":
        """Subscribe ``listener`` to the next ``event`` only."""

        self._bus.once(event, listener)
        return self

    def off(self, event: str | None = None, listener: Listener | None = None) -> "Logger":
        """Unsubscribe listeners; see :meth:`EventBus.off`."""

        self._bus.off(event, listener)
        return self

    def listeners(self, event: str) -> list[Listener]:
        return self._bus.listeners(event)

    def has_listeners(self, event: str) -> bool:
        return self._bus.has_listeners(event)

    # introspection ------------------------------------------------------

    @property
    def stack(self) -> Stack:
        """Chain state of this logger."""

        return self._stack

    @property
    def modes(self) -> Mapping[str, ModeDescriptor]:
        return MappingProxyType(self._modes)

    @property
    def styles(self) -> Mapping[str, Transform]:
        return MappingProxyType(self._styles)

    @property
    def emitters(self) -> Mapping[str, EmitterDescriptor]:
        return MappingProxyType(self._emitters)

    @property
    def mode_keys(self) -> list[str]:
        return list(self._modes)

    @property
    def style_keys(self) -> list[str]:
        return list(self._styles)

    @property
    def emitter_keys(self) -> list[str]:
        return list(self._emitters)

    def __repr__(self) -> str:
        return f"<Logger modes={self.mode_keys} styles={self.style_keys} emitters={self.emitter_keys}>"


def create(bus: EventBusPort | None = None) -> Logger:
    """Return a new :class:`Logger` with its own registries and chain state."""

    return Logger(bus)


default_logger = create()
"""Pre-constructed logger for applications that need a single shared instance."""


__all__ = ["ChainLink", "DEFAULT_EMITTER", "Logger", "ToggleLink", "create", "default_logger"]
