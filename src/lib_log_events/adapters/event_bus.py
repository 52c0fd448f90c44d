"""In-process synchronous event bus implementing :class:`EventBusPort`.

Purpose
-------
Provide the publish/subscribe mechanism a :class:`lib_log_events.Logger` uses
for registration notices and emitted records.

Contents
--------
* :class:`EventBus` – ordered listener registry with ``once`` support.

System Role
-----------
Default adapter wired by :class:`lib_log_events.Logger`. Listeners run inline,
in registration order, on the publishing thread. Exceptions raised by a
listener propagate to the publisher and stop the remaining listeners.
"""

from __future__ import annotations

from collections import defaultdict
from typing import Any

from lib_log_events.application.ports import EventBusPort, Listener


class EventBus(EventBusPort):
    """Keep listeners per event name and call them synchronously.

    Examples
    --------
    >>> bus = EventBus()
    >>> calls = []
    >>> bus.on("log", lambda value: calls.append(("first", value)))
    >>> bus.once("log", lambda value: calls.append(("once", value)))
    >>> bus.publish("log", 1)
    >>> bus.publish("log", 2)
    >>> calls
    [('first', 1), ('once', 1), ('first', 2)]
    """

    def __init__(self) -> None:
        self._listeners: defaultdict[str, list[Listener]] = defaultdict(list)

    def on(self, event: str, listener: Listener) -> None:
        """Register ``listener`` for ``event``."""

        self._listeners[event].append(listener)

    def once(self, event: str, listener: Listener) -> None:
        """Register ``listener`` for the next ``event`` only."""

        def _once(*payload: Any) -> Any:
            self.off(event, _once)
            return listener(*payload)

        _once.__wrapped__ = listener  # type: ignore[attr-defined]
        self.on(event, _once)

    def off(self, event: str | None = None, listener: Listener | None = None) -> None:
        """Remove listeners.

        Without arguments every listener is dropped; with ``event`` only that
        event's listeners; with both only the matching listener (including
        listeners registered through :meth:`once`).
        """

        if event is None:
            self._listeners.clear()
            return
        if listener is None:
            self._listeners.pop(event, None)
            return
        registered = self._listeners.get(event)
        if not registered:
            return
        for index, candidate in enumerate(registered):
            if candidate is listener or getattr(candidate, "__wrapped__", None) is listener:
                del registered[index]
                break
        if not registered:
            del self._listeners[event]

    def publish(self, event: str, *payload: Any) -> None:
        """Call every listener of ``event`` with ``payload``."""

        for listener in list(self._listeners.get(event, ())):
            listener(*payload)

    def listeners(self, event: str) -> list[Listener]:
        """Return a copy of the listeners registered for ``event``."""

        return list(self._listeners.get(event, ()))

    def has_listeners(self, event: str) -> bool:
        """Return ``True`` when at least one listener is registered for ``event``."""

        return bool(self._listeners.get(event))


__all__ = ["EventBus"]
