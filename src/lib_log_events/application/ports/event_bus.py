"""Port describing the publish/subscribe collaborator.

Purpose
-------
Decouple the dispatcher from the concrete event mechanism so hosts can plug in
their own bus (or a recording fake in tests).

Contents
--------
* :data:`Listener` – callable receiving an event payload.
* :class:`EventBusPort` – runtime-checkable protocol for subscribe/publish.
"""

from __future__ import annotations

from typing import Any, Callable, Protocol, runtime_checkable

Listener = Callable[..., Any]


@runtime_checkable
class EventBusPort(Protocol):
    """Synchronous publish/subscribe channel keyed by event name."""

    def on(self, event: str, listener: Listener) -> None:
        """Register ``listener`` for ``event``; ``"*"`` is an ordinary name."""

    def once(self, event: str, listener: Listener) -> None:
        """Register ``listener`` for the next ``event`` only."""

    def off(self, event: str | None = None, listener: Listener | None = None) -> None:
        """Remove one listener, every listener of ``event``, or everything."""

    def publish(self, event: str, *payload: Any) -> None:
        """Call every listener of ``event`` with ``payload`` in registration order."""

    def listeners(self, event: str) -> list[Listener]:
        """Return a copy of the listeners registered for ``event``."""

    def has_listeners(self, event: str) -> bool:
        """Return ``True`` when ``event`` has at least one listener."""


__all__ = ["EventBusPort", "Listener"]
