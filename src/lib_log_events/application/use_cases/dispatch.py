"""Use case draining a logger's chain stack into published events.

Purpose
-------
Turn the records accumulated by a chain into events once the chain is called
with message arguments.

Contents
--------
* :data:`DispatchCallable` – signature of the returned dispatcher.
* :func:`create_dispatch` – factory binding a stack, emitter registry, and bus.

System Role
-----------
Application-layer orchestrator used by :class:`lib_log_events.Logger.emit`.
For every drained record it publishes ``"*"`` with ``(name, record)`` and then
the record's own name with ``(record)``. When no record of the chain was
completed by the requested emitter yet, that emitter completes the current
record first, so ``emit("write", "foo")`` works without reading ``write``.
Listener errors propagate unchanged.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Callable

from lib_log_events.application.ports import EventBusPort
from lib_log_events.domain import EmissionRecord, EmitterDescriptor, Stack, UnknownEmitterError

logger = logging.getLogger(__name__)

WILDCARD = "*"

DispatchCallable = Callable[..., int]


def create_dispatch(
    *,
    stack: Stack,
    emitters: Mapping[str, EmitterDescriptor],
    bus: EventBusPort,
) -> DispatchCallable:
    """Build the dispatcher for one logger.

    Parameters
    ----------
    stack:
        The logger's :class:`Stack`; drained on every dispatch.
    emitters:
        Live registry of emitter descriptors keyed by name. Read on each call,
        so emitters registered later are honoured.
    bus:
        Event bus receiving the published events.

    Returns
    -------
    Callable[..., int]
        ``dispatch(name, *args)`` returning the number of events published.

    Examples
    --------
    >>> from lib_log_events.adapters.event_bus import EventBus
    >>> bus, stack = EventBus(), Stack()
    >>> write = EmitterDescriptor("write")
    >>> seen = []
    >>> bus.on("*", lambda name, record: seen.append((name, record.args)))
    >>> dispatch = create_dispatch(stack=stack, emitters={"write": write}, bus=bus)
    >>> _ = stack.chain_emitter(write)
    >>> dispatch("write", "foo")
    1
    >>> seen
    [('write', ('foo',))]
    """

    def dispatch(name: str, *args: Any) -> int:
        if name not in emitters:
            raise UnknownEmitterError(name)
        if not any(record.name == name for record in stack.items):
            # emitted by name without reading the emitter first
            stack.add_emitter(emitters[name])

        published = 0

        def _publish(record: EmissionRecord) -> None:
            nonlocal published
            record.args = args
            if not record.is_complete:
                logger.debug("skipping open record with modes %s", record.mode_names())
                return
            bus.publish(WILDCARD, record.name, record)
            bus.publish(record.name, record)
            published += 1

        stack.process(_publish)
        logger.debug("dispatch %r published %d event(s)", name, published)
        return published

    return dispatch


__all__ = ["DispatchCallable", "WILDCARD", "create_dispatch"]
