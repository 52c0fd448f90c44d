"""Chain accumulator turning attribute chains into discrete emission records.

Purpose
-------
Resolve fluent chains such as ``logger.verbose.red.error.warn("foo")`` into an
ordered list of :class:`EmissionRecord` objects, one per emitter referenced.

Contents
--------
* :class:`Stack` – owns the records of the chain currently being read.

System Role
-----------
Each :class:`lib_log_events.Logger` owns exactly one stack. Every chain access
reports to it; the dispatch use case drains it with :meth:`Stack.process`.

Each record is either open (``name is None``) or named. A named record is never
mutated again: the next mode, style, or emitter starts a new record. Emitter
access through :meth:`Stack.chain_emitter` seeds the new record from the named
one, so ``error.warn`` publishes ``warn`` with the modes and styles that were
active for ``error``; the other operations start clean.
"""

from __future__ import annotations

import logging
from typing import Callable

from .descriptors import EmitterDescriptor, ModeDescriptor
from .record import EmissionRecord

logger = logging.getLogger(__name__)


class Stack:
    """Ordered records produced while reading one logger chain.

    Invariants: ``items`` is never empty and ``current is items[-1]``.

    Examples
    --------
    >>> stack = Stack()
    >>> _ = stack.add_mode(ModeDescriptor("verbose")).add_style("red")
    >>> _ = stack.chain_emitter(EmitterDescriptor("error"))
    >>> _ = stack.chain_emitter(EmitterDescriptor("warn"))
    >>> [(r.name, r.mode_names(), r.styles) for r in stack.items]
    [('error', ['verbose'], ['red']), ('warn', ['verbose'], ['red'])]
    """

    def __init__(self) -> None:
        self.items: list[EmissionRecord] = []
        self.current: EmissionRecord = self._push()

    def _push(self, parent: EmissionRecord | None = None) -> EmissionRecord:
        record = EmissionRecord(parent)
        self.items.append(record)
        self.current = record
        return record

    def create_record(self, parent: EmissionRecord | None = None) -> "Stack":
        """Start a new current record, optionally inheriting from ``parent``."""

        self._push(parent)
        return self

    def _fork_if_named(self, *, inherit: bool = False) -> None:
        if not self.current.is_complete:
            return
        logger.debug(
            "record %r is complete; starting a new %s record",
            self.current.name,
            "inherited" if inherit else "fresh",
        )
        self._push(self.current if inherit else None)

    def add_mode(self, mode: ModeDescriptor) -> "Stack":
        """Add ``mode`` to the current record, starting a fresh one if it is named."""

        self._fork_if_named()
        self.current.add_mode(mode)
        return self

    def add_style(self, style: str) -> "Stack":
        """Queue ``style`` on the current record, starting a fresh one if it is named."""

        self._fork_if_named()
        self.current.add_style(style)
        return self

    def remove_style(self, style: str) -> "Stack":
        """Drop ``style`` from the current record without forking."""

        self.current.remove_style(style)
        return self

    def add_emitter(self, emitter: EmitterDescriptor) -> "Stack":
        """Attach ``emitter`` as a standalone segment.

        A named current record is left behind and a clean record receives the
        emitter, so nothing from the previous segment carries over.
        """

        self._fork_if_named()
        self.current.attach_emitter(emitter)
        return self

    def chain_emitter(self, emitter: EmitterDescriptor) -> "Stack":
        """Attach ``emitter`` continuing the previous segment.

        Same as :meth:`add_emitter`, except the new record inherits the modes
        and styles of the named record it follows.
        """

        self._fork_if_named(inherit=True)
        self.current.attach_emitter(emitter)
        return self

    def set_name(self, emitter: EmitterDescriptor) -> "Stack":
        """Name the current record after ``emitter`` without ever forking.

        Used when a mode is called directly (``logger.verbose("msg")``): the
        open segment holding the mode is completed by the default emitter.
        """

        if self.current.emitter is emitter:
            self.current.name = emitter.name
        else:
            self.current.attach_emitter(emitter)
        return self

    def process(self, fn: Callable[[EmissionRecord], object]) -> int:
        """Drain every record through ``fn`` in order and reset the stack.

        The records are swapped out before iterating, so chains started by
        ``fn`` accumulate in the fresh state instead of the drained list.
        Returns the number of records drained.
        """

        items = self.items
        self.items = []
        self._push()
        logger.debug("draining %d record(s)", len(items))
        for record in items:
            fn(record)
        return len(items)

    def __len__(self) -> int:
        return len(self.items)


__all__ = ["Stack"]
