"""Emission record accumulated while a logger chain is being read.

Purpose
-------
Capture everything one chain segment contributes to an event: the modes and
styles referenced so far, the emitter that completes the segment, and the
message arguments supplied when the chain is finally called.

Contents
--------
* :class:`EmissionRecord` – mutable accumulator handed to event listeners.

System Role
-----------
Created and owned by :class:`lib_log_events.domain.stack.Stack`; drained by
the dispatch use case and published as the payload of ``"*"`` and named
events. Listeners treat it as read-only.

Example
-------
For ``logger.not_.verbose.red.subhead("foo", "bar")`` the published record
reads::

    modes  = [not_, verbose]
    styles = ["red"]
    name   = "subhead"
    args   = ("foo", "bar")
"""

from __future__ import annotations

from typing import Any

from .descriptors import EmitterDescriptor, ModeDescriptor


class EmissionRecord:
    """One in-progress (``name is None``) or complete chain segment.

    Parameters
    ----------
    parent:
        Optional record whose modes and styles are inherited. Both lists are
        copied so later mutations never leak back into the parent.

    Examples
    --------
    >>> verbose = ModeDescriptor("verbose")
    >>> record = EmissionRecord().add_mode(verbose).add_style("red")
    >>> child = EmissionRecord(record).add_style("bold")
    >>> record.styles, child.styles
    (['red'], ['red', 'bold'])
    >>> child.mode_names()
    ['verbose']
    """

    __slots__ = ("modes", "styles", "name", "emitter", "args")

    def __init__(self, parent: "EmissionRecord | None" = None) -> None:
        self.modes: list[ModeDescriptor] = list(parent.modes) if parent is not None else []
        self.styles: list[str] = list(parent.styles) if parent is not None else []
        self.name: str | None = None
        self.emitter: EmitterDescriptor | None = None
        self.args: tuple[Any, ...] = ()

    @property
    def is_complete(self) -> bool:
        """Return ``True`` once an emitter has been attached."""

        return self.name is not None

    def add_mode(self, mode: ModeDescriptor) -> "EmissionRecord":
        """Append ``mode`` unless the same descriptor is already present."""

        if not any(existing is mode for existing in self.modes):
            self.modes.append(mode)
        return self

    def add_style(self, style: str) -> "EmissionRecord":
        """Append the style name unless it is already queued."""

        if style not in self.styles:
            self.styles.append(style)
        return self

    def remove_style(self, style: str) -> "EmissionRecord":
        """Drop ``style`` from the queue; unknown names are ignored."""

        if style in self.styles:
            self.styles.remove(style)
        return self

    def attach_emitter(self, emitter: EmitterDescriptor) -> "EmissionRecord":
        """Mark the record complete by naming the emitter that publishes it.

        Styles and emitters stay disjoint: the emitter is not queued as a style.
        """

        self.name = emitter.name
        self.emitter = emitter
        return self

    def mode_names(self) -> list[str]:
        """Return the names of the active modes in insertion order."""

        return [mode.name for mode in self.modes]

    def to_dict(self) -> dict[str, Any]:
        """Return a plain snapshot suitable for JSON output or assertions."""

        return {
            "name": self.name,
            "modes": self.mode_names(),
            "styles": list(self.styles),
            "priority": self.emitter.priority if self.emitter is not None else None,
            "args": list(self.args),
        }

    def __repr__(self) -> str:
        return (
            f"EmissionRecord(name={self.name!r}, modes={self.mode_names()!r}, "
            f"styles={self.styles!r}, args={self.args!r})"
        )


__all__ = ["EmissionRecord"]
