"""Listener-side helpers deciding whether and how a record is shown.

Purpose
-------
Give event listeners a shared reading of modes: a record tagged ``verbose`` is
shown only when the ``verbose`` option is on, ``not_.verbose`` only when it is
off. Transforms registered on modes, styles, and emitters are applied in that
order.

Contents
--------
* :func:`is_enabled` – evaluate a record's modes against boolean options.
* :func:`apply_transforms` – run every transform of a record over its args.

System Role
-----------
Pure functions over :class:`EmissionRecord`. The core never calls them; the
Rich console renderer and application listeners do.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping, Sequence

from .record import EmissionRecord


def is_enabled(record: EmissionRecord, options: Mapping[str, Any]) -> bool:
    """Return ``True`` when the record's modes are satisfied by ``options``.

    Records without modes are always enabled. Each regular mode requires its
    option to be exactly ``True``; a preceding toggle mode requires it to be
    anything else. A trailing toggle has nothing to negate and is ignored.

    Examples
    --------
    >>> from lib_log_events.domain.descriptors import ModeDescriptor
    >>> not_, verbose = ModeDescriptor("not_", "toggle"), ModeDescriptor("verbose")
    >>> record = EmissionRecord().add_mode(not_).add_mode(verbose)
    >>> is_enabled(record, {"verbose": False}), is_enabled(record, {"verbose": True})
    (True, False)
    >>> is_enabled(EmissionRecord(), {})
    True
    """

    negate = False
    for mode in record.modes:
        if mode.is_toggle:
            negate = not negate
            continue
        active = options.get(mode.name) is True
        if active == negate:
            return False
        negate = False
    return True


def apply_transforms(
    record: EmissionRecord,
    styles: Mapping[str, Callable[[Any], Any]] | None = None,
    args: Sequence[Any] | None = None,
) -> list[Any]:
    """Return the record's arguments passed through every applicable transform.

    Mode transforms run first, then the queued styles looked up in ``styles``
    (unknown names are skipped), then the emitter's transform. ``args``
    replaces ``record.args`` as the input when given.

    Examples
    --------
    >>> from lib_log_events.domain.descriptors import EmitterDescriptor, ModeDescriptor
    >>> debug = ModeDescriptor("debug", transform=lambda msg: f"[debug] {msg}")
    >>> record = EmissionRecord().add_mode(debug).add_style("upper")
    >>> _ = record.attach_emitter(EmitterDescriptor("log"))
    >>> record.args = ("hello",)
    >>> apply_transforms(record, {"upper": str.upper})
    ['[DEBUG] HELLO']
    """

    chain: list[Callable[[Any], Any]] = [mode.transform for mode in record.modes]
    lookup = styles or {}
    chain.extend(lookup[name] for name in record.styles if name in lookup)
    if record.emitter is not None:
        chain.append(record.emitter.transform)

    values = list(record.args if args is None else args)
    for fn in chain:
        values = [fn(value) for value in values]
    return values


__all__ = ["apply_transforms", "is_enabled"]
