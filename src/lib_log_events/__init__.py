"""Public package surface of ``lib_log_events``.

Register modes, styles, and emitters on a :class:`Logger`, subscribe to its
events, and read chains such as ``logger.verbose.red.error("disk full")``::

    >>> from lib_log_events import create
    >>> logger = create().mode("verbose").emitter("error")
    >>> seen = []
    >>> _ = logger.on("error", lambda record: seen.append(record.mode_names()))
    >>> _ = logger.verbose.error("disk full")
    >>> seen
    [['verbose']]

The package logger stays silent until the host application attaches a handler.
"""

from __future__ import annotations

import logging

from .adapters import EventBus, RichConsoleRenderer
from .application.ports import EventBusPort
from .domain import (
    EmissionRecord,
    EmitterDescriptor,
    InvalidKindError,
    LogEventsError,
    MissingNameError,
    ModeDescriptor,
    ModeKind,
    ReservedNameError,
    Stack,
    UnknownEmitterError,
    apply_transforms,
    identity,
    is_enabled,
)
from .logger import DEFAULT_EMITTER, ChainLink, Logger, ToggleLink, create, default_logger

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ChainLink",
    "DEFAULT_EMITTER",
    "EmissionRecord",
    "EmitterDescriptor",
    "EventBus",
    "EventBusPort",
    "InvalidKindError",
    "LogEventsError",
    "Logger",
    "MissingNameError",
    "ModeDescriptor",
    "ModeKind",
    "ReservedNameError",
    "RichConsoleRenderer",
    "Stack",
    "ToggleLink",
    "UnknownEmitterError",
    "apply_transforms",
    "create",
    "default_logger",
    "identity",
    "is_enabled",
]
