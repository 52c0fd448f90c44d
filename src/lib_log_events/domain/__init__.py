"""Domain entities and state machine behind logger chains."""

from __future__ import annotations

from .descriptors import EmitterDescriptor, ModeDescriptor, ModeKind, identity
from .errors import (
    InvalidKindError,
    LogEventsError,
    MissingNameError,
    ReservedNameError,
    UnknownEmitterError,
)
from .gating import apply_transforms, is_enabled
from .record import EmissionRecord
from .stack import Stack

__all__ = [
    "EmissionRecord",
    "EmitterDescriptor",
    "InvalidKindError",
    "LogEventsError",
    "MissingNameError",
    "ModeDescriptor",
    "ModeKind",
    "ReservedNameError",
    "Stack",
    "UnknownEmitterError",
    "apply_transforms",
    "identity",
    "is_enabled",
]
