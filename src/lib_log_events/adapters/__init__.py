"""Adapters implementing application ports and optional outer surfaces."""

from __future__ import annotations

from .console import RichConsoleRenderer
from .event_bus import EventBus

__all__ = ["EventBus", "RichConsoleRenderer"]
