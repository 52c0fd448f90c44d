"""Ports the application layer depends on."""

from __future__ import annotations

from .event_bus import EventBusPort, Listener

__all__ = ["EventBusPort", "Listener"]
