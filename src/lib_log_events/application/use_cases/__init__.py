"""Application use cases orchestrating domain objects and ports."""

from __future__ import annotations

from .dispatch import WILDCARD, DispatchCallable, create_dispatch

__all__ = ["DispatchCallable", "WILDCARD", "create_dispatch"]
