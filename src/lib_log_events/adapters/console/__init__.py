"""Console adapters."""

from __future__ import annotations

from .rich_console import RichConsoleRenderer

__all__ = ["RichConsoleRenderer"]
