"""Ready-made logger and sample chains used by the CLI.

Purpose
-------
Show how modes, toggles, styles, and chained emitters combine, without asking
users to write setup code first.

Contents
--------
* :data:`DEMO_STYLES` – Rich markup style transforms.
* :func:`build_demo_logger` – logger with the demo vocabulary registered.
* :func:`logdemo` – run the sample chains through a Rich renderer.
"""

from __future__ import annotations

from typing import Any, Callable, MutableMapping

from rich.console import Console
from rich.markup import escape

from .adapters import RichConsoleRenderer
from .domain import EmissionRecord
from .logger import Logger, create


def _markup(tag: str) -> Callable[[Any], str]:
    def _style(value: Any) -> str:
        return f"[{tag}]{value}[/{tag}]"

    return _style


DEMO_STYLES: dict[str, Callable[[Any], str]] = {
    "red": _markup("red"),
    "yellow": _markup("yellow"),
    "green": _markup("green"),
    "cyan": _markup("cyan"),
    "bold": _markup("bold"),
}
"""Style transforms registered on the demo logger."""

DEMO_MODES: tuple[str, ...] = ("verbose", "debug")
"""Option-backed modes of the demo logger (``not_`` is a toggle on top)."""


def build_demo_logger() -> Logger:
    """Return a logger with the demo modes, styles, and emitters registered.

    Examples
    --------
    >>> logger = build_demo_logger()
    >>> logger.emitter_keys
    ['log', 'info', 'warn', 'error', 'success', 'subhead']
    >>> callable(logger.not_)
    False
    """

    logger = create()
    for name, fn in DEMO_STYLES.items():
        logger.style(name, fn)
    logger.mode("verbose")
    logger.mode("not_", kind="toggle")
    logger.mode("debug", lambda msg: f"{escape('[debug]')}: {msg}")
    logger.emitter("info", 40, DEMO_STYLES["cyan"])
    logger.emitter("warn", 30, DEMO_STYLES["yellow"])
    logger.emitter("error", 20, DEMO_STYLES["red"])
    logger.emitter("success", 50, lambda msg: f"[green]\N{CHECK MARK}[/green] {msg}")
    logger.emitter("subhead", 60, DEMO_STYLES["bold"])
    return logger


def logdemo(
    *,
    verbose: bool = False,
    debug: bool = False,
    console: Console | None = None,
) -> list[dict[str, Any]]:
    """Emit the sample chains and return one entry per published record.

    Each entry is :meth:`EmissionRecord.to_dict` plus ``"shown"`` telling
    whether the renderer printed it under the given mode options.
    """

    options: MutableMapping[str, Any] = {"verbose": verbose, "debug": debug}
    logger = build_demo_logger()
    renderer = RichConsoleRenderer(options, DEMO_STYLES, console=console)
    published: list[dict[str, Any]] = []

    def _collect(name: str, record: EmissionRecord) -> None:
        entry = record.to_dict()
        entry["shown"] = renderer(name, record)
        published.append(entry)

    logger.on("*", _collect)

    logger.info("this is a normal info message")
    logger.verbose.info("this is a verbose message")
    logger.not_.verbose.info("this is a not_.verbose message")
    logger.verbose.red.subhead("--- VERBOSE INFO ---").not_.verbose.subhead("--- IMPORTANT INFO ---")
    logger.verbose.yellow.info.warn.error("chained emitters share modes and styles")
    logger.not_.verbose.error.success("shown when verbose is off")
    logger.debug("this is directly in debug")
    logger.green.log("styles work with the default emitter too")
    return published


__all__ = ["DEMO_MODES", "DEMO_STYLES", "build_demo_logger", "logdemo"]
