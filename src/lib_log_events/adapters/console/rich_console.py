"""Rich-powered console listener for emitted records.

Purpose
-------
Show emitted records on a terminal: gate them by mode options, run mode,
style, and emitter transforms, and print ``[name]: message`` lines through
Rich.

Contents
--------
* :class:`RichConsoleRenderer` – callable ``"*"`` listener.

System Role
-----------
Optional outer adapter used by the CLI ``demo`` and ``emit`` commands and by
host applications that want terminal output without writing a listener. The
core logger never imports it.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping, MutableMapping

from rich.console import Console
from rich.markup import escape

from lib_log_events.domain import EmissionRecord, apply_transforms, is_enabled


class RichConsoleRenderer:
    """Render records published on ``"*"`` to a Rich console.

    Parameters
    ----------
    options:
        Mode flags consulted by :func:`is_enabled`. The mapping is kept by
        reference so flags toggled later take effect.
    styles:
        Style transforms keyed by style name. String arguments are escaped
        before any transform runs, so transforms may add Rich markup freely.
    console:
        Target console; defaults to a new :class:`rich.console.Console`.

    Examples
    --------
    >>> from io import StringIO
    >>> from lib_log_events.domain import EmitterDescriptor
    >>> console = Console(file=StringIO(), width=80, color_system=None)
    >>> renderer = RichConsoleRenderer({}, console=console)
    >>> record = EmissionRecord().attach_emitter(EmitterDescriptor("info"))
    >>> record.args = ("ready", 3)
    >>> renderer("info", record)
    True
    >>> console.file.getvalue()
    '[info]: ready 3\\n'
    """

    def __init__(
        self,
        options: MutableMapping[str, Any] | None = None,
        styles: Mapping[str, Callable[[Any], Any]] | None = None,
        *,
        console: Console | None = None,
    ) -> None:
        self.options: MutableMapping[str, Any] = options if options is not None else {}
        self._styles = styles
        self._console = console if console is not None else Console()

    @property
    def console(self) -> Console:
        return self._console

    def __call__(self, name: str, record: EmissionRecord) -> bool:
        """Print ``record`` when its modes are enabled; return whether it printed."""

        if not is_enabled(record, self.options):
            return False
        raw = [escape(value) if isinstance(value, str) else value for value in record.args]
        values = apply_transforms(record, self._styles, raw)
        self._console.print(self.format_line(name, values), highlight=False)
        return True

    @staticmethod
    def format_line(name: str, values: list[Any]) -> str:
        """Return the console line for ``values`` emitted through ``name``.

        >>> RichConsoleRenderer.format_line("warn", ["disk", 93])
        '\\\\[warn]: disk 93'
        """

        return f"{escape(f'[{name}]')}: " + " ".join(str(value) for value in values)


__all__ = ["RichConsoleRenderer"]
