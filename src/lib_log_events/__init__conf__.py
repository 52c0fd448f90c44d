"""Static distribution metadata surfaced by the CLI ``info`` command.

Keep these values in sync with ``pyproject.toml``.
"""

from __future__ import annotations

import sys
from typing import Callable

name = "lib_log_events"
title = "Chainable mode- and style-aware event logger"
version = "0.1.0"
homepage = "https://github.com/bitranox/lib_log_events"
author = "bitranox"
author_email = "bitranox@gmail.com"
shell_command = "lib_log_events"


def print_info(writer: Callable[[str], object] | None = None) -> None:
    """Write the metadata banner through ``writer`` (default: ``sys.stdout.write``).

    The banner is passed as a single string ending with a newline.

    >>> chunks = []
    >>> print_info(writer=chunks.append)
    >>> chunks[0].splitlines()[0]
    'Info for lib_log_events:'
    """

    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    (writer or sys.stdout.write)("\n".join(lines) + "\n")
