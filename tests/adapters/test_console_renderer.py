from __future__ import annotations

from io import StringIO

import pytest
from rich.console import Console

from lib_log_events import create
from lib_log_events.adapters.console.rich_console import RichConsoleRenderer


@pytest.fixture
def console() -> Console:
    return Console(file=StringIO(), width=120, color_system=None)


def _output(console: Console) -> list[str]:
    return console.file.getvalue().splitlines()


def test_renderer_prints_enabled_records(console: Console) -> None:
    options = {"verbose": False}
    logger = create().mode("verbose").mode("not_", kind="toggle").emitter("info")
    logger.on("*", RichConsoleRenderer(options, console=console))

    logger.info("always")
    logger.verbose.info("only verbose")
    logger.not_.verbose.info("only quiet")

    assert _output(console) == ["[info]: always", "[info]: only quiet"]


def test_renderer_sees_later_option_changes(console: Console) -> None:
    options = {"verbose": False}
    logger = create().mode("verbose").emitter("info")
    logger.on("*", RichConsoleRenderer(options, console=console))

    logger.verbose.info("hidden")
    options["verbose"] = True
    logger.verbose.info("shown")

    assert _output(console) == ["[info]: shown"]


def test_renderer_applies_transforms_and_keeps_brackets(console: Console) -> None:
    styles = {"shout": lambda value: f"[bold]{value}[/bold]"}
    logger = create().style("shout").emitter("warn", transform=lambda value: f"{value}!")
    logger.on("*", RichConsoleRenderer({}, styles, console=console))

    logger.shout.warn("[disk] full", 93)

    assert _output(console) == ["[warn]: [disk] full! 93!"]


def test_renderer_returns_whether_it_printed(console: Console) -> None:
    logger = create().mode("verbose")
    renderer = RichConsoleRenderer({}, console=console)
    results: list[bool] = []
    logger.on("*", lambda name, record: results.append(renderer(name, record)))

    logger.verbose("hidden")
    logger.log("shown")

    assert results == [False, True]
    assert renderer.console is console
