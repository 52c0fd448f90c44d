from __future__ import annotations

from io import StringIO

import pytest
from rich.console import Console

from lib_log_events.demo import DEMO_MODES, DEMO_STYLES, build_demo_logger, logdemo


def _run(**flags: bool) -> tuple[list[dict], list[str]]:
    console = Console(file=StringIO(), width=120, color_system=None)
    published = logdemo(console=console, **flags)
    return published, console.file.getvalue().splitlines()


def test_demo_logger_vocabulary() -> None:
    logger = build_demo_logger()

    assert logger.mode_keys == ["verbose", "not_", "debug"]
    assert logger.style_keys == list(DEMO_STYLES)
    assert logger.modes["not_"].is_toggle is True
    assert [logger.emitters[name].priority for name in ("error", "warn", "info", "success")] == [20, 30, 40, 50]
    assert set(DEMO_MODES) <= set(logger.mode_keys)


def test_demo_logger_instances_are_independent() -> None:
    first, second = build_demo_logger(), build_demo_logger()
    first.verbose
    assert len(second.stack) == 1
    assert second.stack.current.modes == []


def test_logdemo_publishes_every_chain_record() -> None:
    published, _ = _run()

    assert [entry["name"] for entry in published] == [
        "info",
        "info",
        "info",
        "subhead",
        "subhead",
        "info",
        "warn",
        "error",
        "error",
        "success",
        "log",
        "log",
    ]
    assert published[2]["modes"] == ["not_", "verbose"]
    assert published[5]["styles"] == ["yellow"]
    assert published[11]["styles"] == ["green"]


def test_logdemo_defaults_show_quiet_records_only() -> None:
    published, lines = _run()

    assert sum(entry["shown"] for entry in published) == 6
    assert lines == [
        "[info]: this is a normal info message",
        "[info]: this is a not_.verbose message",
        "[subhead]: --- IMPORTANT INFO ---",
        "[error]: shown when verbose is off",
        "[success]: \N{CHECK MARK} shown when verbose is off",
        "[log]: styles work with the default emitter too",
    ]


@pytest.mark.parametrize(
    "flags, shown",
    [
        ({"verbose": True}, 7),
        ({"debug": True}, 7),
        ({"verbose": True, "debug": True}, 8),
    ],
)
def test_logdemo_mode_flags_change_visible_records(flags: dict[str, bool], shown: int) -> None:
    published, lines = _run(**flags)

    assert len(published) == 12
    assert sum(entry["shown"] for entry in published) == shown
    assert len(lines) == shown


def test_logdemo_debug_mode_prefixes_message() -> None:
    _, lines = _run(debug=True)
    assert "[log]: [debug]: this is directly in debug" in lines
