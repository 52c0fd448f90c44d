from __future__ import annotations

from typing import Any

import pytest

from lib_log_events import EmissionRecord, Logger, create


class EventRecorder:
    """Collect ``"*"`` and named events in publication order."""

    def __init__(self) -> None:
        self.events: list[tuple[str, Any]] = []

    def wildcard(self, name: str, record: EmissionRecord) -> None:
        self.events.append(("*", name))

    def named(self, record: EmissionRecord) -> None:
        self.events.append((record.name or "", record))

    @property
    def records(self) -> list[EmissionRecord]:
        return [payload for event, payload in self.events if event != "*"]


@pytest.fixture
def logger() -> Logger:
    """Logger with the vocabulary used across the chain tests."""

    instance = create()
    instance.mode("verbose").mode("not_", kind="toggle")
    instance.style("red", lambda msg: f"<red>{msg}</red>")
    instance.emitter("error", 0).emitter("warn", 1).emitter("write")
    return instance


@pytest.fixture
def recorder(logger: Logger) -> EventRecorder:
    recorder = EventRecorder()
    logger.on("*", recorder.wildcard)
    for name in logger.emitter_keys:
        logger.on(name, recorder.named)
    return recorder
