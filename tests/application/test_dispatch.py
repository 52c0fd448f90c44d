from __future__ import annotations

import pytest

from lib_log_events.adapters.event_bus import EventBus
from lib_log_events.application.ports import EventBusPort
from lib_log_events.application.use_cases.dispatch import WILDCARD, create_dispatch
from lib_log_events.domain import EmissionRecord, EmitterDescriptor, ModeDescriptor, Stack, UnknownEmitterError


class _RecordingBus(EventBusPort):
    def __init__(self) -> None:
        self.published: list[tuple[str, tuple]] = []

    def on(self, event, listener) -> None:  # pragma: no cover - unused
        raise NotImplementedError

    def once(self, event, listener) -> None:  # pragma: no cover - unused
        raise NotImplementedError

    def off(self, event=None, listener=None) -> None:  # pragma: no cover - unused
        raise NotImplementedError

    def publish(self, event: str, *payload) -> None:
        self.published.append((event, payload))

    def listeners(self, event):  # pragma: no cover - unused
        return []

    def has_listeners(self, event) -> bool:  # pragma: no cover - unused
        return False


@pytest.fixture
def emitters() -> dict[str, EmitterDescriptor]:
    return {name: EmitterDescriptor(name) for name in ("error", "warn", "write")}


def test_dispatch_rejects_unknown_emitter_and_keeps_chain_state(emitters) -> None:
    stack = Stack()
    stack.chain_emitter(emitters["write"])
    dispatch = create_dispatch(stack=stack, emitters=emitters, bus=_RecordingBus())

    with pytest.raises(UnknownEmitterError, match='Unable to find emitter "ghost"'):
        dispatch("ghost", "x")

    assert [record.name for record in stack.items] == ["write"]


def test_dispatch_publishes_wildcard_before_named_event(emitters) -> None:
    stack = Stack()
    bus = _RecordingBus()
    dispatch = create_dispatch(stack=stack, emitters=emitters, bus=bus)
    verbose = ModeDescriptor("verbose")
    stack.add_mode(verbose).add_style("red").chain_emitter(emitters["error"]).chain_emitter(emitters["warn"])
    error_record, warn_record = stack.items

    assert dispatch("warn", "foo") == 2

    assert bus.published == [
        (WILDCARD, ("error", error_record)),
        ("error", (error_record,)),
        (WILDCARD, ("warn", warn_record)),
        ("warn", (warn_record,)),
    ]
    assert error_record.args == ("foo",)
    assert warn_record.args == ("foo",)
    assert len(stack.items) == 1


def test_dispatch_skips_open_records(emitters) -> None:
    stack = Stack()
    bus = _RecordingBus()
    dispatch = create_dispatch(stack=stack, emitters=emitters, bus=bus)
    stack.chain_emitter(emitters["write"]).add_style("red")

    assert dispatch("write", "foo") == 1
    assert [event for event, _ in bus.published] == [WILDCARD, "write"]


def test_dispatch_reads_registry_lazily() -> None:
    registry: dict[str, EmitterDescriptor] = {}
    stack = Stack()
    dispatch = create_dispatch(stack=stack, emitters=registry, bus=EventBus())
    registry["late"] = EmitterDescriptor("late")
    stack.chain_emitter(registry["late"])
    assert dispatch("late") == 1


def test_listener_chain_accumulates_into_fresh_state(emitters) -> None:
    bus = EventBus()
    stack = Stack()
    dispatch = create_dispatch(stack=stack, emitters=emitters, bus=bus)
    seen: list[EmissionRecord] = []

    def _listener(record: EmissionRecord) -> None:
        seen.append(record)
        stack.chain_emitter(emitters["warn"])

    bus.on("write", _listener)
    stack.chain_emitter(emitters["write"])
    dispatch("write", "first")

    assert [record.name for record in seen] == ["write"]
    assert [record.name for record in stack.items] == ["warn"]
    assert stack.items[0].args == ()


def test_listener_errors_propagate(emitters) -> None:
    bus = EventBus()
    stack = Stack()
    dispatch = create_dispatch(stack=stack, emitters=emitters, bus=bus)

    def _boom(record: EmissionRecord) -> None:
        raise RuntimeError("listener failed")

    bus.on("write", _boom)
    stack.chain_emitter(emitters["write"])
    with pytest.raises(RuntimeError, match="listener failed"):
        dispatch("write", "x")


def test_dispatch_completes_open_record_with_requested_emitter(emitters) -> None:
    stack = Stack()
    bus = _RecordingBus()
    dispatch = create_dispatch(stack=stack, emitters=emitters, bus=bus)
    verbose = ModeDescriptor("verbose")
    stack.add_mode(verbose)
    record = stack.current

    assert dispatch("write", "foo") == 1

    assert bus.published == [(WILDCARD, ("write", record)), ("write", (record,))]
    assert record.emitter is emitters["write"]
    assert record.modes == [verbose]


def test_dispatch_does_not_rename_records_already_completed(emitters) -> None:
    stack = Stack()
    bus = _RecordingBus()
    dispatch = create_dispatch(stack=stack, emitters=emitters, bus=bus)
    stack.chain_emitter(emitters["error"])

    assert dispatch("warn", "x") == 2
    assert [event for event, _ in bus.published] == [WILDCARD, "error", WILDCARD, "warn"]
