"""Unit tests for BarEvents."""
from __future__ import annotations

import logging

from tick_bars import FINISH, UPDATE, BarEvents


class _FakeBar:
    id = "fake"


def test_subscribe_and_emit():
    """Handler receives its context and the bar."""
    events = BarEvents()
    bar = _FakeBar()
    received = []

    events.subscribe(UPDATE, lambda ctx, b: received.append((ctx, b)), "ctx")
    events.emit(UPDATE, bar)

    assert received == [("ctx", bar)]


def test_emit_without_subscribers():
    """Emitting an event nobody listens to is a no-op."""
    events = BarEvents()
    events.emit(FINISH, _FakeBar())


def test_registration_order():
    events = BarEvents()
    order = []

    for name in ("a", "b", "c"):
        events.subscribe(UPDATE, lambda ctx, b: order.append(ctx), name)
    events.emit(UPDATE, _FakeBar())

    assert order == ["a", "b", "c"]


def test_events_are_separate():
    events = BarEvents()
    updates = []
    finishes = []

    events.subscribe(UPDATE, lambda ctx, b: updates.append(1))
    events.subscribe(FINISH, lambda ctx, b: finishes.append(1))
    events.emit(FINISH, _FakeBar())

    assert updates == []
    assert finishes == [1]
    assert events.count(UPDATE) == 1
    assert events.count(FINISH) == 1


def test_unsubscribe():
    events = BarEvents()
    calls = []

    keep = events.subscribe(UPDATE, lambda ctx, b: calls.append("keep"))
    drop = events.subscribe(UPDATE, lambda ctx, b: calls.append("drop"))

    assert events.unsubscribe(drop) is True
    assert events.unsubscribe(drop) is False
    events.emit(UPDATE, _FakeBar())

    assert keep != drop
    assert calls == ["keep"]


def test_unsubscribe_unknown_id():
    events = BarEvents()
    assert events.unsubscribe(99) is False


def test_subscribe_during_emit_waits_for_next_emit():
    events = BarEvents()
    calls = []

    def late(ctx, b) -> None:
        calls.append("late")

    def first(ctx, b) -> None:
        calls.append("first")
        events.subscribe(UPDATE, late)

    events.subscribe(UPDATE, first)
    events.emit(UPDATE, _FakeBar())
    assert calls == ["first"]

    events.emit(UPDATE, _FakeBar())
    assert calls == ["first", "first", "late"]


def test_failing_handler_is_logged_and_isolated(caplog):
    events = BarEvents()
    calls = []

    def explode(ctx, b) -> None:
        raise RuntimeError("boom")

    events.subscribe(FINISH, explode)
    events.subscribe(FINISH, lambda ctx, b: calls.append("after"))

    with caplog.at_level(logging.ERROR, logger="tick_bars.events"):
        events.emit(FINISH, _FakeBar())

    assert calls == ["after"]
    assert len(caplog.records) == 1
    record = caplog.records[0]
    assert "finish callback" in record.getMessage()
    assert "'fake'" in record.getMessage()
    assert record.exc_info[0] is RuntimeError


def test_clear():
    events = BarEvents()
    events.subscribe(UPDATE, lambda ctx, b: None)
    events.clear()
    assert events.count(UPDATE) == 0
