"""Tests for registry mutations made while an emission is running."""

from __future__ import annotations

import pytest

from emitter.domain.registry import Emitter


@pytest.fixture()
def events() -> Emitter:
    return Emitter()


def test_listener_added_during_emit_waits_for_next_emit(events: Emitter):
    log: list = []

    def late():
        log.append("late")

    def adder():
        log.append("adder")
        events.on("e", late)

    events.on("e", adder)

    events.emit("e")
    assert log == ["adder"]

    events.emit("e")
    assert log == ["adder", "adder", "late"]


def test_listener_removed_during_emit_still_runs_that_emit(events: Emitter):
    log: list = []

    def second():
        log.append("second")

    def remover():
        log.append("remover")
        events.off("e", second)

    events.on("e", remover).on("e", second)

    events.emit("e")
    assert log == ["remover", "second"]

    events.emit("e")
    assert log == ["remover", "second", "remover"]


def test_self_removal_does_not_skip_next_listener(events: Emitter):
    log: list = []

    def self_removing():
        log.append("first")
        events.off("e", self_removing)

    events.on("e", self_removing).on("e", lambda: log.append("second"))

    events.emit("e")

    assert log == ["first", "second"]


def test_nested_emit_runs_once_listener_a_single_time(events: Emitter):
    """A one-shot listener held by an outer snapshot must not fire again."""
    calls: list = []
    depth = {"value": 0}

    def trigger():
        if depth["value"] == 0:
            depth["value"] += 1
            events.emit("e")

    events.on("e", trigger)
    events.once("e", lambda: calls.append("once"))

    events.emit("e")

    assert calls == ["once"]
    assert events.listener_count("e") == 1


def test_nested_emit_on_other_event(events: Emitter):
    log: list = []
    events.on("inner", lambda value: log.append(("inner", value)))
    events.on("outer", lambda value: events.emit("inner", value + 1))
    events.on("outer", lambda value: log.append(("outer", value)))

    assert events.emit("outer", 1) is True
    assert log == [("inner", 2), ("outer", 1)]
