# tests/unit/export/test_snapshot.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import dataclasses
import json

import pytest

from embedfsm.core.actions import Action, CallSite, call, to_state
from embedfsm.core.guards import Guard, after_n_occurrences, check, from_states, on_event
from embedfsm.core.transitions import Transition
from embedfsm.export.snapshot import MachineSnapshot, TransitionInfo, describe_transition, take_snapshot


def notify_operator():
    pass


@pytest.fixture
def declared_machine(machine_factory):
    machine = machine_factory("idle", name="pump")
    machine.add_transition(on_event("start"), from_states("idle", "paused"), to_state("running"))
    machine.add_transition(
        on_event("fault"),
        after_n_occurrences(3),
        from_states("running"),
        to_state("halted"),
        call(notify_operator),
    )
    machine.add_transition(on_event("tick"), check(lambda: True), Action(lambda m: None))
    return machine


def test_snapshot_contents(declared_machine):
    snap = declared_machine.snapshot()

    assert isinstance(snap, MachineSnapshot)
    assert snap.name == "pump"
    assert snap.initial_state == "idle"
    assert len(snap.transitions) == 3

    first, second, third = snap.transitions
    assert first == TransitionInfo(
        index=0,
        sources=("idle", "paused"),
        event="start",
        destination="running",
        threshold=1,
        calls=(),
    )

    assert second.index == 1
    assert second.sources == ("running",)
    assert second.threshold == 3
    assert second.destination == "halted"
    assert len(second.calls) == 1
    assert isinstance(second.calls[0], CallSite)
    assert second.calls[0].name == "notify_operator"

    # custom guards and actions are not represented
    assert third.sources == ()
    assert third.event == "tick"
    assert third.destination is None
    assert third.calls == ()


def test_snapshot_matches_take_snapshot(declared_machine):
    assert declared_machine.snapshot() == take_snapshot(declared_machine)


def test_snapshot_does_not_touch_machine(declared_machine):
    declared_machine.dispatch("start")
    declared_machine.snapshot()

    assert declared_machine.current_state == "running"
    assert declared_machine.last_matched_index == 0
    assert declared_machine.snapshot().initial_state == "idle"


def test_snapshot_is_frozen(declared_machine):
    snap = declared_machine.snapshot()
    with pytest.raises(dataclasses.FrozenInstanceError):
        snap.name = "other"
    with pytest.raises(dataclasses.FrozenInstanceError):
        snap.transitions[0].destination = "elsewhere"


def test_later_descriptors_override_event_and_destination():
    t = Transition.from_descriptors(on_event("a"), on_event("b"), to_state("x"), to_state("y"), from_states("s1"), from_states("s2"))
    info = describe_transition(4, t)

    assert info.index == 4
    assert info.event == "b"
    assert info.destination == "y"
    assert info.sources == ("s1", "s2")


def test_empty_transition_description():
    info = describe_transition(0, Transition(guards=[Guard(lambda e, a, m: True)]))
    assert info == TransitionInfo(index=0, sources=(), event=None, destination=None, threshold=1, calls=())


def test_to_dict_is_json_ready(declared_machine):
    data = declared_machine.snapshot().to_dict()

    assert data["name"] == "pump"
    assert data["initial_state"] == "idle"
    assert data["transitions"][0] == {
        "index": 0,
        "sources": ["idle", "paused"],
        "event": "start",
        "destination": "running",
        "threshold": 1,
        "calls": [],
    }
    call_label = data["transitions"][1]["calls"][0]
    assert call_label.startswith("notify_operator (")
    assert call_label.endswith(")")
    json.dumps(data)
