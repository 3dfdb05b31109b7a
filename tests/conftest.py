# tests/conftest.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from enum import Enum
from unittest.mock import MagicMock

import pytest


class Door(Enum):
    CLOSED = "closed"
    OPEN = "open"
    LOCKED = "locked"


class DoorEvent(Enum):
    PUSH = "push"
    PULL = "pull"
    LOCK = "lock"
    UNLOCK = "unlock"


@pytest.fixture
def door_states():
    """The Door enum, for tests that want enum-typed states."""
    return Door


@pytest.fixture
def door_events():
    """The DoorEvent enum, for tests that want enum-typed events."""
    return DoorEvent


@pytest.fixture
def machine_factory():
    """Returns a factory function to create an empty state machine for tests."""
    from embedfsm.core.state_machine import StateMachine

    def _factory(initial="A", name=None):
        return StateMachine(initial, name=name)

    return _factory


@pytest.fixture
def simple_machine(machine_factory):
    """A -> B on event "E"."""
    from embedfsm.core.actions import to_state
    from embedfsm.core.guards import from_states, on_event

    machine = machine_factory("A")
    machine.add_transition(on_event("E"), from_states("A"), to_state("B"))
    return machine


@pytest.fixture
def times_machine(machine_factory):
    """A -> B after two consecutive "E" events, and B -> A on "F"."""
    from embedfsm.core.actions import to_state
    from embedfsm.core.guards import after_n_occurrences, from_states, on_event

    machine = machine_factory("A")
    machine.add_transition(on_event("E"), from_states("A"), after_n_occurrences(2), to_state("B"))
    machine.add_transition(on_event("F"), from_states("B"), to_state("A"))
    return machine


class HookRecorder:
    """Collects hook invocations as (kind, scope, state) tuples in call order."""

    def __init__(self):
        self.calls = []

    def global_hook(self, kind):
        return lambda state: self.calls.append((kind, "all", state))

    def state_hook(self, kind, state):
        return lambda: self.calls.append((kind, "state", state))


@pytest.fixture
def hook_recorder():
    return HookRecorder()


@pytest.fixture
def dummy_machine():
    """A stand-in for the machine argument of guards."""
    m = MagicMock()
    m.current_state = "A"
    return m
