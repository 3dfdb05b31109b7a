# embedfsm/export/snapshot.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Optional, Tuple

from embedfsm.core.actions import CallSite
from embedfsm.interfaces.types import Event, State

if TYPE_CHECKING:
    from embedfsm.core.state_machine import StateMachine
    from embedfsm.core.transitions import Transition


@dataclass(frozen=True)
class TransitionInfo:
    """
    What a transition was declared with, as read from its guard and action
    descriptors. Custom guards and actions are not represented.
    """

    index: int
    sources: Tuple[State, ...]
    event: Optional[Event]
    destination: Optional[State]
    threshold: int
    calls: Tuple[CallSite, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "index": self.index,
            "sources": list(self.sources),
            "event": self.event,
            "destination": self.destination,
            "threshold": self.threshold,
            "calls": [str(site) for site in self.calls],
        }


@dataclass(frozen=True)
class MachineSnapshot:
    """Static picture of a machine's declarations. Never reflects runtime bookkeeping."""

    name: Optional[str]
    initial_state: State
    transitions: Tuple[TransitionInfo, ...]

    def to_dict(self) -> Dict[str, Any]:
        """Plain builtins only, suitable for ``json.dumps`` when states and events are."""
        return {
            "name": self.name,
            "initial_state": self.initial_state,
            "transitions": [info.to_dict() for info in self.transitions],
        }


def describe_transition(index: int, transition: "Transition") -> TransitionInfo:
    """
    Read the declared sources, event, destination, threshold and call sites of
    one transition. Later ``on_event``/``to_state`` descriptors override earlier ones.
    """
    sources = []
    event = None
    threshold = 1
    for guard in transition.guards:
        if guard.kind == "from_states":
            sources.extend(guard.argument)
        elif guard.kind == "on_event":
            event = guard.argument
        elif guard.kind == "after_n_occurrences":
            threshold = guard.argument

    destination = None
    calls = []
    for action in transition.actions:
        if action.kind == "to_state":
            destination = action.argument
        elif action.kind == "call":
            calls.append(action.argument)

    return TransitionInfo(
        index=index,
        sources=tuple(sources),
        event=event,
        destination=destination,
        threshold=threshold,
        calls=tuple(calls),
    )


def take_snapshot(machine: "StateMachine") -> MachineSnapshot:
    """
    Capture the declarations of ``machine``. Does not dispatch or modify it.

    :param machine: The machine to describe.
    """
    return MachineSnapshot(
        name=machine.name,
        initial_state=machine.initial_state,
        transitions=tuple(describe_transition(i, t) for i, t in enumerate(machine.transitions)),
    )
