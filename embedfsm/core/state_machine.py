# embedfsm/core/state_machine.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple, Union

from embedfsm.core.actions import Action
from embedfsm.core.guards import Guard, GuardResult
from embedfsm.core.hooks import HookRegistry
from embedfsm.core.transitions import Descriptor, Transition
from embedfsm.export.snapshot import MachineSnapshot, take_snapshot
from embedfsm.interfaces.types import Event, GlobalHook, State, StateHook

logger = logging.getLogger(__name__)


class StateMachine:
    """
    A flat finite state machine driven one event at a time.

    Transitions are tried in the order they were added and at most one is
    applied per dispatched event. The machine also remembers which transition
    matched last and how many times in a row, which is what
    ``after_n_occurrences`` guards count against.

    The machine holds no lock; callers sharing it between threads must
    serialize access themselves.
    """

    def __init__(self, initial_state: State, name: Optional[str] = None) -> None:
        """
        :param initial_state: The state in which this machine begins and to which reset() returns.
        :param name: Optional label used in log records and snapshots.
        """
        self._initial_state = initial_state
        self._current_state = initial_state
        self._name = name
        self._transitions: List[Transition] = []
        self._hooks = HookRegistry()
        self._last_matched_index: Optional[int] = None
        self._consecutive_count = 0

    @property
    def name(self) -> Optional[str]:
        return self._name

    @property
    def current_state(self) -> State:
        """Get the current state."""
        return self._current_state

    @property
    def initial_state(self) -> State:
        return self._initial_state

    @property
    def transitions(self) -> Tuple[Transition, ...]:
        """Declared transitions, in priority order."""
        return tuple(self._transitions)

    @property
    def last_matched_index(self) -> Optional[int]:
        """Index of the transition that accepted or deferred last, if any."""
        return self._last_matched_index

    @property
    def consecutive_count(self) -> int:
        """How many dispatches in a row matched ``last_matched_index``."""
        return self._consecutive_count

    def add_transition(
        self,
        *descriptors: Descriptor,
        guards: Iterable[Guard] = (),
        actions: Iterable[Action] = (),
    ) -> Transition:
        """
        Append a transition. Guards and actions may be passed positionally in
        any interleaving, and/or as explicit sequences which are appended after
        the positional ones.

        :return: The registered transition.
        :raises ConfigurationError: If something other than a Guard or Action is given.
        """
        built = Transition.from_descriptors(*descriptors)
        transition = Transition(built.guards + tuple(guards), built.actions + tuple(actions))
        self._transitions.append(transition)
        return transition

    def on_enter(self, state: Optional[State], callback: Union[GlobalHook, StateHook]) -> None:
        """
        Register an enter hook. With ``state=None`` the hook runs on entering
        any state and receives that state; otherwise it runs, without
        arguments, on entering ``state`` only.
        """
        self._hooks.register_enter(state, callback)

    def on_exit(self, state: Optional[State], callback: Union[GlobalHook, StateHook]) -> None:
        """
        Register an exit hook. With ``state=None`` the hook runs on leaving
        any state and receives that state; otherwise it runs, without
        arguments, on leaving ``state`` only.
        """
        self._hooks.register_exit(state, callback)

    def dispatch(self, event: Event) -> bool:
        """
        Deliver an event, applying at most one transition.

        :param event: The event to process.
        :return: True if a transition fired, False otherwise. A transition still
            waiting on its occurrence threshold also yields False.
        """
        for index, transition in enumerate(self._transitions):
            if index == self._last_matched_index:
                attempt = self._consecutive_count + 1
            else:
                attempt = 1

            result = transition.match(event, attempt, self)
            if result is GuardResult.REJECT:
                continue

            if result is GuardResult.ACCEPT:
                source = self._current_state
                transition.apply(self)
                logger.debug(
                    "%s: transition %d fired on %r (%r -> %r)",
                    self._label(),
                    index,
                    event,
                    source,
                    self._current_state,
                )
            else:
                logger.debug(
                    "%s: transition %d deferred on %r (attempt %d)",
                    self._label(),
                    index,
                    event,
                    attempt,
                )

            self._last_matched_index = index
            self._consecutive_count = attempt
            return result is GuardResult.ACCEPT

        # an unmatched event breaks any run of consecutive matches
        self._last_matched_index = None
        self._consecutive_count = 0
        logger.debug("%s: no transition for %r in state %r", self._label(), event, self._current_state)
        return False

    def reset(self) -> None:
        """Return to the initial state without firing hooks and restart occurrence counting."""
        self._current_state = self._initial_state
        self._last_matched_index = None
        self._consecutive_count = 0
        logger.debug("%s: reset to %r", self._label(), self._initial_state)

    def snapshot(self) -> MachineSnapshot:
        """Read-only description of the declared transitions, for diagram tools."""
        return take_snapshot(self)

    def _switch_to(self, state: State) -> None:
        """Change the current state, running exit then enter hooks unless it is unchanged."""
        if self._current_state == state:
            return
        self._hooks.fire_exit(self._current_state)
        self._current_state = state
        self._hooks.fire_enter(state)

    def _label(self) -> str:
        return self._name if self._name is not None else f"StateMachine@{id(self):x}"

    def __repr__(self) -> str:
        return (
            f"StateMachine(name={self._name!r}, current_state={self._current_state!r}, "
            f"transitions={len(self._transitions)})"
        )
