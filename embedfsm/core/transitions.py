# embedfsm/core/transitions.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Optional, Tuple, Union

from embedfsm.core.actions import Action
from embedfsm.core.errors import ConfigurationError
from embedfsm.core.guards import Guard, GuardResult, combine_results
from embedfsm.interfaces.types import Event

if TYPE_CHECKING:
    from embedfsm.core.state_machine import StateMachine

Descriptor = Union[Guard, Action]


class Transition:
    """
    A declared rule of the machine: an ordered list of guards that must all
    pass and an ordered list of actions run when they do.

    Transitions have no priority of their own; the machine tries them in the
    order they were added and applies the first one that matches.
    """

    def __init__(
        self,
        guards: Optional[Iterable[Guard]] = None,
        actions: Optional[Iterable[Action]] = None,
    ) -> None:
        """
        :param guards: Conditions evaluated in order; the first REJECT stops evaluation.
        :param actions: Actions run in order when the guards accept.
        """
        self._guards: Tuple[Guard, ...] = tuple(guards) if guards else ()
        self._actions: Tuple[Action, ...] = tuple(actions) if actions else ()

        for guard in self._guards:
            if not isinstance(guard, Guard):
                raise ConfigurationError(f"Expected a Guard, got {guard!r}")
        for action in self._actions:
            if not isinstance(action, Action):
                raise ConfigurationError(f"Expected an Action, got {action!r}")

    @classmethod
    def from_descriptors(cls, *descriptors: Descriptor) -> "Transition":
        """
        Build a transition from guards and actions given in any interleaving,
        e.g. ``Transition.from_descriptors(on_event(GO), from_states(IDLE), to_state(RUNNING))``.

        :raises ConfigurationError: If a descriptor is neither a Guard nor an Action.
        """
        guards = []
        actions = []
        for descriptor in descriptors:
            if isinstance(descriptor, Guard):
                guards.append(descriptor)
            elif isinstance(descriptor, Action):
                actions.append(descriptor)
            else:
                raise ConfigurationError(f"Expected a Guard or an Action, got {descriptor!r}")
        return cls(guards, actions)

    @property
    def guards(self) -> Tuple[Guard, ...]:
        """The guard conditions for this transition."""
        return self._guards

    @property
    def actions(self) -> Tuple[Action, ...]:
        """The actions to execute when this transition occurs."""
        return self._actions

    def match(self, event: Event, attempt: int, machine: "StateMachine") -> GuardResult:
        """
        Evaluate the guards against a dispatched event.

        :param event: The dispatched event.
        :param attempt: How many consecutive times this transition has been tried, this one included.
        :param machine: The owning machine, read-only for guards.
        :return: The combined result; a transition without guards never matches.
        """
        return combine_results(guard.evaluate(event, attempt, machine) for guard in self._guards)

    def apply(self, machine: "StateMachine") -> None:
        """
        Run every action in order. An exception from an action propagates and
        leaves the effects of earlier actions in place.
        """
        for action in self._actions:
            action.run(machine)

    def __repr__(self) -> str:
        return f"Transition(guards={list(self._guards)!r}, actions={list(self._actions)!r})"
