# embedfsm/core/actions.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import inspect
from typing import TYPE_CHECKING, Any, Callable, NamedTuple

from embedfsm.core.errors import ConfigurationError
from embedfsm.interfaces.types import Callback, State

if TYPE_CHECKING:
    from embedfsm.core.state_machine import StateMachine

ActionFunction = Callable[["StateMachine"], None]


class CallSite(NamedTuple):
    """Identifies a ``call`` action: the callback's name and where it was registered."""

    name: str
    filename: str
    lineno: int

    def __str__(self) -> str:
        return f"{self.name} ({self.filename}:{self.lineno})"


class Action:
    """
    A side effect attached to a transition. Wraps a function taking the machine.
    Actions only run when every guard of their transition has accepted.
    """

    def __init__(self, fn: ActionFunction, kind: str = "custom", argument: Any = None) -> None:
        if not callable(fn):
            raise ConfigurationError(f"Action function must be callable, got {fn!r}")
        self._fn = fn
        self._kind = kind
        self._argument = argument

    @property
    def kind(self) -> str:
        return self._kind

    @property
    def argument(self) -> Any:
        return self._argument

    def run(self, machine: "StateMachine") -> None:
        """
        Execute the action against the machine.

        :param machine: The machine the owning transition belongs to.
        """
        self._fn(machine)

    def __repr__(self) -> str:
        return f"Action(kind={self._kind!r}, argument={self._argument!r})"


def to_state(target: State) -> Action:
    """
    Move the machine to ``target``, firing exit hooks for the current state and
    enter hooks for ``target``. Nothing happens when already in ``target``.

    :param target: Destination state.
    """

    def _move(machine: "StateMachine") -> None:
        machine._switch_to(target)

    return Action(_move, kind="to_state", argument=target)


def call(callback: Callback) -> Action:
    """
    Invoke ``callback()`` when the transition fires. The registration site is
    recorded so diagram tools can label the edge.

    :param callback: A no-argument callable.
    """
    if not callable(callback):
        raise ConfigurationError(f"Callback must be callable, got {callback!r}")

    caller = inspect.currentframe().f_back
    try:
        site = CallSite(
            name=getattr(callback, "__qualname__", repr(callback)),
            filename=caller.f_code.co_filename,
            lineno=caller.f_lineno,
        )
    finally:
        del caller

    def _invoke(machine: "StateMachine") -> None:
        callback()

    return Action(_invoke, kind="call", argument=site)
