# embedfsm/core/guards.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING, Any, Callable, Iterable

from embedfsm.core.errors import ConfigurationError
from embedfsm.interfaces.types import Event, Predicate, State

if TYPE_CHECKING:
    from embedfsm.interfaces.protocols import MachineView

GuardFunction = Callable[[Event, int, "MachineView"], "GuardResult"]


class GuardResult(IntEnum):
    """
    Tri-state outcome of a guard. The numeric order matters: combining two
    non-rejecting results keeps the larger one, so DEFER dominates ACCEPT.
    """

    REJECT = 0
    ACCEPT = 1
    DEFER = 2

    def combine(self, other: "GuardResult") -> "GuardResult":
        """
        Fold another guard result into this one.

        :param other: The result of the next guard.
        :return: REJECT if either side rejects, otherwise the larger result.
        """
        if self is GuardResult.REJECT or other is GuardResult.REJECT:
            return GuardResult.REJECT
        return max(self, other)


def combine_results(results: Iterable[GuardResult]) -> GuardResult:
    """
    Combine guard results the way a transition does, stopping at the first
    REJECT. An empty iterable combines to REJECT.
    """
    combined = None
    for result in results:
        if result is GuardResult.REJECT:
            return GuardResult.REJECT
        combined = result if combined is None else combined.combine(result)
    return GuardResult.REJECT if combined is None else combined


class Guard:
    """
    A single transition condition. Wraps a function of
    ``(event, attempt, machine)`` returning a :class:`GuardResult`.

    ``kind`` and ``argument`` describe what the guard was built from so that
    export tools can read the declared transition without running it.
    """

    def __init__(self, fn: GuardFunction, kind: str = "custom", argument: Any = None) -> None:
        if not callable(fn):
            raise ConfigurationError(f"Guard function must be callable, got {fn!r}")
        self._fn = fn
        self._kind = kind
        self._argument = argument

    @property
    def kind(self) -> str:
        return self._kind

    @property
    def argument(self) -> Any:
        return self._argument

    def evaluate(self, event: Event, attempt: int, machine: "MachineView") -> GuardResult:
        """
        Run the wrapped function. Truthy/falsy plain values returned by custom
        guards are read as ACCEPT/REJECT.
        """
        result = self._fn(event, attempt, machine)
        if isinstance(result, GuardResult):
            return result
        return GuardResult.ACCEPT if result else GuardResult.REJECT

    def __repr__(self) -> str:
        return f"Guard(kind={self._kind!r}, argument={self._argument!r})"


def _require_callable(predicate: Predicate) -> None:
    if not callable(predicate):
        raise ConfigurationError(f"Predicate must be callable, got {predicate!r}")


def from_states(*states: State) -> Guard:
    """
    Accept only while the machine is in one of the given states.

    :param states: Source states for the transition.
    """
    sources = tuple(states)

    def _in_sources(event: Event, attempt: int, machine: "MachineView") -> GuardResult:
        current = machine.current_state
        for source in sources:
            if current == source:
                return GuardResult.ACCEPT
        return GuardResult.REJECT

    return Guard(_in_sources, kind="from_states", argument=sources)


def on_event(target: Event) -> Guard:
    """
    Accept only when the dispatched event equals ``target``.

    :param target: The triggering event.
    """

    def _matches(event: Event, attempt: int, machine: "MachineView") -> GuardResult:
        return GuardResult.ACCEPT if event == target else GuardResult.REJECT

    return Guard(_matches, kind="on_event", argument=target)


def check(predicate: Predicate) -> Guard:
    """
    External condition allowing the transition only if ``predicate()`` is true.
    """
    _require_callable(predicate)

    def _checked(event: Event, attempt: int, machine: "MachineView") -> GuardResult:
        return GuardResult.ACCEPT if predicate() else GuardResult.REJECT

    return Guard(_checked, kind="check", argument=predicate)


def not_check(predicate: Predicate) -> Guard:
    """
    External condition allowing the transition only if ``predicate()`` is false.
    """
    _require_callable(predicate)

    def _not_checked(event: Event, attempt: int, machine: "MachineView") -> GuardResult:
        return GuardResult.REJECT if predicate() else GuardResult.ACCEPT

    return Guard(_not_checked, kind="not_check", argument=predicate)


def after_n_occurrences(n: int) -> Guard:
    """
    Require the other conditions of the transition to hold on ``n`` consecutive
    dispatches before it fires. Earlier attempts DEFER, later ones REJECT.

    The count is kept per transition index, so this only behaves as expected
    when no other transition matches in between.

    :param n: Number of consecutive matches needed, at least 1.
    :raises ConfigurationError: If ``n`` is not a positive integer.
    """
    if isinstance(n, bool) or not isinstance(n, int) or n < 1:
        raise ConfigurationError(f"Occurrence threshold must be a positive integer, got {n!r}")

    def _threshold(event: Event, attempt: int, machine: "MachineView") -> GuardResult:
        if attempt == n:
            return GuardResult.ACCEPT
        if attempt < n:
            return GuardResult.DEFER
        return GuardResult.REJECT

    return Guard(_threshold, kind="after_n_occurrences", argument=n)
