# embedfsm/core/hooks.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from typing import Dict, Optional, Union

from embedfsm.core.errors import ConfigurationError
from embedfsm.interfaces.types import GlobalHook, State, StateHook


class HookRegistry:
    """
    Holds the enter/exit callbacks of one machine: a global callback for each
    direction, receiving the state, and per-state callbacks taking no argument.
    Each slot keeps only the last registered callback.
    """

    def __init__(self) -> None:
        self._enter_all: Optional[GlobalHook] = None
        self._exit_all: Optional[GlobalHook] = None
        self._enter_by_state: Dict[State, StateHook] = {}
        self._exit_by_state: Dict[State, StateHook] = {}

    def register_enter(self, state: Optional[State], callback: Union[GlobalHook, StateHook]) -> None:
        """
        :param state: The state to watch, or None for every state.
        :param callback: ``callback(state)`` when global, ``callback()`` otherwise.
        """
        _require_callable(callback)
        if state is None:
            self._enter_all = callback
        else:
            self._enter_by_state[state] = callback

    def register_exit(self, state: Optional[State], callback: Union[GlobalHook, StateHook]) -> None:
        """
        :param state: The state to watch, or None for every state.
        :param callback: ``callback(state)`` when global, ``callback()`` otherwise.
        """
        _require_callable(callback)
        if state is None:
            self._exit_all = callback
        else:
            self._exit_by_state[state] = callback

    def fire_exit(self, state: State) -> None:
        """Run the exit hooks for ``state``: the per-state one first, then the global one."""
        if self._exit_by_state:
            hook = self._exit_by_state.get(state)
            if hook is not None:
                hook()
        if self._exit_all is not None:
            self._exit_all(state)

    def fire_enter(self, state: State) -> None:
        """Run the enter hooks for ``state``: the per-state one first, then the global one."""
        if self._enter_by_state:
            hook = self._enter_by_state.get(state)
            if hook is not None:
                hook()
        if self._enter_all is not None:
            self._enter_all(state)


def _require_callable(callback: Union[GlobalHook, StateHook]) -> None:
    if not callable(callback):
        raise ConfigurationError(f"Hook must be callable, got {callback!r}")
