# embedfsm/interfaces/protocols.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from typing import Optional, Protocol, runtime_checkable

from embedfsm.interfaces.types import State


@runtime_checkable
class MachineView(Protocol):
    """
    Read-only view of a machine, as handed to guard functions.

    Runtime Invariants:
    - Guards must not mutate the machine through this view.
    - ``current_state`` is the state at the time the event was dispatched,
      unless an earlier action of the same dispatch already moved it.
    """

    @property
    def name(self) -> Optional[str]:
        """Optional machine name used in logs and exports."""
        ...

    @property
    def current_state(self) -> State:
        """The state the machine is currently in."""
        ...

    @property
    def initial_state(self) -> State:
        """The state the machine was created with."""
        ...
