"""embedfsm: a small, embeddable finite state machine engine

A host declares transitions from guard and action descriptors, registers
enter/exit hooks, then drives the machine with ``dispatch(event)``.

    machine = StateMachine(IDLE)
    machine.add_transition(on_event(START), from_states(IDLE), to_state(RUNNING))
    machine.dispatch(START)  # True, machine.current_state == RUNNING

Responsibilities:
    - Ordered transition table, first match wins
    - Tri-state guard composition (reject / accept / defer)
    - Consecutive occurrence counting for ``after_n_occurrences``
    - Enter/exit hooks, per state and global
    - Read-only snapshots of declared transitions for diagram tools

Cross-cutting Concerns:
    Thread Safety:
        - None; a machine has a single owner

    Error Handling:
        - ConfigurationError for unusable registrations
        - Host callback errors propagate unmodified

    Logging:
        - DEBUG records on the ``embedfsm`` logger hierarchy
"""

from embedfsm.core.actions import Action, CallSite, call, to_state
from embedfsm.core.errors import ConfigurationError, FSMError
from embedfsm.core.guards import (
    Guard,
    GuardResult,
    after_n_occurrences,
    check,
    from_states,
    not_check,
    on_event,
)
from embedfsm.core.state_machine import StateMachine
from embedfsm.core.transitions import Transition
from embedfsm.export.snapshot import MachineSnapshot, TransitionInfo, take_snapshot

__version__ = "0.1.0"

__all__ = [
    "Action",
    "CallSite",
    "ConfigurationError",
    "FSMError",
    "Guard",
    "GuardResult",
    "MachineSnapshot",
    "StateMachine",
    "Transition",
    "TransitionInfo",
    "after_n_occurrences",
    "call",
    "check",
    "from_states",
    "not_check",
    "on_event",
    "take_snapshot",
    "to_state",
]
