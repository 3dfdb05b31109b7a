"""
Data-only export of a machine's declared transitions.

Diagram generators consume :class:`MachineSnapshot`; nothing here renders.
"""

from .snapshot import MachineSnapshot, TransitionInfo, describe_transition, take_snapshot

__all__ = ["MachineSnapshot", "TransitionInfo", "describe_transition", "take_snapshot"]
