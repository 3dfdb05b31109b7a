"""
Core package: guards, actions, transitions, hooks and the state machine.
"""
