# embedfsm/core/errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details


class FSMError(Exception):
    """
    Base exception class for errors raised by the state machine engine itself.
    Errors raised by host guards, actions or hooks are never wrapped.
    """


class ConfigurationError(FSMError, ValueError):
    """
    Raised when a transition, guard, action or hook is registered with
    arguments the engine cannot use.
    """
