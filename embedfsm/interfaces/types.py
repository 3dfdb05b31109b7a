# embedfsm/interfaces/types.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from typing import Any, Callable

State = Any
Event = Any

# Callback Types
Predicate = Callable[[], bool]
Callback = Callable[[], None]
StateHook = Callable[[], None]
GlobalHook = Callable[[State], None]
