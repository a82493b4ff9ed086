"""doorstate: a door modelled as a finite state machine

A door is always open, closed or locked. The operations it accepts depend on
that state, and every illegal attempt is rejected without side effects.

Responsibilities:
    - State definitions and the transition table
    - The Door context object and its counters
    - Hooks for observing transitions

Cross-cutting Concerns:
    Thread Safety:
        - Not thread-safe; share a Door only behind an external lock

    Error Handling:
        - IllegalTransitionError for every undefined transition
        - State and counters are untouched when an error is raised

    Logging:
        - Module loggers under the ``doorstate`` namespace
        - No handlers installed by the library
"""

from doorstate.core import (
    Door,
    DoorError,
    DoorOperation,
    DoorState,
    HookManager,
    HookProtocol,
    IllegalTransitionError,
    Transition,
)

__version__ = "0.1.0"

__all__ = [
    "Door",
    "DoorState",
    "DoorOperation",
    "Transition",
    "DoorError",
    "IllegalTransitionError",
    "HookManager",
    "HookProtocol",
]
