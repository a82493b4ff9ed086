"""
Core package providing the door state machine.

Design Patterns:
- State Pattern: behaviour keyed on the current DoorState
- Observer Pattern: hooks notified of state changes and rejections
"""

# Import order matters to avoid circular dependencies
from .errors import DoorError, IllegalTransitionError
from .states import DoorOperation, DoorState, Transition
from .hooks import HookManager, HookProtocol
from .door import Door

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
