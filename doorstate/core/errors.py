# doorstate/core/errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional

if TYPE_CHECKING:
    from doorstate.core.states import DoorOperation, DoorState


class DoorError(Exception):
    """
    Base exception class for errors raised by the door state machine.
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class IllegalTransitionError(DoorError):
    """
    Raised when an operation is invoked from a state that does not define it.
    The door that raised it is left exactly as it was before the call.
    """

    def __init__(
        self,
        state: "DoorState",
        operation: "DoorOperation",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        message = f"Illegal state transition: cannot {operation.value} a door that is {state.value}"
        merged = {"state": state, "operation": operation}
        merged.update(details or {})
        super().__init__(message, merged)
        self.state = state
        self.operation = operation
