# doorstate/core/states.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

"""
Door states and the transition table that connects them.

Design:
- States are enum members; identity is the discriminant, never a type test.
- Every (state, operation) pair resolves through one table lookup. Pairs
  missing from the table are illegal, so each state only lists the moves it
  supports.
- A resolved transition carries the counter deltas to apply. States never
  touch the door that owns them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple

from doorstate.core.errors import IllegalTransitionError


class DoorOperation(Enum):
    """The four operations a caller can attempt on a door."""

    OPEN = "open"
    CLOSE = "close"
    LOCK = "lock"
    UNLOCK = "unlock"


class DoorState(Enum):
    """
    The condition a door is in. Members carry no per-instance data.
    """

    OPEN = "open"
    CLOSED = "closed"
    LOCKED = "locked"

    def can(self, target: "DoorState") -> bool:
        """
        Return True iff a direct transition from this state to ``target`` exists.

        :param target: The state to test reachability of.
        """
        return target in self.reachable()

    def reachable(self) -> Tuple["DoorState", ...]:
        """Return the states directly reachable from this one."""
        return tuple(t.target for (source, _), t in _TRANSITIONS.items() if source is self)

    def allowed_operations(self) -> Tuple[DoorOperation, ...]:
        """Return the operations that are legal from this state, in declaration order."""
        return tuple(op for op in DoorOperation if (self, op) in _TRANSITIONS)

    def transition(self, operation: DoorOperation) -> "Transition":
        """
        Resolve ``operation`` from this state.

        :param operation: The operation being attempted.
        :return: The transition to commit.
        :raises IllegalTransitionError: If the table has no entry for the pair.
        """
        try:
            return _TRANSITIONS[(self, operation)]
        except KeyError:
            raise IllegalTransitionError(self, operation) from None

    def open(self) -> "Transition":
        return self.transition(DoorOperation.OPEN)

    def close(self) -> "Transition":
        return self.transition(DoorOperation.CLOSE)

    def lock(self) -> "Transition":
        return self.transition(DoorOperation.LOCK)

    def unlock(self) -> "Transition":
        return self.transition(DoorOperation.UNLOCK)


@dataclass(frozen=True)
class Transition:
    """
    A legal move between two states.

    Attributes:
        source: State the door must be in.
        operation: Operation that triggers the move.
        target: State the door ends up in.
        visitors: Amount added to the door's visitor count on commit.
        locks: Amount added to the door's lock count on commit.
    """

    source: DoorState
    operation: DoorOperation
    target: DoorState
    visitors: int = 0
    locks: int = 0


def _build_table(*transitions: Transition) -> Dict[Tuple[DoorState, DoorOperation], Transition]:
    return {(t.source, t.operation): t for t in transitions}


_TRANSITIONS = _build_table(
    Transition(DoorState.OPEN, DoorOperation.CLOSE, DoorState.CLOSED),
    Transition(DoorState.CLOSED, DoorOperation.OPEN, DoorState.OPEN, visitors=1),
    Transition(DoorState.CLOSED, DoorOperation.LOCK, DoorState.LOCKED, locks=1),
    Transition(DoorState.LOCKED, DoorOperation.UNLOCK, DoorState.CLOSED),
)
