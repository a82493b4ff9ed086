# doorstate/core/door.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import logging
from typing import List, Optional

from doorstate.core.errors import IllegalTransitionError
from doorstate.core.hooks import HookManager, HookProtocol
from doorstate.core.states import DoorOperation, DoorState, Transition

logger = logging.getLogger(__name__)


class Door:
    """
    A door that owns its current state plus a visitor and a lock counter.

    Each operation asks the current state to resolve a transition. A legal
    transition replaces the state and applies its counter deltas in one step;
    an illegal one raises IllegalTransitionError and leaves the door as it was.

    Not thread-safe. Callers sharing a door must serialise access themselves.
    """

    def __init__(self, initial_state: DoorState, hooks: Optional[List[HookProtocol]] = None) -> None:
        """
        :param initial_state: The state the door starts in. Any member is allowed.
        :param hooks: Optional hook objects implementing on_enter, on_exit, on_error.
        :raises TypeError: If initial_state is not a DoorState.
        """
        _require_state(initial_state)
        self._state = initial_state
        self._visitor_count = 0
        self._lock_count = 0
        self._hooks = HookManager(hooks)

    def __repr__(self) -> str:
        return (
            f"Door(state={self._state.name}, visitor_count={self._visitor_count}, "
            f"lock_count={self._lock_count})"
        )

    @property
    def state(self) -> DoorState:
        """The current state."""
        return self._state

    @property
    def visitor_count(self) -> int:
        """How many times the door has gone from closed to open."""
        return self._visitor_count

    @property
    def lock_count(self) -> int:
        """How many times the door has gone from closed to locked."""
        return self._lock_count

    def register_hook(self, hook: HookProtocol) -> None:
        self._hooks.register_hook(hook)

    def open(self) -> DoorState:
        return self._fire(DoorOperation.OPEN)

    def close(self) -> DoorState:
        return self._fire(DoorOperation.CLOSE)

    def lock(self) -> DoorState:
        return self._fire(DoorOperation.LOCK)

    def unlock(self) -> DoorState:
        return self._fire(DoorOperation.UNLOCK)

    def is_open(self) -> bool:
        return self._state is DoorState.OPEN

    def is_closed(self) -> bool:
        return self._state is DoorState.CLOSED

    def is_locked(self) -> bool:
        return self._state is DoorState.LOCKED

    def can_transition_to(self, target: DoorState) -> bool:
        """
        Return True if the current state has a direct transition to ``target``.
        Never changes the door.
        """
        _require_state(target)
        return self._state.can(target)

    def _fire(self, operation: DoorOperation) -> DoorState:
        try:
            transition = self._state.transition(operation)
        except IllegalTransitionError as e:
            logger.debug("Rejected %s from %s", operation.value, self._state.value)
            self._hooks.execute_on_error(e)
            raise

        self._hooks.execute_on_exit(self._state)
        self._commit(transition)
        logger.debug(
            "%s: %s -> %s (visitors=%d, locks=%d)",
            operation.value,
            transition.source.value,
            transition.target.value,
            self._visitor_count,
            self._lock_count,
        )
        self._hooks.execute_on_enter(self._state)
        return self._state

    def _commit(self, transition: Transition) -> None:
        self._state = transition.target
        self._visitor_count += transition.visitors
        self._lock_count += transition.locks


def _require_state(value: object) -> None:
    if not isinstance(value, DoorState):
        raise TypeError(f"Expected a DoorState, got {type(value).__name__}")
