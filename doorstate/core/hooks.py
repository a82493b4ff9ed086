# doorstate/core/hooks.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from doorstate.core.states import DoorState

logger = logging.getLogger(__name__)


@runtime_checkable
class HookProtocol(Protocol):
    """
    Observer of door lifecycle events. Implementations may define any subset
    of these methods; the manager skips the ones that are missing.
    """

    def on_enter(self, state: "DoorState") -> None: ...

    def on_exit(self, state: "DoorState") -> None: ...

    def on_error(self, error: Exception) -> None: ...


class HookManager:
    """
    Manages the registration and execution of hooks that listen to door
    lifecycle events (on_enter, on_exit, on_error). Users can attach logging,
    monitoring, or custom side effects without altering core logic.
    """

    def __init__(self, hooks: Optional[List["HookProtocol"]] = None) -> None:
        """
        Initialize with an optional list of hook objects.
        """
        self._hooks: List["HookProtocol"] = list(hooks or [])

    @property
    def hooks(self) -> List["HookProtocol"]:
        """A copy of the registered hooks, in registration order."""
        return list(self._hooks)

    def register_hook(self, hook: "HookProtocol") -> None:
        """
        Add a new hook to the manager's list of hooks.

        :param hook: An object implementing some of the HookProtocol methods.
        """
        self._hooks.append(hook)

    def execute_on_enter(self, state: "DoorState") -> None:
        """
        Run all hooks' on_enter logic when entering a state.
        """
        _HookInvoker(self._hooks).invoke("on_enter", state)

    def execute_on_exit(self, state: "DoorState") -> None:
        """
        Run all hooks' on_exit logic when exiting a state.
        """
        _HookInvoker(self._hooks).invoke("on_exit", state)

    def execute_on_error(self, error: Exception) -> None:
        """
        Run all hooks' on_error logic when a transition is rejected.
        """
        _HookInvoker(self._hooks).invoke("on_error", error)


class _HookInvoker:
    """
    Internal helper that iterates through a snapshot of the hooks and invokes
    one lifecycle method on each hook that defines it. A failing hook is logged
    and does not stop the remaining hooks.
    """

    def __init__(self, hooks: List["HookProtocol"]) -> None:
        self._hooks = list(hooks)

    def invoke(self, method_name: str, arg: object) -> None:
        for hook in self._hooks:
            method = getattr(hook, method_name, None)
            if not callable(method):
                continue
            try:
                method(arg)
            except Exception:
                logger.exception("%s %s failed", type(hook).__name__, method_name)
