# tests/conftest.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from unittest.mock import MagicMock

import pytest

from doorstate.core.door import Door
from doorstate.core.states import DoorOperation, DoorState


def pytest_configure(config):
    """Register custom marks."""
    config.addinivalue_line("markers", "scenario: mark test as an end-to-end door scenario")


@pytest.fixture
def open_door():
    """A door that starts open."""
    return Door(DoorState.OPEN)


@pytest.fixture
def closed_door():
    """A door that starts closed."""
    return Door(DoorState.CLOSED)


@pytest.fixture
def locked_door():
    """A door that starts locked."""
    return Door(DoorState.LOCKED)


@pytest.fixture
def mock_hook():
    """A hook mock exposing on_enter(state), on_exit(state) and on_error(error)."""
    hook = MagicMock()
    hook.on_enter = MagicMock()
    hook.on_exit = MagicMock()
    hook.on_error = MagicMock()
    return hook


@pytest.fixture
def fire():
    """Returns a helper that invokes the Door method matching an operation."""

    def _fire(door: Door, operation: DoorOperation) -> DoorState:
        return getattr(door, operation.value)()

    return _fire
