"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from ecsuid import SaltRegistry, SaltSpace


@pytest.fixture
def registry():
    """Fresh SaltRegistry over the default space."""
    return SaltRegistry()


@pytest.fixture
def small_space():
    """Ten salts, as used in the worked examples."""
    return SaltSpace(max_salts=10)


@pytest.fixture
def tiny_space():
    """Ten salts and a capacity of two identifiers per generator."""
    return SaltSpace(max_salts=10, max_safe_value=39)


class RecordingObserver:
    """WraparoundObserver that keeps every event."""

    def __init__(self) -> None:
        self.events = []

    def on_wraparound(self, event) -> None:
        self.events.append(event)


@pytest.fixture
def recorder():
    return RecordingObserver()
