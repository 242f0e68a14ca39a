"""pytest fixtures for LRU cache tests."""

import pytest


class FakeClock:
    """Manually advanced clock for deterministic expiry tests."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    """Provide a fake clock starting at t=1000s."""
    return FakeClock()
