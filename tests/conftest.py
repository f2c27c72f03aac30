"""Shared fixtures for weighted table tests."""

from collections.abc import Callable, Iterable

import pytest


class FixedSource:
    """A uniform source that replays a fixed sequence of values, cycling."""

    def __init__(self, values: Iterable[float]) -> None:
        self.values = list(values)
        self.calls = 0

    def random(self) -> float:
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value


@pytest.fixture
def fixed_source() -> Callable[..., FixedSource]:
    """Factory for sources that return the given values in order."""
    return lambda *values: FixedSource(values)
