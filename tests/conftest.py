"""Pytest configuration and fixtures."""

from typing import Callable, Sequence

import pytest

from pinneaple_fixtures import CountingStream, CyclicStream


class FailingStream:
    """Replays `values` once, then raises RuntimeError on every further pull."""

    def __init__(self, values: Sequence[float]) -> None:
        self.values = list(values)
        self.pulls = 0

    def pull(self) -> float:
        if self.pulls >= len(self.values):
            raise RuntimeError("stream broke")
        v = self.values[self.pulls]
        self.pulls += 1
        return v


@pytest.fixture
def counting() -> Callable[[Sequence[float]], CountingStream]:
    """Factory for pull-counting cyclic streams."""

    def _make(values: Sequence[float]) -> CountingStream:
        return CountingStream(CyclicStream(values))

    return _make


@pytest.fixture
def ramp() -> CyclicStream:
    """Cyclic stream over 0.0 .. 99.0."""
    return CyclicStream([float(i) for i in range(100)])
