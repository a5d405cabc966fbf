"""Pull-counting stream wrapper."""
from __future__ import annotations

from .base import ScalarStream


class CountingStream:
    """Forwards pulls to `inner` and records how many were made in `pulls`."""

    def __init__(self, inner: ScalarStream):
        self.inner = inner
        self.pulls = 0

    def pull(self) -> float:
        v = self.inner.pull()
        self.pulls += 1
        return v

    def __repr__(self) -> str:
        return f"CountingStream({self.inner!r}, pulls={self.pulls})"
