"""Seeded uniform random scalar stream."""
from __future__ import annotations

import math
from typing import List

import torch

from ..errors import StreamError
from ..log import get_logger
from .base import DEFAULT_SEED

logger = get_logger(__name__)


class RandomStream:
    """
    Infinite stream of independent uniform draws over ``[low, high]``.

    Draws come from a CPU `torch.Generator` (Mersenne Twister) seeded with
    `seed`, so two streams built with the same bounds and seed produce the
    same sequence. Values are drawn `block_size` at a time in float64 and
    handed out one per pull.

    Parameters
    ----------
    low : float
        Lower bound (inclusive).
    high : float
        Upper bound (inclusive, up to floating rounding).
    seed : int, optional
        Generator seed. Default is 5489.
    block_size : int, optional
        Number of values drawn per generator call. Default is 1024.

    Raises
    ------
    StreamError
        If a bound is not finite, `low > high`, or `block_size < 1`.
    """

    def __init__(self, low: float, high: float, seed: int = DEFAULT_SEED, block_size: int = 1024):
        low, high = float(low), float(high)
        if not (math.isfinite(low) and math.isfinite(high)):
            raise StreamError(f"random bounds must be finite, got [{low}, {high}]")
        if low > high:
            raise StreamError(f"random bounds are reversed: low={low} > high={high}")
        if not math.isfinite(high - low):
            raise StreamError(f"random range [{low}, {high}] overflows float64")
        if int(block_size) < 1:
            raise StreamError(f"block_size must be >= 1, got {block_size}")
        self.low = low
        self.high = high
        self.block_size = int(block_size)
        self.reseed(seed)
        logger.debug("random_stream_created", low=low, high=high, seed=self.seed)

    def _rng(self) -> torch.Generator:
        return torch.Generator(device="cpu").manual_seed(int(self.seed))

    def reseed(self, seed: int) -> None:
        """Restart the stream from the beginning of the sequence for `seed`."""
        self.seed = int(seed)
        self._gen = self._rng()
        self._buf: List[float] = []
        self._pos = 0

    def _refill(self) -> None:
        u = torch.rand(self.block_size, generator=self._gen, dtype=torch.float64)
        x = (self.high - self.low) * u + self.low
        # rounding can overshoot `high` by an ulp
        self._buf = x.clamp_(self.low, self.high).tolist()
        self._pos = 0

    def pull(self) -> float:
        if self._pos >= len(self._buf):
            self._refill()
        v = self._buf[self._pos]
        self._pos += 1
        return v

    def __repr__(self) -> str:
        return f"RandomStream(low={self.low}, high={self.high}, seed={self.seed})"
