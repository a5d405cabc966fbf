"""Cyclic replay of a predefined scalar sequence."""
from __future__ import annotations

from typing import Iterable, Tuple

from ..errors import StreamError
from ..log import get_logger

logger = get_logger(__name__)


class CyclicStream:
    """
    Replays `values` in order, wrapping to the first value after the last.

    The values are copied when the stream is built; later changes to the
    source iterable are not seen.

    Raises:
        StreamError: If `values` is empty.
    """

    def __init__(self, values: Iterable[float]):
        self.values: Tuple[float, ...] = tuple(float(v) for v in values)
        if not self.values:
            raise StreamError("cyclic stream needs at least one value")
        self._pos = 0
        logger.debug("cyclic_stream_created", size=len(self.values))

    @property
    def position(self) -> int:
        """Index of the value the next pull returns."""
        return self._pos

    def pull(self) -> float:
        v = self.values[self._pos]
        self._pos = (self._pos + 1) % len(self.values)
        return v

    def reset(self) -> None:
        """Rewind to the first value."""
        self._pos = 0

    def __repr__(self) -> str:
        return f"CyclicStream({list(self.values)!r})"
