"""DataGenerator: user-facing handle over one scalar stream."""
from __future__ import annotations

from typing import Any, List, MutableSequence, Optional

from .filler import fill
from .shapes import shape_of
from .streams.base import ScalarStream, StreamConfig
from .synthesizer import synthesize


class DataGenerator:
    """
    Generates typed fixture values from an owned scalar stream.

    Supported targets are numeric types, aggregates of them (dataclasses,
    NamedTuples, fixed tuples, numpy structured dtypes, `record(...)`
    layouts) and fixed-size sequences of any of those. Each call advances
    the stream by exactly the number of leaf scalars in the target.

    Parameters
    ----------
    stream : ScalarStream
        Any object with a ``pull() -> float`` method. The generator keeps
        it for its whole lifetime; do not pull from it elsewhere.

    Example
    -------
    >>> gen = DataGenerator(CyclicStream([1, 2, 3]))
    >>> gen.next(Point)
    Point(x=1, y=2, z=3)
    """

    def __init__(self, stream: ScalarStream):
        if not callable(getattr(stream, "pull", None)):
            raise TypeError(f"stream must provide pull(), got {type(stream).__name__}")
        self.stream = stream

    @classmethod
    def from_config(cls, cfg: StreamConfig) -> "DataGenerator":
        """Build a generator over the stream described by `cfg`."""
        return cls(cfg.build())

    def next(self, target: Any) -> Any:
        """Synthesize one value of `target`."""
        return synthesize(self.stream, target)

    def fill(self, container: MutableSequence[Any], target: Optional[Any] = None) -> None:
        """Overwrite every slot of `container` in index order; see `filler.fill`."""
        fill(self.stream, container, target)

    def take(self, target: Any, n: int) -> List[Any]:
        """Return a list of `n` consecutive values of `target`."""
        n = int(n)
        if n < 0:
            raise ValueError(f"take needs a non-negative count, got {n}")
        shape = shape_of(target)
        out: List[Any] = [None] * n
        fill(self.stream, out, shape)
        return out

    def __repr__(self) -> str:
        return f"DataGenerator({self.stream!r})"
