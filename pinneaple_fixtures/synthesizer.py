"""Value synthesis: pull one scalar per leaf field and assemble the target value."""
from __future__ import annotations

from typing import Any

from .shapes import shape_of
from .streams.base import ScalarStream


def synthesize(stream: ScalarStream, target: Any) -> Any:
    """
    Synthesize one value of `target` from `stream`.

    Leaves pull one scalar each and convert it to the leaf's numeric type.
    Aggregates synthesize their fields in declaration order and assemble
    the results positionally; fixed sequences synthesize their element
    `length` times, index 0 first. Exactly ``leaf_count(target)`` values
    are pulled.

    Parameters
    ----------
    stream : ScalarStream
        Source of scalars; advanced by the call.
    target : Any
        A `Shape` or anything `shape_of` accepts (numeric type, dataclass,
        NamedTuple, fixed tuple, numpy dtype).

    Returns
    -------
    Any
        A fully built value with no reference to `stream`.

    Raises
    ------
    ShapeError
        If `target` is not a numeric layout. Raised before the first pull.
    """
    shape = shape_of(target)
    return shape.build(stream.pull)

