"""In-place filling of fixed-length containers."""
from __future__ import annotations

from typing import Any, MutableSequence, Optional

import numpy as np

from .errors import ShapeError
from .log import get_logger
from .shapes import FixedSequence, shape_of
from .streams.base import ScalarStream

logger = get_logger(__name__)


def fill(stream: ScalarStream, container: MutableSequence[Any], target: Optional[Any] = None) -> None:
    """
    Overwrite every slot of `container` with a synthesized `target` value.

    Slots are written in ascending index order, one synthesis per slot; the
    container is never resized. If the stream raises partway through, slots
    ``[0, i)`` keep their new values, slot ``i`` and later are untouched,
    and the exception propagates.

    Parameters
    ----------
    stream : ScalarStream
        Source of scalars.
    container : MutableSequence
        Pre-sized container: list, numpy array, torch tensor, ...
    target : Any, optional
        Element target. May be omitted for numpy arrays: the dtype is used,
        wrapped in `FixedSequence`s over the trailing dimensions.

    Raises
    ------
    ShapeError
        If the element target is missing or not a numeric layout. Raised
        before any slot is written.
    """
    if target is None:
        if not isinstance(container, np.ndarray):
            raise ShapeError("fill needs an element target unless the container is a numpy array")
        target = container.dtype
        # one slot of an (n, d1, d2, ...) array is a (d1, d2, ...) block
        for dim in reversed(container.shape[1:]):
            target = FixedSequence(target, dim)
    shape = shape_of(target)
    n = len(container)
    logger.debug("fill_started", slots=n, leaf_count=shape.leaf_count)
    pull = stream.pull
    for i in range(n):
        container[i] = shape.build(pull)
