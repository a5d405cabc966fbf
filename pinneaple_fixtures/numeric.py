"""Leaf numeric types and the unchecked (static-cast style) scalar conversion."""
from __future__ import annotations

import math
from typing import Any, Dict, Tuple

import numpy as np

from .errors import ShapeError

# python builtins accepted as leaf types; subclasses (IntEnum, ...) are not
_PY_KINDS = (int, float, bool)


def is_leaf_kind(obj: Any) -> bool:
    """Return True if `obj` names a numeric leaf type (python, numpy scalar type or dtype)."""
    try:
        normalize_kind(obj)
    except ShapeError:
        return False
    return True


def normalize_kind(obj: Any) -> type:
    """
    Normalize a leaf type description to a scalar type.

    Parameters
    ----------
    obj : Any
        ``int``, ``float``, ``bool``, a numpy integer/floating/bool scalar
        type (``np.int16``, ``np.float32``, ...), or a non-structured numpy
        dtype (``np.dtype("u2")``).

    Returns
    -------
    type
        The python or numpy scalar type values are converted to.

    Raises
    ------
    ShapeError
        If `obj` is not a numeric leaf type.
    """
    if isinstance(obj, np.dtype):
        if obj.fields is not None or obj.subdtype is not None:
            raise ShapeError(f"dtype {obj} is not a scalar dtype")
        obj = obj.type
    if not isinstance(obj, type):
        raise ShapeError(f"{obj!r} is not a numeric leaf type")
    if obj in _PY_KINDS:
        return obj
    if issubclass(obj, (np.integer, np.floating, np.bool_)):
        # np.int_ and friends are aliases; resolve through dtype to the canonical type
        return np.dtype(obj).type
    raise ShapeError(f"{obj!r} is not a numeric leaf type")


_INT_LAYOUT: Dict[type, Tuple[int, bool]] = {}


def _int_layout(kind: type) -> Tuple[int, bool]:
    layout = _INT_LAYOUT.get(kind)
    if layout is None:
        info = np.iinfo(kind)
        layout = (info.bits, info.min < 0)
        _INT_LAYOUT[kind] = layout
    return layout


def wrap_integer(n: int, bits: int, signed: bool) -> int:
    """Reduce `n` modulo 2**bits, reinterpreted as two's complement when `signed`."""
    n &= (1 << bits) - 1
    if signed and n >= 1 << (bits - 1):
        n -= 1 << bits
    return n


def _truncate(value: float) -> int:
    # non-finite values have no integer representation
    if not math.isfinite(value):
        return 0
    return math.trunc(value)


def convert(value: float, kind: type) -> Any:
    """
    Convert a pulled scalar to `kind` without range validation.

    Integer targets truncate toward zero and wrap into the target width
    (python ``int`` is unbounded and only truncates). NaN and infinities
    become 0 for integer targets. Floating targets round to their precision
    and overflow to ``inf``. Bool targets are ``value != 0``.

    Narrowing is deliberately unchecked: wrapped and truncated values are
    valid fixtures.
    """
    if kind is float:
        return float(value)
    if kind is int:
        return _truncate(value)
    if kind is bool:
        return value != 0
    if kind is np.bool_:
        return np.bool_(value != 0)
    if issubclass(kind, np.integer):
        bits, signed = _int_layout(kind)
        return kind(wrap_integer(_truncate(value), bits, signed))
    with np.errstate(over="ignore"):
        return kind(value)
