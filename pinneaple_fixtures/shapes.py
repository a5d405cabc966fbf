"""Target shapes: Leaf, Aggregate and FixedSequence, and their derivation from python types."""
from __future__ import annotations

import dataclasses
import functools
from dataclasses import dataclass, field
from typing import Annotated, Any, Callable, Dict, Sequence, Tuple, get_args, get_origin, get_type_hints

import numpy as np

from .errors import ShapeError
from .log import get_logger
from .numeric import convert, normalize_kind

logger = get_logger(__name__)

Pull = Callable[[], float]


class Shape:
    """
    Base class of target shape nodes.

    A shape knows how many scalars it consumes (`leaf_count`, fixed when the
    shape is built) and how to assemble a value from a pull function
    (`build`). Subclasses are immutable and hashable.
    """

    leaf_count: int

    def build(self, pull: Pull) -> Any:
        raise NotImplementedError


@dataclass(frozen=True)
class Leaf(Shape):
    """
    A single numeric value.

    Attributes
    ----------
    kind : type
        Scalar type the pulled value is converted to (``int``, ``float``,
        ``bool`` or a numpy scalar type; numpy dtypes are accepted and
        normalized to their scalar type).
    """
    kind: Any

    def __post_init__(self):
        object.__setattr__(self, "kind", normalize_kind(self.kind))

    @property
    def leaf_count(self) -> int:
        return 1

    def build(self, pull: Pull) -> Any:
        return convert(pull(), self.kind)


@dataclass(frozen=True)
class Aggregate(Shape):
    """
    A fixed-layout record of numeric fields.

    Fields are synthesized in the order given and passed positionally to
    `factory`. Reordering `fields` changes which stream value lands in which
    field.

    Attributes
    ----------
    factory : Callable[..., Any]
        Called with one positional argument per field.
    fields : Tuple[Tuple[str, Shape], ...]
        Ordered ``(name, shape)`` pairs.
    """
    factory: Callable[..., Any]
    fields: Tuple[Tuple[str, Shape], ...]
    leaf_count: int = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "fields", tuple((str(n), s) for n, s in self.fields))
        for name, shape in self.fields:
            if not isinstance(shape, Shape):
                raise ShapeError(f"expected a Shape, got {shape!r}", path=name)
        object.__setattr__(self, "leaf_count", sum(s.leaf_count for _, s in self.fields))

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(n for n, _ in self.fields)

    def build(self, pull: Pull) -> Any:
        values = [shape.build(pull) for _, shape in self.fields]
        return self.factory(*values)


@dataclass(frozen=True)
class FixedSequence(Shape):
    """
    `length` independently synthesized values of `inner`, index 0 first.

    `inner` may be any target accepted by `shape_of`. The result is built by
    `factory` from the list of values (a tuple by default).
    """
    inner: Any
    length: int
    factory: Callable[[list], Any] = tuple
    leaf_count: int = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if isinstance(self.length, bool) or not isinstance(self.length, (int, np.integer)):
            raise ShapeError(f"sequence length must be an integer, got {self.length!r}")
        if self.length < 0:
            raise ShapeError(f"sequence length must be non-negative, got {self.length}")
        object.__setattr__(self, "length", int(self.length))
        object.__setattr__(self, "inner", shape_of(self.inner))
        object.__setattr__(self, "leaf_count", self.inner.leaf_count * self.length)

    def build(self, pull: Pull) -> Any:
        inner = self.inner
        return self.factory([inner.build(pull) for _ in range(self.length)])


def leaf_count(target: Any) -> int:
    """Number of scalars one synthesis of `target` consumes."""
    return shape_of(target).leaf_count


def record(factory: Callable[..., Any], *field_types: Any, names: Sequence[str] = ()) -> Aggregate:
    """
    Explicit aggregate builder: field types listed in order, assembled positionally.

    Example
    -------
    >>> record(Point, np.int32, np.int32, names=("x", "y"))

    Parameters
    ----------
    factory : Callable[..., Any]
        Called as ``factory(v0, v1, ...)``.
    *field_types : Any
        Targets accepted by `shape_of`, one per field.
    names : Sequence[str], optional
        Field names used in error messages and `Aggregate.names`; defaults to
        positional indices.
    """
    if names and len(names) != len(field_types):
        raise ShapeError(f"{len(names)} names given for {len(field_types)} fields")
    labels = list(names) or [str(i) for i in range(len(field_types))]
    return Aggregate(
        factory=factory,
        fields=tuple((n, _resolve(t, n, ())) for n, t in zip(labels, field_types)),
    )


def shape_of(target: Any) -> Shape:
    """
    Resolve `target` to a shape.

    Accepted targets: a `Shape`; a numeric leaf type; a dataclass or
    NamedTuple class with numeric (or nested aggregate) fields; a fixed
    ``Tuple[A, B, ...]``; ``Annotated[T, <Shape>]``; a numpy dtype (scalar,
    structured or subarray). Hashable targets are resolved once and cached.

    Raises
    ------
    ShapeError
        If any reachable field is not numeric or is variable-length.
    """
    if isinstance(target, Shape):
        return target
    try:
        hash(target)
    except TypeError:
        return _resolve(target, "", ())
    return _cached_shape_of(target)


@functools.lru_cache(maxsize=512)
def _cached_shape_of(target: Any) -> Shape:
    shape = _resolve(target, "", ())
    logger.debug("shape_resolved", target=_describe(target), leaf_count=shape.leaf_count)
    return shape


def _describe(target: Any) -> str:
    return getattr(target, "__qualname__", None) or repr(target)


def _join(path: str, name: str) -> str:
    return f"{path}.{name}" if path else name


def _as_tuple(*values: Any) -> Tuple[Any, ...]:
    return values


def _resolve(target: Any, path: str, seen: Tuple[Any, ...]) -> Shape:
    if isinstance(target, Shape):
        return target

    origin = get_origin(target)
    if origin is Annotated:
        base, *meta = get_args(target)
        for m in meta:
            if isinstance(m, Shape):
                return m
        return _resolve(base, path, seen)
    if origin is tuple:
        args = get_args(target)
        if not args and target is Tuple:
            raise ShapeError("bare Tuple has no fixed layout; list the element types", path=path)
        if args == ((),):
            # Tuple[()] before python 3.11
            args = ()
        if len(args) == 2 and args[1] is Ellipsis:
            raise ShapeError("variable-length tuple; use FixedSequence(inner, n)", path=path)
        return Aggregate(
            factory=_as_tuple,
            fields=tuple((str(i), _resolve(a, _join(path, str(i)), seen)) for i, a in enumerate(args)),
        )
    if origin is not None:
        raise ShapeError(f"{target!r} is not a fixed numeric layout", path=path)

    if isinstance(target, np.dtype):
        return _from_dtype(target, path)

    if any(target is s for s in seen):
        raise ShapeError(f"recursive layout through {_describe(target)}", path=path)

    if isinstance(target, type) and dataclasses.is_dataclass(target):
        return _from_dataclass(target, path, seen + (target,))
    if isinstance(target, type) and issubclass(target, tuple) and hasattr(target, "_fields"):
        return _from_namedtuple(target, path, seen + (target,))

    return Leaf(_leaf_kind(target, path))


def _leaf_kind(target: Any, path: str) -> type:
    try:
        return normalize_kind(target)
    except ShapeError as e:
        raise ShapeError(f"{target!r} is not a numeric leaf type", path=path) from e


def _hints(cls: type, path: str) -> Dict[str, Any]:
    try:
        return get_type_hints(cls, include_extras=True)
    except (NameError, TypeError) as e:
        raise ShapeError(f"cannot resolve annotations of {cls.__qualname__}: {e}", path=path) from e


class _KeywordFactory:
    """Builds a dataclass from positional values by field name (keeps kw_only fields working)."""

    def __init__(self, cls: type, names: Tuple[str, ...]):
        self.cls = cls
        self.names = names

    def __call__(self, *values: Any) -> Any:
        return self.cls(**dict(zip(self.names, values)))

    def __repr__(self) -> str:
        return f"{self.cls.__qualname__}(**)"


def _from_dataclass(cls: type, path: str, seen: Tuple[Any, ...]) -> Aggregate:
    hints = _hints(cls, path)
    fields = []
    for f in dataclasses.fields(cls):
        fpath = _join(path, f.name)
        if not f.init:
            raise ShapeError("init=False fields cannot be synthesized", path=fpath)
        fields.append((f.name, _resolve(hints[f.name], fpath, seen)))
    names = tuple(n for n, _ in fields)
    return Aggregate(factory=_KeywordFactory(cls, names), fields=tuple(fields))


def _from_namedtuple(cls: type, path: str, seen: Tuple[Any, ...]) -> Aggregate:
    hints = _hints(cls, path)
    fields = []
    for name in cls._fields:
        fpath = _join(path, name)
        if name not in hints:
            raise ShapeError("field has no type annotation", path=fpath)
        fields.append((name, _resolve(hints[name], fpath, seen)))
    return Aggregate(factory=cls, fields=tuple(fields))


def _make_record(dtype: np.dtype, *values: Any) -> np.void:
    return np.array(tuple(values), dtype=dtype)[()]


def _from_dtype(dtype: np.dtype, path: str, nested: bool = False) -> Shape:
    if dtype.fields is not None:
        fields = []
        for name in dtype.names:
            fields.append((name, _from_dtype(dtype.fields[name][0], _join(path, name), nested=True)))
        # nested records stay tuples; numpy fills them when the outer record is built
        factory = _as_tuple if nested else functools.partial(_make_record, dtype)
        return Aggregate(factory=factory, fields=tuple(fields))
    if dtype.subdtype is not None:
        base, dims = dtype.subdtype
        shape: Shape = _from_dtype(base, path, nested=True)
        for n in reversed(dims):
            shape = FixedSequence(shape, n)
        return shape
    if dtype.kind not in "biuf":
        raise ShapeError(f"dtype {dtype} is not numeric", path=path)
    return Leaf(dtype)
