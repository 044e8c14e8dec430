"""
Shaped builders: nested vectors of a fixed shape.

A shape (d0, d1, ..., dn) builds d0 lists of d1 lists ... of Vectors of
length dn, every leaf its own Vector:

    two_dim(2, 3).ones('int32')
    # [Vector([1, 1, 1]), Vector([1, 1, 1])]

    with_shape((1, 1, 2)).full(5.0)
    # [[Vector([5.0, 5.0])]]

one_dim(n) builds a plain Vector.
"""

import numbers
from typing import Any, Callable, Sequence, Tuple

from numvec import dtypes
from numvec.builders import fill
from numvec.errors import InvalidParameterError
from numvec.vector import Vector


class Shape:
    """Fixed nested shape. Build with full(), zeros() or ones()."""

    def __init__(self, dims: Sequence[int]):
        dims = tuple(dims)
        if not dims:
            raise InvalidParameterError("Shape needs at least one dimension")
        for d in dims:
            if isinstance(d, bool) or not isinstance(d, numbers.Integral) or d < 0:
                raise InvalidParameterError(f"Shape dimensions must be non-negative integers, got {dims}")
        self.dims: Tuple[int, ...] = tuple(int(d) for d in dims)

    @property
    def ndim(self) -> int:
        return len(self.dims)

    def __repr__(self) -> str:
        return f"Shape{self.dims}"

    def _build(self, dims: Tuple[int, ...], leaf: Callable[[int], Vector]):
        if len(dims) == 1:
            return leaf(dims[0])
        return [self._build(dims[1:], leaf) for _ in range(dims[0])]

    def full(self, value, dtype=None):
        dt = dtypes.infer_dtype(value) if dtype is None else dtypes.resolve_dtype(dtype)
        return self._build(self.dims, lambda n: fill.full(n, value, dtype=dt))

    def zeros(self, dtype=None):
        return self._build(self.dims, lambda n: fill.zeros(n, dtype=dtype))

    def ones(self, dtype=None):
        return self._build(self.dims, lambda n: fill.ones(n, dtype=dtype))


def with_shape(shape: Sequence[int]) -> Shape:
    return Shape(shape)


def one_dim(length: int) -> Shape:
    return Shape((length,))


def two_dim(rows: int, cols: int) -> Shape:
    return Shape((rows, cols))


def three_dim(d0: int, d1: int, d2: int) -> Shape:
    return Shape((d0, d1, d2))


def four_dim(d0: int, d1: int, d2: int, d3: int) -> Shape:
    return Shape((d0, d1, d2, d3))


def shape_of(nested: Any) -> Tuple[int, ...]:
    """
    Shape of a nested list of Vectors built by this module.

    Raises InvalidParameterError when siblings disagree (ragged nesting).
    """
    if isinstance(nested, Vector):
        return (len(nested),)
    if not isinstance(nested, list):
        raise InvalidParameterError(f"Not a nested vector: {type(nested).__name__}")
    if not nested:
        raise InvalidParameterError("Cannot infer the inner shape of an empty nesting level")
    inner = [shape_of(item) for item in nested]
    if any(s != inner[0] for s in inner):
        raise InvalidParameterError(f"Ragged nested vector: {inner}")
    return (len(nested),) + inner[0]
