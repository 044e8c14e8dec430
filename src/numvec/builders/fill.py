"""
Fill builders: vectors of a given length holding one constant.

    full(3, 7)            # Vector([7, 7, 7])
    zeros(2, 'int8')      # Vector([0, 0])
    ones_like(x)          # same length and element type as x
"""

import logging
import numbers
from typing import Optional

import numpy as np

from numvec import dtypes
from numvec.errors import InvalidParameterError
from numvec.vector import Vector

logger = logging.getLogger(__name__)


def check_length(length) -> int:
    """Vector lengths are non-negative integers."""
    if isinstance(length, bool) or not isinstance(length, numbers.Integral):
        raise InvalidParameterError(f"Length must be an integer, got {length!r}")
    if length < 0:
        raise InvalidParameterError(f"Length must be non-negative, got {length}")
    return int(length)


def full(length: int, value, dtype=None) -> Vector:
    """
    Vector of `length` copies of `value`.

    The element type is inferred from value unless dtype is given.
    length=0 gives an empty vector.
    """
    length = check_length(length)
    dt = dtypes.infer_dtype(value) if dtype is None else dtypes.resolve_dtype(dtype)
    fill = dtypes.coerce_scalar(value, dt)
    logger.debug(f"full: len={length} dtype={dt.name}")
    return Vector._wrap(np.full(length, fill, dtype=dt))


def full_like(other: Vector, value) -> Vector:
    """full() with the length and element type of `other`."""
    return full(len(other), value, dtype=other.dtype)


def zeros(length: int, dtype: Optional[object] = None) -> Vector:
    dt = dtypes.default_dtype() if dtype is None else dtypes.resolve_dtype(dtype)
    return full(length, dtypes.zero(dt), dtype=dt)


def zeros_like(other: Vector) -> Vector:
    return zeros(len(other), dtype=other.dtype)


def ones(length: int, dtype: Optional[object] = None) -> Vector:
    dt = dtypes.default_dtype() if dtype is None else dtypes.resolve_dtype(dtype)
    return full(length, dtypes.one(dt), dtype=dt)


def ones_like(other: Vector) -> Vector:
    return ones(len(other), dtype=other.dtype)
