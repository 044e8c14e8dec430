"""
Elementwise kernels behind the Vector operators.

All kernels work on the owned numpy arrays of the vectors involved and
keep the element type: operands are always converted to the vector's dtype
before the ufunc runs, so integer vectors wrap like their numpy dtype does
and never silently widen.
"""

import operator
from dataclasses import dataclass
from functools import reduce
from typing import Callable

import numpy as np

from numvec.errors import LengthMismatchError, UnsupportedOperationError


@dataclass(frozen=True)
class Operation:
    name: str
    symbol: str
    ufunc: np.ufunc


ADD = Operation('addition', '+', np.add)
SUB = Operation('subtraction', '-', np.subtract)
MUL = Operation('multiplication', '*', np.multiply)


def check_operands(op: Operation, left: np.ndarray, right: np.ndarray):
    """Vector-vector operands must agree on element type and length."""
    if len(left) != len(right):
        raise LengthMismatchError(op.name, len(left), len(right))
    if left.dtype != right.dtype:
        raise UnsupportedOperationError(
            f"Vector {op.name} between element types "
            f"{left.dtype.name} and {right.dtype.name}"
        )


def elementwise(op: Operation, left: np.ndarray, right: np.ndarray) -> np.ndarray:
    """left[i] op right[i] into a new array."""
    check_operands(op, left, right)
    return op.ufunc(left, right)


def broadcast(op: Operation, elements: np.ndarray, scalar, reflected: bool = False) -> np.ndarray:
    """
    Apply a scalar to every element into a new array.

    reflected=True computes scalar op element (6 - v), otherwise element op scalar.
    """
    if reflected:
        return op.ufunc(scalar, elements, dtype=elements.dtype)
    return op.ufunc(elements, scalar, dtype=elements.dtype)


def inplace(op: Operation, elements: np.ndarray, other) -> None:
    """elements op= other, writing into the existing array."""
    if isinstance(other, np.ndarray):
        check_operands(op, elements, other)
    op.ufunc(elements, other, out=elements)


def power_by_squaring(elements: np.ndarray, exp: int) -> np.ndarray:
    """
    Raise every element to a non-negative integer power by repeated squaring.

    Uses O(log exp) multiplications over the whole array. exp=0 gives ones.
    """
    result = np.ones_like(elements)
    base = elements.copy()
    while exp > 0:
        if exp & 1:
            np.multiply(result, base, out=result)
        exp >>= 1
        # skip the final squaring; it is unused and may overflow
        if exp:
            np.multiply(base, base, out=base)
    return result


def left_fold(elements: np.ndarray, initial, func: Callable = operator.add):
    """
    ((initial op e0) op e1) op ...

    Strict left-to-right order. numpy's own sum uses pairwise summation,
    which rounds floats differently.
    """
    return reduce(func, elements, initial)
