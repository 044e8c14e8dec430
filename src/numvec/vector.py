"""
Numeric Vector
==============
Vector is an owned, ordered, fixed-length sequence of one numeric
element type, backed by a one-dimensional numpy array.

    from numvec import Vector
    x = Vector([3, 1, 4, 1])
    x + 6                 # Vector([9, 7, 10, 7])
    6 - x                 # Vector([3, 5, 2, 5])
    x * Vector([1, 2, 3, 4])
    x.power(2)            # Vector([9, 1, 16, 1])
    x.slice(slice(1, 3))  # Vector([1, 4])

Operators never change the length of a vector. Binary operators return a
new vector; +=, -= and *= write into the left operand's own storage.
Every vector owns its storage: construction, slicing and clone() copy.
"""

import numbers
from typing import Callable, Iterator, List

import numpy as np

from numvec import dtypes, ops, slicing
from numvec.dtypes import Capability
from numvec.errors import (
    EmptyVectorError,
    InvalidParameterError,
    OutOfBoundsError,
    UnsupportedOperationError,
)


class Vector:
    """
    Numeric vector.

    Args:
        elements: Any finite iterable of real numbers, a 1-D numpy array
            or another Vector. The values are copied.
        dtype: Element type. Inferred from the values when omitted
            (int64 for Python ints, float64 for Python floats, the dtype
            of numpy inputs); an empty literal uses config dtype.default.
    """

    __slots__ = ('_elements',)

    # numpy defers binary operators and comparisons to Vector
    __array_ufunc__ = None
    __hash__ = None

    def __init__(self, elements=(), dtype=None):
        if isinstance(elements, Vector):
            elements = elements._elements
        if isinstance(elements, np.ndarray):
            self._elements = self._from_ndarray(elements, dtype)
        else:
            self._elements = self._from_values(list(elements), dtype)

    @staticmethod
    def _from_ndarray(array: np.ndarray, dtype) -> np.ndarray:
        if array.ndim != 1:
            raise InvalidParameterError(
                f"Vector elements must be one-dimensional, got shape {array.shape}"
            )
        source = dtypes.resolve_dtype(array.dtype)
        dt = source if dtype is None else dtypes.resolve_dtype(dtype)
        if dtypes.is_integer(dt) and dtypes.is_floating(source):
            raise UnsupportedOperationError(
                f"Cannot convert {source.name} elements to {dt.name}"
            )
        return np.array(array, dtype=dt)

    @staticmethod
    def _from_values(values: list, dtype) -> np.ndarray:
        for value in values:
            if isinstance(value, (list, tuple, np.ndarray, Vector)):
                raise InvalidParameterError("Vector elements must be one-dimensional")
        if dtype is not None:
            dt = dtypes.resolve_dtype(dtype)
        elif values:
            dt = dtypes.infer_dtype(*values)
        else:
            dt = dtypes.default_dtype()
        return np.array([dtypes.coerce_scalar(v, dt) for v in values], dtype=dt)

    @classmethod
    def _wrap(cls, array: np.ndarray) -> 'Vector':
        """Adopt a freshly allocated 1-D array without copying it."""
        vector = cls.__new__(cls)
        vector._elements = array
        return vector

    # =================================================================
    # Container
    # =================================================================

    @property
    def dtype(self) -> np.dtype:
        return self._elements.dtype

    def __len__(self) -> int:
        return len(self._elements)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return self.slice(index)
        if isinstance(index, bool) or not isinstance(index, numbers.Integral):
            raise UnsupportedOperationError(
                f"Vector indices must be integers or slices, not {type(index).__name__}"
            )
        if not 0 <= index < len(self._elements):
            raise OutOfBoundsError(
                f"Index {index} out of bounds for vector of length {len(self._elements)}"
            )
        return self._elements[index]

    def __iter__(self) -> Iterator:
        # Snapshot: later in-place operators don't leak into the iterator
        return iter(self._elements.copy())

    def __repr__(self) -> str:
        return f"Vector([{', '.join(str(x) for x in self._elements)}])"

    def __array__(self, dtype=None, copy=None):
        if dtype is not None:
            return self._elements.astype(dtype)
        return self._elements.copy()

    def clone(self) -> 'Vector':
        """Deep copy with independent storage."""
        return Vector._wrap(self._elements.copy())

    def __copy__(self) -> 'Vector':
        return self.clone()

    def __deepcopy__(self, memo) -> 'Vector':
        return self.clone()

    def to_list(self) -> list:
        """Elements as Python scalars."""
        return self._elements.tolist()

    def to_numpy(self) -> np.ndarray:
        """Elements as a new numpy array."""
        return self._elements.copy()

    def __eq__(self, other):
        if isinstance(other, Vector):
            right = other._elements
        elif isinstance(other, (list, tuple, np.ndarray)):
            try:
                right = np.asarray(other)
            except ValueError:
                # ragged nesting
                return False
            if right.ndim != 1 or (len(right) and right.dtype.kind not in 'iuf'):
                return False
        else:
            return NotImplemented
        return bool(np.array_equal(self._elements, right))

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    # =================================================================
    # Slicing
    # =================================================================

    def slice(self, index) -> 'Vector':
        """
        Copy of a contiguous sub-range.

        index is a slice, a step-1 range, or numvec.closed(start, stop)
        for inclusive bounds. See numvec.slicing for all forms.
        """
        begin, end = slicing.resolve(index, len(self._elements))
        return Vector._wrap(self._elements[begin:end].copy())

    # =================================================================
    # Arithmetic
    # =================================================================

    def _scalar(self, value):
        if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
            return NotImplemented
        return dtypes.coerce_scalar(value, self.dtype)

    def _binary(self, other, op: ops.Operation, reflected: bool = False):
        if isinstance(other, Vector):
            return Vector._wrap(ops.elementwise(op, self._elements, other._elements))
        scalar = self._scalar(other)
        if scalar is NotImplemented:
            return NotImplemented
        return Vector._wrap(ops.broadcast(op, self._elements, scalar, reflected=reflected))

    def _inplace(self, other, op: ops.Operation):
        if isinstance(other, Vector):
            ops.inplace(op, self._elements, other._elements)
            return self
        scalar = self._scalar(other)
        if scalar is NotImplemented:
            return NotImplemented
        ops.inplace(op, self._elements, scalar)
        return self

    def __add__(self, other):
        return self._binary(other, ops.ADD)

    def __radd__(self, other):
        return self._binary(other, ops.ADD, reflected=True)

    def __iadd__(self, other):
        return self._inplace(other, ops.ADD)

    def __sub__(self, other):
        return self._binary(other, ops.SUB)

    def __rsub__(self, other):
        return self._binary(other, ops.SUB, reflected=True)

    def __isub__(self, other):
        return self._inplace(other, ops.SUB)

    def __mul__(self, other):
        return self._binary(other, ops.MUL)

    def __rmul__(self, other):
        return self._binary(other, ops.MUL, reflected=True)

    def __imul__(self, other):
        return self._inplace(other, ops.MUL)

    def power(self, exp: int) -> 'Vector':
        """
        Raise each element to the power of exp, using exponentiation by squaring.

        exp must be a non-negative integer: negative powers have no
        integer result and are rejected for every element type.
        """
        if isinstance(exp, bool) or not isinstance(exp, numbers.Integral):
            raise InvalidParameterError(f"Exponent must be an integer, got {exp!r}")
        if exp < 0:
            raise InvalidParameterError(f"Exponent must be non-negative, got {exp}")
        return Vector._wrap(ops.power_by_squaring(self._elements, int(exp)))

    # =================================================================
    # Filter / reductions
    # =================================================================

    def filter(self, predicate: Callable) -> 'Vector':
        """Elements for which predicate(element) is true, in order."""
        kept: List = [x for x in self._elements if predicate(x)]
        return Vector._wrap(np.array(kept, dtype=self.dtype))

    def sum(self):
        """Left fold with +, starting from 0. Empty vector gives 0."""
        return ops.left_fold(self._elements, dtypes.zero(self.dtype))

    def max(self):
        """
        Largest element.

        Only for integer vectors, unless config reductions.float_extrema
        is enabled.
        """
        dtypes.require(self.dtype, Capability.ORDERED, 'max')
        if not len(self._elements):
            raise EmptyVectorError("max of empty vector")
        return self._elements.max()

    def min(self):
        """Smallest element. Same element type rules as max()."""
        dtypes.require(self.dtype, Capability.ORDERED, 'min')
        if not len(self._elements):
            raise EmptyVectorError("min of empty vector")
        return self._elements.min()
