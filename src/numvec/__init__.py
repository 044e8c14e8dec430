"""
numvec: Generic Numeric Vectors
===============================

One container, many element types:

    numvec.Vector([3, 1, 4, 1])             # int64
    numvec.zeros(5, 'float32')
    numvec.range(1.0, 3.0, 0.5)             # [1.0, 1.5, 2.0, 2.5]
    numvec.linspace(5, 1.0, 10.0)           # [1.0, 3.25, 5.5, 7.75, 10.0]
    numvec.uniform(10, 0, 6)                # integer dice
    numvec.normal(10, 0.0, 1.0)
    numvec.two_dim(2, 2).ones()             # nested vectors

Element types are numpy dtypes (int8..int64, uint8..uint64, float32,
float64). Operators are elementwise with scalar broadcasting from either
side; see numvec.vector. All failures raise a numvec.errors.VectorError.
"""

__version__ = '0.1.0'

from numvec.vector import Vector
from numvec.slicing import ClosedRange, closed
from numvec.dtypes import Capability
from numvec.errors import (
    VectorError,
    InvalidIntervalError,
    LengthMismatchError,
    OutOfBoundsError,
    UnsupportedOperationError,
    InvalidParameterError,
    EmptyVectorError,
)
from numvec.builders import (
    full,
    full_like,
    zeros,
    zeros_like,
    ones,
    ones_like,
    range,
    linspace,
    uniform,
    normal,
    Shape,
    with_shape,
    one_dim,
    two_dim,
    three_dim,
    four_dim,
    shape_of,
)
from numvec import config

__all__ = [
    'Vector', 'ClosedRange', 'closed', 'Capability',
    'VectorError', 'InvalidIntervalError', 'LengthMismatchError', 'OutOfBoundsError',
    'UnsupportedOperationError', 'InvalidParameterError', 'EmptyVectorError',
    'full', 'full_like', 'zeros', 'zeros_like', 'ones', 'ones_like',
    'range', 'linspace', 'uniform', 'normal',
    'Shape', 'with_shape', 'one_dim', 'two_dim', 'three_dim', 'four_dim', 'shape_of',
    'config',
]
