"""
Vector builders.

- fill:     full, full_like, zeros, zeros_like, ones, ones_like
- sequence: range, linspace
- sampling: uniform, normal
- shaped:   one_dim, two_dim, three_dim, four_dim, with_shape
"""

from numvec.builders.fill import full, full_like, zeros, zeros_like, ones, ones_like
from numvec.builders.sequence import range, linspace
from numvec.builders.sampling import uniform, normal
from numvec.builders.shaped import (
    Shape,
    with_shape,
    one_dim,
    two_dim,
    three_dim,
    four_dim,
    shape_of,
)

__all__ = [
    'full', 'full_like', 'zeros', 'zeros_like', 'ones', 'ones_like',
    'range', 'linspace',
    'uniform', 'normal',
    'Shape', 'with_shape', 'one_dim', 'two_dim', 'three_dim', 'four_dim', 'shape_of',
]
