"""
Test: Shaped (nested) builders

Run:
    python -m pytest tests/test_shaped.py -v
"""

import numpy as np
import pytest

import numvec
from numvec import Vector
from numvec.errors import InvalidParameterError


class TestShapedBuilders:

    def test_one_dim_is_vector(self):
        v = numvec.one_dim(5).zeros()
        assert isinstance(v, Vector)
        assert v == [0.0, 0.0, 0.0, 0.0, 0.0]

    def test_two_dim(self):
        m = numvec.two_dim(2, 2).ones()
        assert m == [[1.0, 1.0], [1.0, 1.0]]

    def test_three_dim_full(self):
        t = numvec.three_dim(1, 1, 2).full(5.0)
        assert t == [[[5.0, 5.0]]]

    def test_four_dim(self):
        t = numvec.four_dim(1, 1, 1, 2).ones('int8')
        assert t == [[[[1, 1]]]]
        assert t[0][0][0].dtype == np.int8

    def test_with_shape(self):
        nested = numvec.with_shape((2, 3, 4)).zeros('uint32')
        assert numvec.shape_of(nested) == (2, 3, 4)
        assert all(leaf.dtype == np.uint32 for row in nested for leaf in row)

    def test_full_infers_dtype_once(self):
        m = numvec.two_dim(2, 3).full(7)
        assert all(row.dtype == np.int64 for row in m)
        assert all(row == [7, 7, 7] for row in m)

    def test_rows_do_not_alias(self):
        m = numvec.two_dim(3, 2).zeros('int32')
        m[0] += 1
        assert m[0] == [1, 1]
        assert m[1] == [0, 0]
        assert m[2] == [0, 0]

    def test_zero_extent(self):
        assert numvec.two_dim(0, 3).ones() == []
        assert numvec.two_dim(2, 0).ones() == [[], []]

    def test_invalid_dims(self):
        with pytest.raises(InvalidParameterError):
            numvec.two_dim(2, -1)
        with pytest.raises(InvalidParameterError):
            numvec.with_shape(())
        with pytest.raises(InvalidParameterError):
            numvec.with_shape((2.5,))

    def test_shape_repr(self):
        assert numvec.three_dim(1, 2, 3).ndim == 3
        assert repr(numvec.two_dim(4, 5)) == 'Shape(4, 5)'


class TestShapeOf:

    def test_vector(self):
        assert numvec.shape_of(Vector([1, 2, 3])) == (3,)

    def test_ragged(self):
        with pytest.raises(InvalidParameterError):
            numvec.shape_of([Vector([1, 2]), Vector([1])])

    def test_not_nested(self):
        with pytest.raises(InvalidParameterError):
            numvec.shape_of([1, 2])
