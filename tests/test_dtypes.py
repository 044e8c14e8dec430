"""
Test: Element type capabilities

Run:
    python -m pytest tests/test_dtypes.py -v
"""

import numpy as np
import pytest

from numvec import config, dtypes
from numvec.dtypes import Capability
from numvec.errors import InvalidParameterError, UnsupportedOperationError


class TestResolve:

    @pytest.mark.parametrize('value', ['int32', np.int32, np.dtype('int32')])
    def test_forms(self, value):
        assert dtypes.resolve_dtype(value) == np.dtype('int32')

    def test_uintp(self):
        assert dtypes.resolve_dtype('uintp') in dtypes.INTEGER_DTYPES

    @pytest.mark.parametrize('value', ['bool', 'float16', 'complex64', 'object', 'not-a-type', None])
    def test_unsupported(self, value):
        with pytest.raises(UnsupportedOperationError):
            dtypes.resolve_dtype(value)


class TestInfer:

    def test_python_scalars(self):
        assert dtypes.infer_dtype(1, 2) == np.int64
        assert dtypes.infer_dtype(1, 2.5) == np.float64

    def test_numpy_scalars_are_strong(self):
        assert dtypes.infer_dtype(np.float32(1), 0.5) == np.float32
        assert dtypes.infer_dtype(np.int8(1), 3) == np.int8
        assert dtypes.infer_dtype(np.int8(1), np.int32(3)) == np.int32

    def test_python_float_lifts_integer(self):
        assert dtypes.infer_dtype(np.int16(1), 0.5) == np.float64

    def test_rejects_non_numeric(self):
        with pytest.raises(UnsupportedOperationError):
            dtypes.infer_dtype(True)
        with pytest.raises(UnsupportedOperationError):
            dtypes.infer_dtype('1')
        with pytest.raises(UnsupportedOperationError):
            dtypes.infer_dtype(1j)


class TestCapabilities:

    def test_integers(self):
        caps = dtypes.capabilities('int32')
        assert Capability.ORDERED in caps
        assert Capability.FLOATING not in caps
        assert Capability.NORMAL not in caps

    def test_floats(self):
        assert Capability.NORMAL in dtypes.capabilities('float64')
        assert Capability.NORMAL not in dtypes.capabilities('float32')
        assert Capability.ORDERED not in dtypes.capabilities('float64')

    def test_every_type_is_a_ring(self):
        for dt in dtypes.SUPPORTED_DTYPES:
            assert dtypes.has_capability(dt, Capability.RING)
            assert dtypes.has_capability(dt, Capability.UNIFORM)

    def test_float_extrema_option(self):
        with config.option_context(reductions__float_extrema=True):
            assert dtypes.has_capability('float32', Capability.ORDERED)

    def test_require(self):
        assert dtypes.require('float64', Capability.NORMAL, 'normal') == np.float64
        with pytest.raises(UnsupportedOperationError, match='normal'):
            dtypes.require('int64', Capability.NORMAL, 'normal')


class TestScalars:

    def test_identities(self):
        assert dtypes.zero('uint8') == 0
        assert dtypes.one('float32') == 1.0
        assert type(dtypes.one('int16')) is np.int16

    def test_coerce(self):
        assert type(dtypes.coerce_scalar(3, 'float32')) is np.float32
        with pytest.raises(UnsupportedOperationError):
            dtypes.coerce_scalar(0.5, 'int64')
        with pytest.raises(UnsupportedOperationError):
            dtypes.coerce_scalar(np.float32(2.0), 'uint8')

    def test_coerce_range(self):
        assert dtypes.coerce_scalar(255, 'uint8') == 255
        assert dtypes.coerce_scalar(-128, 'int8') == -128
        with pytest.raises(InvalidParameterError):
            dtypes.coerce_scalar(256, 'uint8')
        with pytest.raises(InvalidParameterError):
            dtypes.coerce_scalar(np.int64(-1), 'uint64')
        with pytest.raises(InvalidParameterError):
            dtypes.coerce_scalar(10 ** 400, 'float64')
