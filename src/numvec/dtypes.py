"""
Element Types
=============
The capability contract every numvec element type satisfies.

Element types are numpy scalar dtypes. Every supported type is a numeric
ring (+ - *, with 0 and 1) and uniform-samplable. Ordering for max/min,
floating arithmetic for linspace and normal sampling are narrower
capabilities, checked with require() before the operation runs.
"""

import numbers
from enum import Enum, auto
from typing import FrozenSet

import numpy as np

from numvec import config
from numvec.errors import InvalidParameterError, UnsupportedOperationError


class Capability(Enum):
    """Capabilities an element type may provide."""
    RING = auto()        # + - *, additive and multiplicative identity
    ORDERED = auto()     # max / min
    FLOATING = auto()    # linspace
    UNIFORM = auto()     # uniform sampling
    NORMAL = auto()      # gaussian sampling


INTEGER_DTYPES = tuple(np.dtype(name) for name in (
    'int8', 'int16', 'int32', 'int64',
    'uint8', 'uint16', 'uint32', 'uint64',
))
FLOAT_DTYPES = (np.dtype('float32'), np.dtype('float64'))
SUPPORTED_DTYPES = INTEGER_DTYPES + FLOAT_DTYPES


def resolve_dtype(dtype) -> np.dtype:
    """Normalize a dtype-like ('int32', np.int32, np.dtype) to a supported np.dtype."""
    if dtype is None:
        raise UnsupportedOperationError("Element type must be given")
    try:
        dt = np.dtype(dtype)
    except TypeError:
        raise UnsupportedOperationError(f"Unknown element type: {dtype!r}")
    if dt not in SUPPORTED_DTYPES:
        raise UnsupportedOperationError(
            f"Unsupported element type: {dt.name}. "
            f"Supported: {[d.name for d in SUPPORTED_DTYPES]}"
        )
    return dt


def default_dtype() -> np.dtype:
    return resolve_dtype(config.get('dtype.default', 'float64'))


def is_integer(dtype) -> bool:
    return np.dtype(dtype).kind in 'iu'


def is_floating(dtype) -> bool:
    return np.dtype(dtype).kind == 'f'


def capabilities(dtype) -> FrozenSet[Capability]:
    """Capability set of an element type under the current config."""
    dt = resolve_dtype(dtype)
    caps = {Capability.RING, Capability.UNIFORM}
    if is_integer(dt):
        caps.add(Capability.ORDERED)
    else:
        caps.add(Capability.FLOATING)
        if config.get('reductions.float_extrema', False):
            caps.add(Capability.ORDERED)
        if dt == np.dtype('float64'):
            caps.add(Capability.NORMAL)
    return frozenset(caps)


def has_capability(dtype, capability: Capability) -> bool:
    return capability in capabilities(dtype)


def require(dtype, capability: Capability, operation: str) -> np.dtype:
    """Return the resolved dtype, or raise if it lacks the capability."""
    dt = resolve_dtype(dtype)
    if capability not in capabilities(dt):
        raise UnsupportedOperationError(
            f"{operation} is not supported for element type {dt.name}"
        )
    return dt


def _check_scalar(value):
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
        raise UnsupportedOperationError(
            f"Not a real numeric scalar: {value!r} ({type(value).__name__})"
        )


def infer_dtype(*values) -> np.dtype:
    """
    Element type for a set of scalar arguments.

    numpy scalars contribute their own dtype; Python ints and floats are
    weak and only decide between int64 and float64 when nothing stronger
    is present. A Python float never promotes a numpy float32 to float64,
    but does turn an integer result into float64.
    """
    for value in values:
        _check_scalar(value)

    typed = [value.dtype for value in values if isinstance(value, np.generic)]
    has_float = any(isinstance(value, float) for value in values)

    if typed:
        dt = np.result_type(*typed)
        if has_float and dt.kind in 'iu':
            dt = np.dtype('float64')
    else:
        dt = np.dtype('float64') if has_float else np.dtype('int64')
    return resolve_dtype(dt)


def coerce_scalar(value, dtype):
    """Convert a scalar to the element type. Floats never truncate into integers."""
    _check_scalar(value)
    dt = resolve_dtype(dtype)
    if is_integer(dt) and isinstance(value, (float, np.floating)):
        raise UnsupportedOperationError(
            f"Cannot mix floating scalar {value!r} into {dt.name} vector"
        )
    if is_integer(dt):
        info = np.iinfo(dt)
        if not info.min <= int(value) <= info.max:
            raise InvalidParameterError(
                f"Value {value!r} out of range for {dt.name} [{info.min}, {info.max}]"
            )
    try:
        return dt.type(value)
    except OverflowError:
        raise InvalidParameterError(f"Value {value!r} out of range for {dt.name}")


def zero(dtype):
    """Additive identity of the element type."""
    return resolve_dtype(dtype).type(0)


def one(dtype):
    """Multiplicative identity of the element type."""
    return resolve_dtype(dtype).type(1)
