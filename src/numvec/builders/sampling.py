"""
Random builders: uniform and normal samples.

Each call without `rng` draws from a fresh, unseeded
numpy.random.Generator, so results are not reproducible across calls.
Pass a Generator (np.random.default_rng(seed)) to make them so.
"""

import logging
import warnings
from typing import Optional

import numpy as np

from numvec import config, dtypes
from numvec.builders.fill import check_length
from numvec.dtypes import Capability
from numvec.errors import InvalidIntervalError, InvalidParameterError
from numvec.vector import Vector

logger = logging.getLogger(__name__)


def _generator(rng: Optional[np.random.Generator]) -> np.random.Generator:
    return np.random.default_rng() if rng is None else rng


def _reject_or_warn(error: Exception):
    if config.get('random.validate_parameters', True):
        raise error
    warnings.warn(str(error), RuntimeWarning, stacklevel=3)


def uniform(
    length: int,
    low,
    high,
    dtype=None,
    rng: Optional[np.random.Generator] = None,
) -> Vector:
    """
    `length` independent samples from the uniform distribution over [low, high).

    Integer element types sample discretely, floating ones continuously.
    low is inclusive, high exclusive for both.

    With random.validate_parameters off, low >= high only warns; a float
    interval with low == high then yields `length` copies of low, and every
    case numpy refuses (low > high, or low == high for integers) still
    raises.

    Raises:
        InvalidIntervalError: low >= high (validation on), or an interval
            numpy refuses (validation off).
    """
    length = check_length(length)
    dt = dtypes.infer_dtype(low, high) if dtype is None else dtypes.resolve_dtype(dtype)
    dtypes.require(dt, Capability.UNIFORM, 'uniform')
    low_, high_ = dtypes.coerce_scalar(low, dt), dtypes.coerce_scalar(high, dt)

    if not low_ < high_:
        _reject_or_warn(InvalidIntervalError(f"Invalid uniform interval low={low} high={high}"))

    gen = _generator(rng)
    try:
        if dtypes.is_integer(dt):
            elements = gen.integers(low_, high_, size=length, dtype=dt, endpoint=False)
        else:
            elements = gen.uniform(float(low_), float(high_), size=length).astype(dt)
    except ValueError as exc:
        # permissive mode: numpy still refuses low > high (and low == high for integers)
        raise InvalidIntervalError(f"Invalid uniform interval low={low} high={high}: {exc}") from exc
    if dtypes.is_floating(dt) and low_ < high_:
        # float rounding (and float32 narrowing) can land exactly on high
        elements[elements >= high_] = np.nextafter(high_, low_)

    logger.debug(f"uniform: len={length} low={low} high={high} dtype={dt.name}")
    return Vector._wrap(elements)


def normal(
    length: int,
    mean: float,
    std_dev: float,
    dtype='float64',
    rng: Optional[np.random.Generator] = None,
) -> Vector:
    """
    `length` independent samples from N(mean, std_dev**2).

    float64 only; any other element type raises UnsupportedOperationError.

    Raises:
        InvalidParameterError: std_dev < 0. With random.validate_parameters
            off a RuntimeWarning is emitted first.
    """
    length = check_length(length)
    dt = dtypes.require(dtype, Capability.NORMAL, 'normal')
    mean_, std_ = dtypes.coerce_scalar(mean, dt), dtypes.coerce_scalar(std_dev, dt)

    if std_ < 0:
        _reject_or_warn(InvalidParameterError(f"Normal std_dev must be non-negative, got {std_dev}"))

    try:
        elements = _generator(rng).normal(float(mean_), float(std_), size=length)
    except ValueError as exc:
        raise InvalidParameterError(f"Invalid normal std_dev={std_dev}: {exc}") from exc

    logger.debug(f"normal: len={length} mean={mean} std_dev={std_dev}")
    return Vector._wrap(elements.astype(dt, copy=False))
