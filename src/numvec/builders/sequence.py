"""
Sequence builders: range and linspace.

Both accumulate by repeated addition of the step, starting from start,
in the vector's element type. Floating-point drift therefore builds up
exactly as repeated addition does: range(0.0, 1.0, 0.1) has 11
elements, the last being 0.9999999999999999.

linspace corrects only its last element, which is always exactly stop.
"""

import logging

import numpy as np

from numvec import dtypes
from numvec.builders.fill import check_length
from numvec.dtypes import Capability
from numvec.errors import InvalidIntervalError, InvalidParameterError
from numvec.vector import Vector

logger = logging.getLogger(__name__)


def range(start, stop, step=1, dtype=None) -> Vector:
    """
    Values start, start+step, ... strictly below stop (half-open [start, stop)).

    Examples:
        range(0, 5)              # Vector([0, 1, 2, 3, 4])
        range(1.0, 3.0, 0.5)     # Vector([1.0, 1.5, 2.0, 2.5])

    Raises:
        InvalidIntervalError: start >= stop.
        InvalidParameterError: step <= 0, or step too small to change
            the accumulated value.
    """
    dt = dtypes.infer_dtype(start, stop, step) if dtype is None else dtypes.resolve_dtype(dtype)
    start_, stop_, step_ = (dtypes.coerce_scalar(v, dt) for v in (start, stop, step))

    if start_ >= stop_:
        raise InvalidIntervalError(f"Invalid range interval start={start} stop={stop}")
    if step_ <= 0:
        raise InvalidParameterError(f"Range step must be positive, got {step}")

    elements = []
    current = start_
    with np.errstate(over='raise'):
        while current < stop_:
            elements.append(current)
            try:
                following = current + step_
            except FloatingPointError:
                # next value is past the element type's range, so past stop
                break
            if following < current:
                break
            if following == current:
                raise InvalidParameterError(
                    f"Range step {step} does not advance {current} in {dt.name}"
                )
            current = following

    logger.debug(f"range: start={start} stop={stop} step={step} -> len={len(elements)} dtype={dt.name}")
    return Vector._wrap(np.array(elements, dtype=dt))


def linspace(length: int, start, stop, dtype=None) -> Vector:
    """
    `length` evenly spaced values over the closed interval [start, stop].

    Floating element types only; integer arguments produce float64.
    length=0 gives an empty vector and length=1 gives [start].

    Example:
        linspace(5, 1.0, 10.0)   # Vector([1.0, 3.25, 5.5, 7.75, 10.0])

    Raises:
        InvalidIntervalError: start >= stop.
    """
    length = check_length(length)
    if dtype is None:
        dt = dtypes.infer_dtype(start, stop)
        if dtypes.is_integer(dt):
            dt = np.dtype('float64')
    else:
        dt = dtypes.resolve_dtype(dtype)
    dtypes.require(dt, Capability.FLOATING, 'linspace')
    start_, stop_ = dtypes.coerce_scalar(start, dt), dtypes.coerce_scalar(stop, dt)

    if start_ >= stop_:
        raise InvalidIntervalError(f"Invalid linspace interval start={start} stop={stop}")
    if length < 2:
        return Vector._wrap(np.array([start_][:length], dtype=dt))

    step = (stop_ - start_) / dt.type(length - 1)
    elements = []
    current = start_
    while current < stop_ and len(elements) < length:
        elements.append(current)
        current = current + step

    # Rounding decides whether accumulation reached length or stopped one short
    if len(elements) == length:
        elements[-1] = stop_
    else:
        elements.append(stop_)

    logger.debug(f"linspace: len={length} start={start} stop={stop} dtype={dt.name}")
    return Vector._wrap(np.array(elements, dtype=dt))
