"""
Slice bound resolution.

Forms accepted by Vector.slice, for x = Vector([3, 1, 2, 3]):

    x.slice(slice(0, 1))      # x[0:1]  bounded            -> [3]
    x.slice(slice(None, 2))   # x[:2]   open start         -> [3, 1]
    x.slice(slice(2, None))   # x[2:]   open end           -> [2, 3]
    x.slice(slice(None))      # x[:]    fully open         -> [3, 1, 2, 3]
    x.slice(closed(0, 1))     #         inclusive bounded  -> [3, 1]
    x.slice(closed(None, 2))  #         inclusive open start -> [3, 1, 2]
    x.slice(range(1, 3))      #         same as x[1:3]

Bounds are never wrapped or clamped: 0 <= begin <= end <= len is required.
"""

import numbers
from dataclasses import dataclass
from typing import Optional, Tuple

from numvec.errors import OutOfBoundsError, UnsupportedOperationError


@dataclass(frozen=True)
class ClosedRange:
    """Inclusive range [start, stop]. start=None means 0."""
    start: Optional[int]
    stop: int


def closed(start: Optional[int], stop: int) -> ClosedRange:
    return ClosedRange(start, stop)


def _bound(value, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise UnsupportedOperationError(f"Slice {name} must be an integer, got {value!r}")
    return int(value)


def resolve(index, length: int) -> Tuple[int, int]:
    """
    Resolve a slice form to half-open (begin, end) bounds within length.

    Raises OutOfBoundsError unless 0 <= begin <= end <= length.
    """
    if isinstance(index, ClosedRange):
        begin = 0 if index.start is None else _bound(index.start, 'start')
        stop = _bound(index.stop, 'stop')
        if begin < 0 or stop < 0:
            raise OutOfBoundsError(
                f"Closed slice [{begin}, {stop}] out of bounds for vector of length {length}"
            )
        end = stop + 1
    elif isinstance(index, slice):
        if index.step not in (None, 1):
            raise UnsupportedOperationError(f"Slice step must be 1, got {index.step!r}")
        begin = 0 if index.start is None else _bound(index.start, 'start')
        end = length if index.stop is None else _bound(index.stop, 'stop')
    elif isinstance(index, range):
        if index.step != 1:
            raise UnsupportedOperationError(f"Slice step must be 1, got {index.step}")
        begin, end = index.start, index.stop
    else:
        raise UnsupportedOperationError(
            f"Unsupported slice form: {type(index).__name__}"
        )

    if begin < 0 or end > length or begin > end:
        raise OutOfBoundsError(
            f"Slice [{begin}, {end}) out of bounds for vector of length {length}"
        )
    return begin, end
