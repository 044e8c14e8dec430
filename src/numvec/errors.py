"""
Error taxonomy for numvec.

Every failure is raised at the point it is detected and surfaces to the
caller unchanged. Each error also derives from the closest builtin, so
``except ValueError`` keeps working for callers who don't know about numvec.
"""


class VectorError(Exception):
    """Base class for all numvec errors."""


class InvalidIntervalError(VectorError, ValueError):
    """start >= stop given to range, linspace or uniform."""


class LengthMismatchError(VectorError, ValueError):
    """Vector-vector operator invoked on operands of differing length."""

    def __init__(self, operation: str, left: int, right: int):
        self.operation = operation
        self.left = left
        self.right = right
        super().__init__(
            f"Vector {operation} with invalid length: {left} != {right}"
        )


class OutOfBoundsError(VectorError, IndexError):
    """Index or slice bounds outside the vector."""


class UnsupportedOperationError(VectorError, TypeError):
    """Operation not available for the vector's element type."""


class InvalidParameterError(VectorError, ValueError):
    """Argument outside the domain an operation accepts."""


class EmptyVectorError(VectorError, ValueError):
    """Reduction with no identity called on an empty vector."""
