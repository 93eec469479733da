"""
Exception hierarchy for PyVecMat.

All exceptions inherit from PyVecMatError to allow catching any
library-specific error.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Dimension mismatches inside the functional API are values, not
      exceptions; DimensionError is raised only when a caller asks for
      a value that does not exist (Result.unwrap, operators)
"""

from __future__ import annotations


class PyVecMatError(Exception):
    """Base exception for all PyVecMat errors."""
    pass


class ValidationError(PyVecMatError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks, e.g. a
    negative dimension, an empty literal list or a non-numeric scalar.
    """
    pass


class DimensionError(ValidationError):
    """
    Operand or literal dimensions are incompatible.

    Attributes:
        operation: Name of the operation that was attempted
        expected: Expected shape, if known
        actual: Shape that was actually supplied, if known
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        expected: tuple[int, ...] | None = None,
        actual: tuple[int, ...] | None = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.expected = expected
        self.actual = actual


class NumericalWarning(RuntimeWarning):
    """
    A computation produced a degenerate floating-point result.

    Issued (never raised) when, for example, a zero vector is normalized
    and every element becomes NaN.
    """
    pass
