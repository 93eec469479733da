"""
Input validation utilities for PyVecMat.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion beyond casting numeric input to float32
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import math
from numbers import Real
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyvecmat.core.exceptions import ValidationError, DimensionError
from pyvecmat.core.precision import ELEMENT_DTYPE


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.float32]:
    """
    Validate input and copy it into a fresh float32 array.

    Accepts any array-like. Rejects inputs that result in object dtype
    (mixed types, ragged nesting) or a non-numeric dtype (strings,
    booleans, datetimes).

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray of dtype float32 that owns its memory

    Raises:
        ValidationError: If input cannot be converted to a numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if not isinstance(array, np.ndarray) and result.dtype != object and _has_bool_entry(array):
        raise ValidationError(f"{name}: boolean values are not numeric data")

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex values are not supported")

    return np.array(result, dtype=ELEMENT_DTYPE, copy=True)


def check_ndim(array: NDArray[Any], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}",
            expected=None,
            actual=tuple(array.shape),
        )


def check_1d(array: NDArray[Any], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[Any], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_size(value: Any, name: str) -> int:
    """
    Verify a dimension argument is a non-negative integer.

    Booleans are rejected even though they subclass int.

    Args:
        value: Candidate dimension (dim, rows, cols)
        name: Parameter name for error messages

    Returns:
        The value as a plain int

    Raises:
        ValidationError: If value is not a non-negative integer
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
        raise ValidationError(
            f"{name}: expected a non-negative integer, got {type(value).__name__} {value!r}"
        )
    if value < 0:
        raise ValidationError(f"{name}: must be non-negative, got {value}")
    return int(value)


def check_scalar(value: Any, name: str) -> float:
    """
    Verify a scalar operand is a real number.

    Raises:
        ValidationError: If value is not a real number (or is a bool)
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (Real, np.floating, np.integer)):
        raise ValidationError(
            f"{name}: expected a real number, got {type(value).__name__} {value!r}"
        )
    try:
        return float(value)
    except OverflowError:
        # Integers beyond the float range saturate like IEEE overflow
        return math.inf if value > 0 else -math.inf


def _has_bool_entry(array: ArrayLike) -> bool:
    """True if a (possibly nested) sequence holds any bool among its numbers."""
    try:
        entries = np.asarray(array, dtype=object)
    except (ValueError, TypeError):
        return False
    return any(isinstance(x, (bool, np.bool_)) for x in entries.ravel())
