"""
Literal-count helper shared by Vector and Matrix construction.

Both value types can be built from an inline list of literal numbers:
``vector(1, 2, 3)`` or ``matrix(2, 2, 1, 0, 0, 1)``. The helper counts the
literals and turns them into owned float32 storage.

An empty literal list is rejected rather than producing a zero-length
value; a zero-length Vector is still available via Vector.zero(0).
"""

from __future__ import annotations

from typing import Sequence

import numpy as np
from numpy.typing import NDArray

from pyvecmat.core.exceptions import DimensionError, ValidationError
from pyvecmat.core.precision import ELEMENT_DTYPE, ieee_errstate
from pyvecmat.core.validation import check_scalar


def count_literals(*values: float) -> int:
    """Number of literal values supplied."""
    return len(values)


def literal_array(
    values: Sequence[float],
    name: str,
    expected: int | None = None,
) -> NDArray[np.float32]:
    """
    Validate a flat literal sequence and copy it into float32 storage.

    Args:
        values: Literal numbers, in order
        name: Parameter name for error messages
        expected: Exact number of literals required, if any

    Returns:
        1D float32 array of length count_literals(*values)

    Raises:
        ValidationError: If no literals are given or any is not a real
            number (booleans, strings and nested sequences included)
        DimensionError: If the count differs from expected
    """
    count = count_literals(*values)
    if count == 0:
        raise ValidationError(f"{name}: at least one literal value is required")

    if expected is not None and count != expected:
        raise DimensionError(
            f"{name}: expected {expected} literal values, got {count}",
            expected=(expected,),
            actual=(count,),
        )

    scalars = [check_scalar(value, name) for value in values]
    with ieee_errstate():
        return np.array(scalars, dtype=ELEMENT_DTYPE)
