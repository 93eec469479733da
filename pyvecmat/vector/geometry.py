"""
Geometric vector operations: dot and cross products, magnitude and
normalization.

dot() falls back to 0.0 for operands of different dimension; cross() is
defined only for two 3D vectors and returns an undefined Result
otherwise.
"""

from __future__ import annotations

import warnings

import numpy as np
from numpy.typing import NDArray

from pyvecmat.core.exceptions import NumericalWarning
from pyvecmat.core.precision import ELEMENT_DTYPE, ieee_errstate
from pyvecmat.core.result import DimensionMismatch, Result
from pyvecmat.vector.vector import Vector, check_vector


def dot(a: Vector, b: Vector) -> float:
    """Sum of element-wise products, or 0.0 if the dimensions differ."""
    check_vector(a, "a")
    check_vector(b, "b")
    if a.dim != b.dim:
        return 0.0
    with ieee_errstate():
        return float(np.dot(a.elements, b.elements))


def orthogonal(a: Vector, b: Vector) -> bool:
    """True iff the dimensions match and the dot product is exactly 0."""
    check_vector(a, "a")
    check_vector(b, "b")
    return a.dim == b.dim and dot(a, b) == 0.0


def cross(a: Vector, b: Vector) -> Result[Vector]:
    """
    3D cross product a x b.

    Parameters
    ----------
    a, b : Vector
        Both must have dimension 3.

    Returns
    -------
    Result[Vector]
        The cross product, or an undefined Result naming the offending
        dimension when either operand is not 3D.
    """
    check_vector(a, "a")
    check_vector(b, "b")
    if a.dim != 3 or b.dim != 3:
        actual = a.dim if a.dim != 3 else b.dim
        return Result.undefined(
            DimensionMismatch(operation="cross", expected=(3,), actual=(actual,))
        )

    a0, a1, a2 = a.elements
    b0, b1, b2 = b.elements
    with ieee_errstate():
        data = np.array(
            [a1 * b2 - a2 * b1, a2 * b0 - a0 * b2, a0 * b1 - a1 * b0],
            dtype=ELEMENT_DTYPE,
        )
    return Result.ok(Vector._from_owned(data), "cross")


def magnitude_squared(v: Vector) -> float:
    """
    Sum of squared elements.

    Raises:
        ValidationError: If v is not a Vector
    """
    check_vector(v, "v")
    with ieee_errstate():
        return float(np.dot(v.elements, v.elements))


def magnitude(v: Vector) -> float:
    """Euclidean length."""
    with ieee_errstate():
        return float(np.sqrt(ELEMENT_DTYPE(magnitude_squared(v))))


def _normalized_data(v: Vector) -> tuple[NDArray[np.float32], bool]:
    mag = ELEMENT_DTYPE(magnitude(v))
    with ieee_errstate():
        data = (v.elements / mag).astype(ELEMENT_DTYPE, copy=False)
    return data, bool(mag == 0.0 and v.dim > 0)


def normalize(v: Vector) -> Vector:
    """
    Unit vector in the direction of v.

    Each element is divided by the magnitude (not the squared magnitude).
    A zero vector has no direction: every element becomes NaN and a
    NumericalWarning is issued instead of raising.
    """
    data, degenerate = _normalized_data(v)
    if degenerate:
        warnings.warn(
            "normalize: vector has zero magnitude, elements are NaN",
            NumericalWarning,
            stacklevel=2,
        )
    return Vector._from_owned(data)


def normalize_inplace(v: Vector) -> None:
    """Normalize v in place; see normalize()."""
    data, degenerate = _normalized_data(v)
    if degenerate:
        warnings.warn(
            "normalize_inplace: vector has zero magnitude, elements are NaN",
            NumericalWarning,
            stacklevel=2,
        )
    v._store(data)
