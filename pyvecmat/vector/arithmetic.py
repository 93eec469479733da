"""
Element-wise and scalar vector arithmetic.

Every operation comes in two forms:

    add(a, b) -> Result[Vector]     pure; a and b are left untouched
    add_inplace(a, b) -> bool       writes the result into a

The pure form is the primitive. The in-place form computes the pure
result and copies it into the target's buffer, so both forms share one
implementation and an in-place call that fails leaves the target intact.

Element-wise operations require equal dimensions. On mismatch the pure
form returns an undefined Result and the in-place form returns False;
neither raises. Scalar operations always succeed.

Division performs no zero check: x / 0 gives +-inf and 0 / 0 gives NaN,
following IEEE semantics.
"""

from __future__ import annotations

from typing import Callable

import numpy as np

from pyvecmat.core.precision import ELEMENT_DTYPE, all_finite, as_element, ieee_errstate
from pyvecmat.core.result import DimensionMismatch, Result
from pyvecmat.core.validation import check_scalar
from pyvecmat.vector.vector import Vector, check_vector

_Ufunc = Callable[[np.ndarray, np.ndarray], np.ndarray]


def _elementwise(operation: str, ufunc: _Ufunc, a: Vector, b: Vector) -> Result[Vector]:
    check_vector(a, "a")
    check_vector(b, "b")
    if a.dim != b.dim:
        return Result.undefined(
            DimensionMismatch(operation=operation, expected=(a.dim,), actual=(b.dim,))
        )

    with ieee_errstate():
        data = ufunc(a.elements, b.elements).astype(ELEMENT_DTYPE, copy=False)

    notes: tuple[str, ...] = ()
    if all_finite(a.elements) and all_finite(b.elements) and not all_finite(data):
        notes = (f"{operation}: result contains non-finite elements",)
    return Result.ok(Vector._from_owned(data), operation, notes)


def _scalar(ufunc: _Ufunc, v: Vector, k: float) -> Vector:
    check_vector(v, "v")
    k = as_element(check_scalar(k, "k"))
    with ieee_errstate():
        data = ufunc(v.elements, k).astype(ELEMENT_DTYPE, copy=False)
    return Vector._from_owned(data)


def _assign(target: Vector, result: Result[Vector]) -> bool:
    if result.is_undefined:
        return False
    target._store(result.value.elements)
    return True


# --- Element-wise, pure ---

def add(a: Vector, b: Vector) -> Result[Vector]:
    """
    Element-wise a + b.

    Raises:
        ValidationError: If either operand is not a Vector
    """
    return _elementwise("add", np.add, a, b)


def subtract(a: Vector, b: Vector) -> Result[Vector]:
    """Element-wise a - b; undefined Result on dimension mismatch."""
    return _elementwise("subtract", np.subtract, a, b)


def multiply(a: Vector, b: Vector) -> Result[Vector]:
    """Element-wise (Hadamard) product; undefined Result on dimension mismatch."""
    return _elementwise("multiply", np.multiply, a, b)


def divide(a: Vector, b: Vector) -> Result[Vector]:
    """
    Element-wise a / b.

    Zero divisors are not checked; the affected elements become inf or
    NaN and the Result carries a warning.
    """
    return _elementwise("divide", np.divide, a, b)


# --- Element-wise, in place ---

def add_inplace(a: Vector, b: Vector) -> bool:
    """
    a += b.

    Returns:
        True on success, False (a unchanged) if the dimensions differ

    Raises:
        ValidationError: If either operand is not a Vector
    """
    return _assign(a, add(a, b))


def subtract_inplace(a: Vector, b: Vector) -> bool:
    """a -= b; False (a unchanged) if the dimensions differ."""
    return _assign(a, subtract(a, b))


def multiply_inplace(a: Vector, b: Vector) -> bool:
    """a *= b element-wise; False (a unchanged) if the dimensions differ."""
    return _assign(a, multiply(a, b))


def divide_inplace(a: Vector, b: Vector) -> bool:
    """a /= b element-wise; False (a unchanged) if the dimensions differ."""
    return _assign(a, divide(a, b))


# --- Scalar, pure ---

def scalar_add(v: Vector, k: float) -> Vector:
    """
    New vector with k added to every element.

    Args:
        v: Operand, left untouched
        k: Real scalar; integers beyond the float range become +-inf

    Raises:
        ValidationError: If v is not a Vector or k is not a real number
    """
    return _scalar(np.add, v, k)


def scalar_subtract(v: Vector, k: float) -> Vector:
    """New vector with k subtracted from every element."""
    return _scalar(np.subtract, v, k)


def scalar_multiply(v: Vector, k: float) -> Vector:
    """New vector with every element multiplied by k."""
    return _scalar(np.multiply, v, k)


def scalar_divide(v: Vector, k: float) -> Vector:
    """Divide every element by k; k == 0 yields inf/NaN elements."""
    return _scalar(np.divide, v, k)


def power(v: Vector, k: float) -> Vector:
    """
    Raise every element to the exponent k.

    Negative elements with a non-integer exponent become NaN.
    """
    return _scalar(np.power, v, k)


# --- Scalar, in place ---
# Same validation as the pure forms: ValidationError for a non-Vector
# operand or a non-real scalar.

def scalar_add_inplace(v: Vector, k: float) -> None:
    """v += k."""
    v._store(scalar_add(v, k).elements)


def scalar_subtract_inplace(v: Vector, k: float) -> None:
    """v -= k."""
    v._store(scalar_subtract(v, k).elements)


def scalar_multiply_inplace(v: Vector, k: float) -> None:
    """v *= k."""
    v._store(scalar_multiply(v, k).elements)


def scalar_divide_inplace(v: Vector, k: float) -> None:
    """v /= k; k == 0 yields inf/NaN elements."""
    v._store(scalar_divide(v, k).elements)


def power_inplace(v: Vector, k: float) -> None:
    """Raise every element of v to the exponent k, in place."""
    v._store(power(v, k).elements)
