"""
Vector: a fixed-length sequence of single-precision floats.

Every Vector owns its element buffer exclusively. All constructors copy
their input, copy() returns an independent buffer, and the elements
property hands out a read-only view, so two distinct Vector values never
alias each other's storage.

Construction:
    vector(1.0, 2.0, 3.0)           from inline literals
    Vector.from_literals(1.0, 2.0)  same, as a classmethod
    Vector.from_array(arr)          from any 1D numeric array-like
    Vector.filled(dim, value)
    Vector.zero(dim)
    Vector.uninitialized(dim)
"""

from __future__ import annotations

from numbers import Real
from typing import Any, Iterator, TextIO

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyvecmat.core.exceptions import DimensionError, ValidationError
from pyvecmat.core.literals import literal_array
from pyvecmat.core.precision import ELEMENT_DTYPE, as_element
from pyvecmat.core.tolerances import FP32, ToleranceTier
from pyvecmat.core.validation import check_1d, check_array, check_scalar, check_size


def _is_scalar(value: Any) -> bool:
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (Real, np.floating, np.integer))


class Vector:
    """
    Dense vector of float32 elements.

    Vectors are mutable (in-place operations write into the buffer) and
    therefore unhashable. Equality is exact element-wise comparison.

    Operators:
        a + b, a - b, a * b, a / b   element-wise; DimensionError on mismatch
        v + k, v - k, v * k, v / k   scalar; also k + v and k * v
        v ** k, -v                   element-wise power, negation
        a @ b                        dot product (0.0 on mismatch)
        +=, -=, *=, /=, **=          in-place versions of the above
    """

    __slots__ = ('_data',)
    __hash__ = None

    def __init__(self, elements: ArrayLike):
        data = check_array(elements, "elements")
        check_1d(data, "elements")
        self._data = data

    @classmethod
    def _from_owned(cls, data: NDArray[np.float32]) -> Vector:
        """Wrap a 1D float32 buffer that nothing else references."""
        obj = cls.__new__(cls)
        obj._data = data
        return obj

    # --- Construction ---

    @classmethod
    def from_literals(cls, *values: float) -> Vector:
        """
        Build a vector whose dimension is the number of values given.

        Raises:
            ValidationError: If no values are given or any is not a real number
        """
        return cls._from_owned(literal_array(values, "values"))

    @classmethod
    def from_array(cls, array: ArrayLike) -> Vector:
        return cls(array)

    @classmethod
    def filled(cls, dim: int, value: float) -> Vector:
        """Vector of dimension dim with every element set to value."""
        dim = check_size(dim, "dim")
        value = check_scalar(value, "value")
        return cls._from_owned(np.full(dim, as_element(value), dtype=ELEMENT_DTYPE))

    @classmethod
    def zero(cls, dim: int) -> Vector:
        """Vector of dimension dim with every element 0.0."""
        return cls.filled(dim, 0.0)

    @classmethod
    def uninitialized(cls, dim: int) -> Vector:
        """
        Allocate a vector without defining its elements.

        The contents are whatever the allocator returns; write every
        element before reading any.
        """
        dim = check_size(dim, "dim")
        return cls._from_owned(np.empty(dim, dtype=ELEMENT_DTYPE))

    def copy(self) -> Vector:
        """Independent duplicate with the same dimension and elements."""
        return Vector._from_owned(self._data.copy())

    def __copy__(self) -> Vector:
        return self.copy()

    def __deepcopy__(self, memo: dict) -> Vector:
        return self.copy()

    def release(self) -> None:
        """Drop the element buffer, leaving an empty (dim 0) vector."""
        self._data = np.empty(0, dtype=ELEMENT_DTYPE)

    # --- Storage ---

    @property
    def dim(self) -> int:
        return int(self._data.shape[0])

    @property
    def elements(self) -> NDArray[np.float32]:
        """Read-only view of the element buffer."""
        view = self._data.view()
        view.flags.writeable = False
        return view

    def _store(self, data: NDArray[np.float32]) -> None:
        # Writes into the existing buffer; callers guarantee matching length.
        np.copyto(self._data, data, casting='same_kind')

    def to_list(self) -> list[float]:
        return [float(x) for x in self._data]

    def __len__(self) -> int:
        return self.dim

    def __iter__(self) -> Iterator[float]:
        return iter(self.to_list())

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Vector._from_owned(self._data[index].copy())
        return float(self._data[index])

    def __setitem__(self, index: int, value: float) -> None:
        if isinstance(index, slice):
            raise ValidationError("slice assignment is not supported, assign elements individually")
        self._data[index] = as_element(check_scalar(value, "value"))

    def __array__(self, dtype=None, copy=None):
        return np.array(self._data, dtype=dtype, copy=True)

    # --- Comparison ---

    def equals(self, other: Vector) -> bool:
        """
        Exact equality: same dimension and every element equal.

        Different dimensions compare unequal. NaN never equals NaN.
        """
        other = check_vector(other, "other")
        return bool(np.array_equal(self._data, other._data))

    def isclose(self, other: Vector, tier: ToleranceTier = FP32) -> bool:
        """Approximate equality within a tolerance tier."""
        other = check_vector(other, "other")
        if self.dim != other.dim:
            return False
        return bool(np.allclose(self._data, other._data, rtol=tier.rtol, atol=tier.atol))

    def __eq__(self, other: object):
        if not isinstance(other, Vector):
            return NotImplemented
        return self.equals(other)

    # --- Operators ---

    def __add__(self, other):
        from pyvecmat.vector import arithmetic
        if isinstance(other, Vector):
            return arithmetic.add(self, other).unwrap()
        if _is_scalar(other):
            return arithmetic.scalar_add(self, other)
        return NotImplemented

    def __radd__(self, other):
        from pyvecmat.vector import arithmetic
        if _is_scalar(other):
            return arithmetic.scalar_add(self, other)
        return NotImplemented

    def __sub__(self, other):
        from pyvecmat.vector import arithmetic
        if isinstance(other, Vector):
            return arithmetic.subtract(self, other).unwrap()
        if _is_scalar(other):
            return arithmetic.scalar_subtract(self, other)
        return NotImplemented

    def __mul__(self, other):
        from pyvecmat.vector import arithmetic
        if isinstance(other, Vector):
            return arithmetic.multiply(self, other).unwrap()
        if _is_scalar(other):
            return arithmetic.scalar_multiply(self, other)
        return NotImplemented

    def __rmul__(self, other):
        from pyvecmat.vector import arithmetic
        if _is_scalar(other):
            return arithmetic.scalar_multiply(self, other)
        return NotImplemented

    def __truediv__(self, other):
        from pyvecmat.vector import arithmetic
        if isinstance(other, Vector):
            return arithmetic.divide(self, other).unwrap()
        if _is_scalar(other):
            return arithmetic.scalar_divide(self, other)
        return NotImplemented

    def __pow__(self, other):
        from pyvecmat.vector import arithmetic
        if _is_scalar(other):
            return arithmetic.power(self, other)
        return NotImplemented

    def __neg__(self) -> Vector:
        from pyvecmat.vector import arithmetic
        return arithmetic.scalar_multiply(self, -1.0)

    def __matmul__(self, other):
        from pyvecmat.vector import geometry
        if isinstance(other, Vector):
            return geometry.dot(self, other)
        return NotImplemented

    def _inplace(self, other, elementwise, scalar, symbol: str) -> Vector:
        if isinstance(other, Vector):
            if not elementwise(self, other):
                raise DimensionError(
                    f"'{symbol}': dimension mismatch (expected ({self.dim},), got ({other.dim},))",
                    operation=elementwise.__name__,
                    expected=(self.dim,),
                    actual=(other.dim,),
                )
            return self
        if _is_scalar(other):
            scalar(self, other)
            return self
        return NotImplemented

    def __iadd__(self, other):
        from pyvecmat.vector import arithmetic
        return self._inplace(other, arithmetic.add_inplace, arithmetic.scalar_add_inplace, "+=")

    def __isub__(self, other):
        from pyvecmat.vector import arithmetic
        return self._inplace(other, arithmetic.subtract_inplace, arithmetic.scalar_subtract_inplace, "-=")

    def __imul__(self, other):
        from pyvecmat.vector import arithmetic
        return self._inplace(other, arithmetic.multiply_inplace, arithmetic.scalar_multiply_inplace, "*=")

    def __itruediv__(self, other):
        from pyvecmat.vector import arithmetic
        return self._inplace(other, arithmetic.divide_inplace, arithmetic.scalar_divide_inplace, "/=")

    def __ipow__(self, other):
        from pyvecmat.vector import arithmetic
        if _is_scalar(other):
            arithmetic.power_inplace(self, other)
            return self
        return NotImplemented

    # --- Geometry conveniences ---

    def dot(self, other: Vector) -> float:
        from pyvecmat.vector import geometry
        return geometry.dot(self, other)

    def cross(self, other: Vector) -> Vector:
        """Cross product; raises DimensionError unless both are 3D."""
        from pyvecmat.vector import geometry
        return geometry.cross(self, other).unwrap()

    def magnitude(self) -> float:
        from pyvecmat.vector import geometry
        return geometry.magnitude(self)

    def normalized(self) -> Vector:
        from pyvecmat.vector import geometry
        return geometry.normalize(self)

    # --- Presentation ---

    def dump(self, file: TextIO | None = None) -> None:
        from pyvecmat.display import dump_vector
        dump_vector(self, file)

    def __str__(self) -> str:
        from pyvecmat.display import format_vector
        return format_vector(self)

    def __repr__(self) -> str:
        return f"Vector({self.to_list()!r})"


def vector(*values: float) -> Vector:
    """Build a Vector from inline literals: ``vector(1.0, 2.0, 3.0)``."""
    return Vector.from_literals(*values)


def check_vector(value: Any, name: str) -> Vector:
    """
    Verify an operand is a Vector.

    Raises:
        ValidationError: If value is not a Vector
    """
    if not isinstance(value, Vector):
        raise ValidationError(f"{name}: expected Vector, got {type(value).__name__}")
    return value


def copy(source: Vector) -> Vector:
    """
    Independent duplicate of source.

    Raises:
        ValidationError: If source is not a Vector
    """
    return check_vector(source, "source").copy()


def equals(a: Vector, b: Vector) -> bool:
    """
    Exact element-wise equality; False for different dimensions.

    Raises:
        ValidationError: If either operand is not a Vector
    """
    return check_vector(a, "a").equals(check_vector(b, "b"))
