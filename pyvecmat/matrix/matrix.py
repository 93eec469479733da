"""
Matrix: a fixed-size 2D grid of single-precision floats, row-major.

Matrix is a container with constructors; it defines no arithmetic and
does not interoperate with Vector. Each Matrix owns its storage
exclusively.

Construction:
    matrix(2, 2, 1.0, 0.0, 0.0, 1.0)    from inline literals, row by row
    Matrix.from_literals(rows, cols, *values)
    Matrix.from_rows([[1, 2], [3, 4]])
    Matrix.zero(rows, cols)
    Matrix.identity(dim)
    Matrix.uninitialized(rows, cols)
"""

from __future__ import annotations

from typing import Any, TextIO

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyvecmat.core.exceptions import ValidationError
from pyvecmat.core.literals import literal_array
from pyvecmat.core.precision import ELEMENT_DTYPE, as_element
from pyvecmat.core.validation import check_2d, check_array, check_scalar, check_size


class Matrix:
    """
    Dense rows x cols matrix of float32 elements.

    Mutable through item assignment (``m[r, c] = x``) and therefore
    unhashable. Equality is exact element-wise comparison.
    """

    __slots__ = ('_data',)
    __hash__ = None

    def __init__(self, rows: ArrayLike):
        data = check_array(rows, "rows")
        if data.ndim == 1 and data.size == 0:
            data = data.reshape(0, 0)
        check_2d(data, "rows")
        self._data = data

    @classmethod
    def _from_owned(cls, data: NDArray[np.float32]) -> Matrix:
        obj = cls.__new__(cls)
        obj._data = data
        return obj

    # --- Construction ---

    @classmethod
    def from_literals(cls, rows: int, cols: int, *values: float) -> Matrix:
        """
        Fill a rows x cols matrix row by row from a flat list of literals.

        Raises:
            ValidationError: If rows/cols are invalid or no values are given
            DimensionError: If the number of values is not rows * cols
        """
        rows = check_size(rows, "rows")
        cols = check_size(cols, "cols")
        data = literal_array(values, "values", expected=rows * cols)
        return cls._from_owned(data.reshape(rows, cols))

    @classmethod
    def from_rows(cls, rows: ArrayLike) -> Matrix:
        """Build from a nested sequence or 2D array; every row must have the same width."""
        return cls(rows)

    @classmethod
    def zero(cls, rows: int, cols: int) -> Matrix:
        """
        rows x cols matrix with every element 0.0.

        Raises:
            ValidationError: If rows or cols is not a non-negative integer
        """
        rows = check_size(rows, "rows")
        cols = check_size(cols, "cols")
        return cls._from_owned(np.zeros((rows, cols), dtype=ELEMENT_DTYPE))

    @classmethod
    def identity(cls, dim: int) -> Matrix:
        """Square matrix with 1.0 on the main diagonal and 0.0 elsewhere."""
        dim = check_size(dim, "dim")
        return cls._from_owned(np.eye(dim, dtype=ELEMENT_DTYPE))

    @classmethod
    def uninitialized(cls, rows: int, cols: int) -> Matrix:
        """Allocate without defining the elements; write before reading."""
        rows = check_size(rows, "rows")
        cols = check_size(cols, "cols")
        return cls._from_owned(np.empty((rows, cols), dtype=ELEMENT_DTYPE))

    def copy(self) -> Matrix:
        """Independent duplicate with the same shape and elements."""
        return Matrix._from_owned(self._data.copy())

    def copy_from_reference(self) -> Matrix:
        """Duplicate of the referenced matrix; storage is never shared."""
        return self.copy()

    def __copy__(self) -> Matrix:
        return self.copy()

    def __deepcopy__(self, memo: dict) -> Matrix:
        return self.copy()

    def release(self) -> None:
        """Drop the storage, leaving a 0 x 0 matrix."""
        self._data = np.empty((0, 0), dtype=ELEMENT_DTYPE)

    # --- Storage ---

    @property
    def rows(self) -> int:
        """Number of rows."""
        return int(self._data.shape[0])

    @property
    def cols(self) -> int:
        """Number of columns."""
        return int(self._data.shape[1])

    @property
    def shape(self) -> tuple[int, int]:
        return self.rows, self.cols

    @property
    def elements(self) -> NDArray[np.float32]:
        """Read-only view of the grid, shape (rows, cols)."""
        view = self._data.view()
        view.flags.writeable = False
        return view

    def row(self, r: int) -> list[float]:
        """Copy of row r as Python floats."""
        return [float(x) for x in self._data[r]]

    def to_list(self) -> list[list[float]]:
        return [self.row(r) for r in range(self.rows)]

    def _cell(self, index: Any) -> tuple[int, int]:
        if not (isinstance(index, tuple) and len(index) == 2):
            raise ValidationError(f"index: expected (row, col), got {index!r}")
        return index

    def __getitem__(self, index: tuple[int, int]) -> float:
        r, c = self._cell(index)
        return float(self._data[r, c])

    def __setitem__(self, index: tuple[int, int], value: float) -> None:
        r, c = self._cell(index)
        self._data[r, c] = as_element(check_scalar(value, "value"))

    def __array__(self, dtype=None, copy=None):
        return np.array(self._data, dtype=dtype, copy=True)

    # --- Comparison ---

    def equals(self, other: Matrix) -> bool:
        """Same shape and every element exactly equal."""
        other = check_matrix(other, "other")
        return bool(np.array_equal(self._data, other._data))

    def __eq__(self, other: object):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.equals(other)

    # --- Presentation ---

    def dump(self, file: TextIO | None = None) -> None:
        from pyvecmat.display import dump_matrix
        dump_matrix(self, file)

    def __str__(self) -> str:
        from pyvecmat.display import format_matrix
        return format_matrix(self)

    def __repr__(self) -> str:
        return f"Matrix({self.to_list()!r})"


def matrix(rows: int, cols: int, *values: float) -> Matrix:
    """Build a Matrix from inline literals: ``matrix(2, 2, 1, 0, 0, 1)``."""
    return Matrix.from_literals(rows, cols, *values)


def check_matrix(value: Any, name: str) -> Matrix:
    """
    Verify an operand is a Matrix.

    Raises:
        ValidationError: If value is not a Matrix
    """
    if not isinstance(value, Matrix):
        raise ValidationError(f"{name}: expected Matrix, got {type(value).__name__}")
    return value


def copy(source: Matrix) -> Matrix:
    """
    Independent duplicate of source.

    Raises:
        ValidationError: If source is not a Matrix
    """
    return check_matrix(source, "source").copy()


def copy_from_reference(source: Matrix) -> Matrix:
    """Duplicate of the matrix a reference points to; storage is not shared."""
    return check_matrix(source, "source").copy_from_reference()


def equals(a: Matrix, b: Matrix) -> bool:
    """
    Same shape and every element exactly equal.

    Raises:
        ValidationError: If either operand is not a Matrix
    """
    return check_matrix(a, "a").equals(check_matrix(b, "b"))
