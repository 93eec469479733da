"""
Matrix value type.

Public API:
    Matrix, matrix(rows, cols, *values)
    copy(m), copy_from_reference(m), equals(a, b)
"""

from pyvecmat.matrix.matrix import Matrix, matrix, copy, copy_from_reference, equals

__all__ = [
    "Matrix",
    "matrix",
    "copy",
    "copy_from_reference",
    "equals",
]
