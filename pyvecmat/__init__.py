"""
PyVecMat: small dense vectors and matrices of single-precision floats.

Arithmetic, geometric and comparison operations for callers that need
basic numeric computation (graphics, physics, simple ML) without a full
linear-algebra stack.

Submodules:
    vector: Vector value type with arithmetic and geometry
    matrix: Matrix value type (construction, copy, rendering)
    display: Text rendering for both
"""

__version__ = "0.1.0"

from pyvecmat.core import (
    Result,
    DimensionMismatch,
    PyVecMatError,
    ValidationError,
    DimensionError,
    NumericalWarning,
)
from pyvecmat.vector import (
    Vector,
    vector,
    equals,
    add,
    subtract,
    multiply,
    divide,
    add_inplace,
    subtract_inplace,
    multiply_inplace,
    divide_inplace,
    scalar_add,
    scalar_subtract,
    scalar_multiply,
    scalar_divide,
    power,
    scalar_add_inplace,
    scalar_subtract_inplace,
    scalar_multiply_inplace,
    scalar_divide_inplace,
    power_inplace,
    dot,
    orthogonal,
    cross,
    magnitude,
    magnitude_squared,
    normalize,
    normalize_inplace,
)
from pyvecmat.matrix import Matrix, matrix
from pyvecmat.display import format_vector, format_matrix, dump_vector, dump_matrix

__all__ = [
    "__version__",
    # Values
    "Vector",
    "vector",
    "Matrix",
    "matrix",
    # Result and errors
    "Result",
    "DimensionMismatch",
    "PyVecMatError",
    "ValidationError",
    "DimensionError",
    "NumericalWarning",
    # Vector operations
    "equals",
    "add",
    "subtract",
    "multiply",
    "divide",
    "add_inplace",
    "subtract_inplace",
    "multiply_inplace",
    "divide_inplace",
    "scalar_add",
    "scalar_subtract",
    "scalar_multiply",
    "scalar_divide",
    "power",
    "scalar_add_inplace",
    "scalar_subtract_inplace",
    "scalar_multiply_inplace",
    "scalar_divide_inplace",
    "power_inplace",
    "dot",
    "orthogonal",
    "cross",
    "magnitude",
    "magnitude_squared",
    "normalize",
    "normalize_inplace",
    # Rendering
    "format_vector",
    "format_matrix",
    "dump_vector",
    "dump_matrix",
]
