"""
Vector value type and its operations.

Public API:
    Vector, vector(*values)         - value type and literal constructor
    copy(v), equals(a, b)           - duplication and exact comparison
    add / subtract / multiply / divide            -> Result[Vector]
    add_inplace / ... / divide_inplace            -> bool
    scalar_add / scalar_subtract / scalar_multiply / scalar_divide / power
    scalar_*_inplace, power_inplace
    dot, orthogonal, cross, magnitude, magnitude_squared
    normalize, normalize_inplace
"""

from pyvecmat.vector.vector import Vector, vector, copy, equals
from pyvecmat.vector.arithmetic import (
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
)
from pyvecmat.vector.geometry import (
    dot,
    orthogonal,
    cross,
    magnitude,
    magnitude_squared,
    normalize,
    normalize_inplace,
)

__all__ = [
    "Vector",
    "vector",
    "copy",
    "equals",
    # Element-wise
    "add",
    "subtract",
    "multiply",
    "divide",
    "add_inplace",
    "subtract_inplace",
    "multiply_inplace",
    "divide_inplace",
    # Scalar
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
    # Geometry
    "dot",
    "orthogonal",
    "cross",
    "magnitude",
    "magnitude_squared",
    "normalize",
    "normalize_inplace",
]
