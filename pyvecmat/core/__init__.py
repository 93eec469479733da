"""
Core infrastructure for PyVecMat.

Shared abstractions used by the vector and matrix subpackages.

Key components:
    result: Result[P] envelope (value or dimension mismatch)
    exceptions: Exception hierarchy
    validation: Input validators
    literals: Literal-count helper for inline construction
    precision: Element dtype and floating-point error state
    tolerances: Tolerance tiers for approximate comparison
"""

from pyvecmat.core.result import Result, DimensionMismatch
from pyvecmat.core.exceptions import (
    PyVecMatError,
    ValidationError,
    DimensionError,
    NumericalWarning,
)
from pyvecmat.core.literals import count_literals
from pyvecmat.core.tolerances import ToleranceTier, EXACT, FP32, FP32_LOOSE

__all__ = [
    # Result
    "Result",
    "DimensionMismatch",
    # Exceptions
    "PyVecMatError",
    "ValidationError",
    "DimensionError",
    "NumericalWarning",
    # Helpers
    "count_literals",
    "ToleranceTier",
    "EXACT",
    "FP32",
    "FP32_LOOSE",
]
