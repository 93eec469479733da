"""
Tests for PyVecMat exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyVecMatError)
    - Diagnostic attributes on DimensionError
    - NumericalWarning is a warning, not an error
"""

import warnings

import pytest

from pyvecmat.core.exceptions import (
    DimensionError,
    NumericalWarning,
    PyVecMatError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyVecMatError."""

    def test_validation_error_is_pyvecmat_error(self):
        with pytest.raises(PyVecMatError):
            raise ValidationError("bad input")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("wrong shape")

    def test_dimension_error_is_pyvecmat_error(self):
        with pytest.raises(PyVecMatError):
            raise DimensionError("wrong shape")

    def test_numerical_warning_is_runtime_warning(self):
        assert issubclass(NumericalWarning, RuntimeWarning)
        assert not issubclass(NumericalWarning, PyVecMatError)


# ═══════════════════════════════════════════════════════════════════════
# DimensionError
# ═══════════════════════════════════════════════════════════════════════


class TestDimensionError:
    """DimensionError carries shape diagnostics."""

    def test_all_attributes(self):
        err = DimensionError(
            "add: dimension mismatch",
            operation="add",
            expected=(3,),
            actual=(2,),
        )
        assert str(err) == "add: dimension mismatch"
        assert err.operation == "add"
        assert err.expected == (3,)
        assert err.actual == (2,)

    def test_defaults_are_none(self):
        err = DimensionError("mismatch")
        assert err.operation is None
        assert err.expected is None
        assert err.actual is None


class TestNumericalWarning:

    def test_can_be_issued_and_caught(self):
        with pytest.warns(NumericalWarning, match="zero magnitude"):
            warnings.warn("zero magnitude", NumericalWarning)
