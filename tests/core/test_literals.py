"""
Tests for the literal-count helper used by vector() and matrix().
"""

import numpy as np
import pytest

from pyvecmat.core.exceptions import DimensionError, ValidationError
from pyvecmat.core.literals import count_literals, literal_array


class TestCountLiterals:

    def test_counts_values(self):
        assert count_literals(1, 2, 3, 4) == 4

    def test_single(self):
        assert count_literals(0.0) == 1

    def test_empty(self):
        assert count_literals() == 0


class TestLiteralArray:

    def test_preserves_order(self):
        result = literal_array((3.0, -1.0, 2.5), "values")
        assert result.dtype == np.float32
        np.testing.assert_array_equal(result, [3.0, -1.0, 2.5])

    def test_ints_promoted(self):
        assert literal_array((1, 2), "values").dtype == np.float32

    def test_empty_rejected(self):
        with pytest.raises(ValidationError, match="at least one literal"):
            literal_array((), "values")

    def test_expected_count_matches(self):
        result = literal_array((1, 2, 3, 4), "values", expected=4)
        assert result.shape == (4,)

    def test_expected_count_mismatch(self):
        with pytest.raises(DimensionError, match="expected 4 literal values, got 3") as excinfo:
            literal_array((1, 2, 3), "values", expected=4)
        assert excinfo.value.expected == (4,)
        assert excinfo.value.actual == (3,)

    def test_non_numeric_rejected(self):
        with pytest.raises(ValidationError):
            literal_array((1.0, "two"), "values")

    def test_nested_rejected(self):
        with pytest.raises(ValidationError):
            literal_array(([1.0, 2.0],), "values")

    @pytest.mark.parametrize("flag", [True, False, np.bool_(True)])
    def test_boolean_rejected(self, flag):
        with pytest.raises(ValidationError, match="real number"):
            literal_array((1.0, flag), "values")

    def test_int_beyond_int64_accepted(self):
        result = literal_array((2**70,), "values")
        assert result[0] == np.float32(float(2**70))

    def test_int_beyond_float_range_saturates(self):
        result = literal_array((10**400, -(10**400)), "values")
        np.testing.assert_array_equal(result, [np.inf, -np.inf])
