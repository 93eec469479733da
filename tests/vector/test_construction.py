"""
Tests for Vector construction, ownership and element access.
"""

import copy as copy_module

import numpy as np
import pytest

from pyvecmat import Vector, ValidationError, DimensionError, vector
from pyvecmat.vector import copy, equals


# ═══════════════════════════════════════════════════════════════════════
# Construction
# ═══════════════════════════════════════════════════════════════════════


class TestFromLiterals:

    def test_dimension_is_literal_count(self):
        v = vector(2.0, -3.0, 1.0)
        assert v.dim == 3
        assert v.to_list() == [2.0, -3.0, 1.0]

    def test_classmethod_matches_factory(self):
        assert Vector.from_literals(1, 2) == vector(1, 2)

    def test_elements_are_float32(self):
        assert vector(1, 2, 3).elements.dtype == np.float32

    def test_single_precision_rounding(self):
        v = vector(0.1)
        assert v[0] == float(np.float32(0.1))

    def test_empty_literal_list_rejected(self):
        with pytest.raises(ValidationError, match="at least one literal"):
            vector()

    def test_non_numeric_rejected(self):
        with pytest.raises(ValidationError):
            vector(1.0, "2.0")

    def test_boolean_literal_rejected(self):
        with pytest.raises(ValidationError):
            vector(1.0, True)

    def test_large_int_literal_matches_filled(self):
        assert vector(2**70) == Vector.filled(1, 2**70)


class TestFilledAndZero:

    def test_filled(self):
        v = Vector.filled(4, 2.5)
        assert v.dim == 4
        assert v.to_list() == [2.5] * 4

    def test_zero(self):
        v = Vector.zero(3)
        assert v.to_list() == [0.0, 0.0, 0.0]

    def test_zero_dimension_is_legal(self):
        v = Vector.zero(0)
        assert v.dim == 0
        assert len(v) == 0

    def test_negative_dim_rejected(self):
        with pytest.raises(ValidationError, match="non-negative"):
            Vector.zero(-1)

    def test_float_dim_rejected(self):
        with pytest.raises(ValidationError):
            Vector.filled(2.0, 1.0)

    def test_non_numeric_fill_rejected(self):
        with pytest.raises(ValidationError, match="value"):
            Vector.filled(2, "x")


class TestUninitialized:

    def test_has_requested_dimension(self):
        v = Vector.uninitialized(5)
        assert v.dim == 5
        assert v.elements.dtype == np.float32

    def test_writable_before_read(self):
        v = Vector.uninitialized(2)
        v[0] = 1.0
        v[1] = 2.0
        assert v == vector(1, 2)


class TestFromArray:

    def test_from_numpy(self):
        v = Vector.from_array(np.array([1.0, 2.0, 3.0]))
        assert v == vector(1, 2, 3)

    def test_input_is_copied(self):
        source = np.array([1.0, 2.0], dtype=np.float32)
        v = Vector(source)
        source[0] = 100.0
        assert v[0] == 1.0

    def test_from_vector(self):
        a = vector(1, 2)
        b = Vector(a)
        assert b == a
        b[0] = 9.0
        assert a[0] == 1.0

    def test_2d_rejected(self):
        with pytest.raises(DimensionError):
            Vector([[1.0, 2.0]])

    def test_boolean_entries_rejected(self):
        with pytest.raises(ValidationError, match="boolean"):
            Vector([1.0, True])


# ═══════════════════════════════════════════════════════════════════════
# Copy and ownership
# ═══════════════════════════════════════════════════════════════════════


class TestCopy:

    def test_copy_equals_original(self, random_pair):
        v, _ = random_pair
        assert equals(v, copy(v))

    def test_mutating_copy_leaves_original(self):
        v = vector(1, 2, 3)
        c = copy(v)
        c[0] = 42.0
        assert v.to_list() == [1.0, 2.0, 3.0]

    def test_mutating_original_leaves_copy(self):
        v = vector(1, 2, 3)
        c = v.copy()
        v *= 2
        assert c.to_list() == [1.0, 2.0, 3.0]

    def test_stdlib_copy_protocols(self):
        v = vector(1, 2)
        for c in (copy_module.copy(v), copy_module.deepcopy(v)):
            assert c == v
            c[0] = 0.0
            assert v[0] == 1.0

    def test_copy_rejects_non_vector(self):
        with pytest.raises(ValidationError, match="expected Vector"):
            copy([1.0, 2.0])


class TestElementsView:

    def test_view_is_read_only(self):
        v = vector(1, 2)
        with pytest.raises(ValueError):
            v.elements[0] = 5.0

    def test_view_tracks_in_place_updates(self):
        v = vector(1, 2)
        view = v.elements
        v += 1
        np.testing.assert_array_equal(view, [2.0, 3.0])


class TestRelease:

    def test_release_empties(self):
        v = vector(1, 2, 3)
        v.release()
        assert v.dim == 0
        assert v.to_list() == []

    def test_release_does_not_touch_copies(self):
        v = vector(1, 2, 3)
        c = v.copy()
        v.release()
        assert c.dim == 3


# ═══════════════════════════════════════════════════════════════════════
# Element access
# ═══════════════════════════════════════════════════════════════════════


class TestElementAccess:

    def test_getitem_returns_python_float(self):
        v = vector(1.5, 2.5)
        assert v[1] == 2.5
        assert type(v[1]) is float

    def test_negative_index(self):
        assert vector(1, 2, 3)[-1] == 3.0

    def test_out_of_range(self):
        with pytest.raises(IndexError):
            vector(1, 2)[2]

    def test_slice_returns_independent_vector(self):
        v = vector(1, 2, 3, 4)
        s = v[1:3]
        assert s == vector(2, 3)
        s[0] = 0.0
        assert v[1] == 2.0

    def test_setitem_rejects_non_numeric(self):
        v = vector(1, 2)
        with pytest.raises(ValidationError):
            v[0] = "a"

    def test_iteration(self):
        assert list(vector(1, 2, 3)) == [1.0, 2.0, 3.0]

    def test_numpy_conversion_is_a_copy(self):
        v = vector(1, 2)
        arr = np.asarray(v)
        arr[0] = 7.0
        assert v[0] == 1.0

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(vector(1, 2))

    def test_repr(self):
        assert repr(vector(1, 2)) == "Vector([1.0, 2.0])"

    def test_repr_evaluates_to_equal_vector(self):
        v = vector(0.1, -2.5, 3.0)
        assert eval(repr(v), {"Vector": Vector}) == v
