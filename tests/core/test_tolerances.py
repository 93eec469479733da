"""
Tests for tolerance tiers.
"""

import pytest

from pyvecmat.core.exceptions import ValidationError
from pyvecmat.core.tolerances import EXACT, FP32, FP32_LOOSE, select_tolerance


class TestTiers:

    def test_exact_has_no_tolerance(self):
        assert EXACT.rtol == 0.0
        assert EXACT.atol == 0.0

    def test_loose_is_looser_than_fp32(self):
        assert FP32_LOOSE.rtol > FP32.rtol
        assert FP32_LOOSE.atol > FP32.atol


class TestSelectTolerance:

    @pytest.mark.parametrize("tier", [EXACT, FP32, FP32_LOOSE])
    def test_lookup_by_name(self, tier):
        assert select_tolerance(tier.name) is tier

    def test_unknown_name(self):
        with pytest.raises(ValidationError, match="tier must be one of"):
            select_tolerance("fp16")
