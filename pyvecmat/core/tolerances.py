"""
Tolerance tiers for approximate comparison.

Vector.equals and Matrix.equals are exact. Approximate comparison
(isclose) uses one of the tiers below:
- EXACT: bitwise-equal values only
- FP32: accumulated rounding of a few single-precision operations
- FP32_LOOSE: long accumulation chains (large dot products, powers)

Used by the test suite and by isclose().
"""

from dataclasses import dataclass

from pyvecmat.core.exceptions import ValidationError


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Exact equality, no tolerance',
)

FP32 = ToleranceTier(
    rtol=1e-6,
    atol=1e-7,
    name='fp32',
    description='Single precision, short operation chains',
)

FP32_LOOSE = ToleranceTier(
    rtol=1e-4,
    atol=1e-5,
    name='fp32_loose',
    description='Single precision, long accumulation chains',
)

_TIERS = {tier.name: tier for tier in (EXACT, FP32, FP32_LOOSE)}


def select_tolerance(name: str) -> ToleranceTier:
    """Look up a tolerance tier by name."""
    try:
        return _TIERS[name]
    except KeyError:
        raise ValidationError(
            f"tier must be one of {tuple(_TIERS)}, got {name!r}"
        ) from None
