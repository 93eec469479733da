"""
Element precision constants and floating-point utilities.

Every Vector and Matrix stores single-precision elements. Operations
follow IEEE semantics: division by zero and invalid operations yield
inf/NaN silently instead of emitting NumPy runtime warnings.
"""

from contextlib import contextmanager
from typing import Any, Iterator

import numpy as np
from numpy.typing import NDArray


# Storage dtype for all elements
ELEMENT_DTYPE = np.float32

# Machine epsilon for float32
EPSILON_32: float = float(np.finfo(np.float32).eps)  # ~1.19e-7


@contextmanager
def ieee_errstate() -> Iterator[None]:
    """Suppress NumPy floating-point warnings; results keep inf/NaN."""
    with np.errstate(divide='ignore', invalid='ignore', over='ignore', under='ignore'):
        yield


def as_element(value: float) -> np.float32:
    """Cast a Python scalar to the element dtype."""
    with ieee_errstate():
        return ELEMENT_DTYPE(value)


def all_finite(array: NDArray[Any]) -> bool:
    """True if the array holds no NaN or Inf values."""
    return bool(np.all(np.isfinite(array)))
