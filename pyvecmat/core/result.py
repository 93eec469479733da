"""
Result envelope for operations whose operands can be incompatible.

Element-wise vector arithmetic and the cross product are only defined for
operands of matching dimension. Instead of returning a zero-length
"undefined" value that could be used by accident, these operations return
a Result that either holds the value or describes the mismatch.

Design decisions:
    - Generic over the payload P
    - Exactly one of value / mismatch is set
    - Immutable (frozen=True)
    - Non-fatal numerical notes travel in the warnings tuple
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypeVar, Generic

from pyvecmat.core.exceptions import DimensionError

P = TypeVar('P')  # Payload type


@dataclass(frozen=True)
class DimensionMismatch:
    """
    Why an operation produced no value.

    Attributes:
        operation: Name of the operation, e.g. 'add' or 'cross'
        expected: Shape the operation required
        actual: Shape that was supplied
    """
    operation: str
    expected: tuple[int, ...]
    actual: tuple[int, ...]

    def describe(self) -> str:
        return (
            f"{self.operation}: dimension mismatch "
            f"(expected {self.expected}, got {self.actual})"
        )


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable outcome of an operation: Ok(value) or DimensionMismatch.

    Attributes:
        value: The computed value, or None if undefined
        operation: Name of the producing operation
        mismatch: Mismatch details, or None if the operation succeeded
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> res = add(vector(1, 2), vector(3, 4))
        >>> res.is_ok
        True
        >>> add(vector(1, 2), vector(1, 2, 3)).is_undefined
        True
    """
    value: P | None
    operation: str
    mismatch: DimensionMismatch | None = None
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if (self.value is None) == (self.mismatch is None):
            raise ValueError("Result requires exactly one of value or mismatch")

    @classmethod
    def ok(cls, value: P, operation: str, warnings: tuple[str, ...] = ()) -> Result[P]:
        return cls(value=value, operation=operation, warnings=tuple(warnings))

    @classmethod
    def undefined(cls, mismatch: DimensionMismatch) -> Result[P]:
        return cls(value=None, operation=mismatch.operation, mismatch=mismatch)

    @property
    def is_ok(self) -> bool:
        return self.mismatch is None

    @property
    def is_undefined(self) -> bool:
        return self.mismatch is not None

    def unwrap(self) -> P:
        """
        Return the value.

        Raises:
            DimensionError: If the operands were incompatible
        """
        if self.mismatch is not None:
            raise DimensionError(
                self.mismatch.describe(),
                operation=self.mismatch.operation,
                expected=self.mismatch.expected,
                actual=self.mismatch.actual,
            )
        return self.value

    def unwrap_or(self, default: P) -> P:
        """Return the value, or default if undefined."""
        if self.mismatch is not None:
            return default
        return self.value

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)

    def __bool__(self) -> bool:
        return self.is_ok
