"""Multiplication expressed as repeated addition.

The multiplier keeps two pieces of state explicit: the running accumulator and
the fixed base that is added at every step. The remaining count shrinks by one
per step until it reaches the terminal condition ``remaining <= 1``.

A count of ``0`` stops immediately and returns the multiplicand rather than
``0``. Callers that need the mathematical result must handle that boundary
themselves (see :func:`repeat_math.core.run_multiplication`).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .add import add
from .subtract import subtract

if TYPE_CHECKING:
    from collections.abc import Iterator


class InvalidCountError(ValueError):
    """Raised when the multiplier-count is negative or not an integer."""

    def __init__(self, count: object, message: str | None = None) -> None:
        """Initialise the error with the rejected count."""
        default_message = (
            f"Multiplier count must be a non-negative integer, got {count!r}."
        )
        super().__init__(message or default_message)
        self.count = count


@dataclass(frozen=True, slots=True)
class AccumulationStep:
    """State of the accumulation after a single addition."""

    remaining: int
    accumulator: int


def _validate_count(count: object) -> int:
    """Return ``count`` if it is a usable multiplier-count."""
    if isinstance(count, bool) or not isinstance(count, int):
        raise InvalidCountError(count)
    if count < 0:
        raise InvalidCountError(count)
    return count


def iter_accumulation(
    accumulator: int,
    base: int,
    remaining: int,
) -> Iterator[AccumulationStep]:
    """Yield every step of the repeated addition.

    Each step adds ``base`` to the accumulator once and decrements
    ``remaining`` once. Nothing is yielded when ``remaining <= 1``.

    Raises:
        InvalidCountError: If ``remaining`` is negative or not an integer.

    """
    remaining = _validate_count(remaining)
    while remaining > 1:
        accumulator = add(accumulator, base)
        remaining = subtract(remaining, 1)
        yield AccumulationStep(remaining=remaining, accumulator=accumulator)


def multiply(a: int, b: int, base: int | None = None) -> int:
    """Return ``a`` multiplied by ``b`` using repeated addition.

    Args:
        a: The multiplicand, or the running accumulator when ``base`` is given.
        b: The multiplier-count.
        base: The value added at every step. Defaults to ``a``.

    Returns:
        int: The accumulated product. ``b`` of ``0`` or ``1`` returns ``a``.

    Raises:
        InvalidCountError: If ``b`` is negative or not an integer.

    """
    if base is None:
        base = a

    product = a
    for step in iter_accumulation(a, base, b):
        product = step.accumulator
    return product


__all__ = [
    "AccumulationStep",
    "InvalidCountError",
    "iter_accumulation",
    "multiply",
]
