"""Core orchestration logic for the Repeat Math application."""

from __future__ import annotations

from repeat_math.arithmetic import AccumulationStep, iter_accumulation
from repeat_math.models.io import MultiplicationReport
from repeat_math.utils.logger import get_logger
from repeat_math.utils.settings import get_arithmetic_settings

logger = get_logger(__name__)


def trace_multiplication(
    multiplicand: int,
    count: int,
    base: int | None = None,
) -> list[AccumulationStep]:
    """Return every accumulation step of a multiplication."""
    addend = multiplicand if base is None else base
    return list(iter_accumulation(multiplicand, addend, count))


def run_multiplication(
    multiplicand: int,
    count: int,
    base: int | None = None,
) -> MultiplicationReport:
    """Multiply by repeated addition and describe the outcome.

    The multiplier echoes the multiplicand for a count of ``0``. When
    ``REPEAT_MATH_ZERO_COUNT_RETURNS_ZERO`` is enabled the report carries ``0``
    instead and is marked as corrected.

    Raises:
        InvalidCountError: If ``count`` is negative or not an integer.

    """
    settings = get_arithmetic_settings()
    addend = multiplicand if base is None else base

    product = multiplicand
    step_count = 0
    for step in iter_accumulation(multiplicand, addend, count):
        product = step.accumulator
        step_count += 1

    zero_count_quirk = count == 0
    corrected = zero_count_quirk and settings.zero_count_returns_zero

    if corrected:
        product = 0
        logger.info("Corrected zero multiplier count", multiplicand=multiplicand)
    elif zero_count_quirk:
        logger.warning(
            "Zero multiplier count returned the multiplicand",
            multiplicand=multiplicand,
        )

    logger.debug(
        "Multiplied by repeated addition",
        multiplicand=multiplicand,
        count=count,
        base=addend,
        product=product,
        steps=step_count,
    )

    return MultiplicationReport(
        multiplicand=multiplicand,
        count=count,
        base=addend,
        product=product,
        steps=step_count,
        zero_count_quirk=zero_count_quirk,
        corrected=corrected,
    )
