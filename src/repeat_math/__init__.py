"""Repeat Math: multiplication expressed as repeated addition."""

from repeat_math.arithmetic import (
    AccumulationStep,
    InvalidCountError,
    add,
    iter_accumulation,
    multiply,
    subtract,
)

__all__ = [
    "AccumulationStep",
    "InvalidCountError",
    "add",
    "iter_accumulation",
    "multiply",
    "subtract",
]
