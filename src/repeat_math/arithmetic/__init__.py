"""Arithmetic primitives and the repeated-addition multiplier."""

from .add import add
from .multiply import AccumulationStep, InvalidCountError, iter_accumulation, multiply
from .subtract import subtract

__all__ = [
    "AccumulationStep",
    "InvalidCountError",
    "add",
    "iter_accumulation",
    "multiply",
    "subtract",
]
