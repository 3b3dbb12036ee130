"""Subtraction primitive used by the multiplier."""


def subtract(x: int, y: int) -> int:
    """Return ``x`` minus ``y``."""
    return x - y
