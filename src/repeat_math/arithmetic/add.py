"""Addition primitive used by the multiplier."""


def add(x: int, y: int) -> int:
    """Return the sum of two integers."""
    return x + y
