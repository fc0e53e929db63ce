"""
Floating-point summation.

The one piece of careful numerics in the engine.
Pure functions over any iterable of floats; nothing tempo-specific here.
"""

from typing import Iterable


def kahan_sum(values: Iterable[float]) -> float:
    """
    Sum floats with Kahan compensated summation.

    A running compensation term holds the low-order bits lost by the last
    addition and is fed back into the next one, so the error bound stays a
    small multiple of machine epsilon instead of growing with len(values).

    Args:
        values: Floats to add, in order.

    Returns:
        The compensated sum (0.0 for an empty iterable).
    """
    total = 0.0
    compensation = 0.0

    for value in values:
        y = value - compensation
        t = total + y
        # (t - total) is what actually got added; subtract what we meant to add
        compensation = (t - total) - y
        total = t

    return total


def naive_sum(values: Iterable[float]) -> float:
    """
    Plain left-to-right accumulation.

    Kept for comparison against kahan_sum(). Note that the builtin sum()
    is itself compensated on Python 3.12+, so it is not a naive baseline.
    """
    total = 0.0
    for value in values:
        total += value
    return total
