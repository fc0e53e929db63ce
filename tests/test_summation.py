"""Tests for precision/summation.py. Pure floats, no tempo domain."""

import math
from fractions import Fraction

import numpy as np

from tempo_practice.precision.summation import kahan_sum, naive_sum


def _exact(values):
    """Exact rational sum of the given floats, rounded once to a float."""
    return float(sum((Fraction(v) for v in values), Fraction(0)))


def test_empty():
    assert kahan_sum([]) == 0.0
    assert naive_sum([]) == 0.0


def test_single_value_is_exact():
    assert kahan_sum([480 / 60]) == 480 / 60


def test_accepts_generator():
    assert kahan_sum(float(i) for i in range(5)) == 10.0


def test_tenths():
    """Ten 0.1s: naive accumulation drifts below 1.0."""
    values = [0.1] * 10
    assert naive_sum(values) != 1.0
    assert abs(kahan_sum(values) - 1.0) < abs(naive_sum(values) - 1.0)


def test_many_tiny_terms_after_large_one():
    """Each 1e-16 is below half an ulp of 1.0, so naive addition drops all of them."""
    values = [1.0] + [1e-16] * 10_000
    reference = _exact(values)

    assert naive_sum(values) == 1.0
    assert abs(kahan_sum(values) - reference) < abs(naive_sum(values) - reference)
    assert abs(kahan_sum(values) - reference) / reference < 1e-15


def test_matches_fsum_on_random_positive_values():
    rng = np.random.default_rng(0)
    values = rng.uniform(0.001, 10.0, size=5000).tolist()
    reference = math.fsum(values)
    assert abs(kahan_sum(values) - reference) / reference < 1e-14


# --- naive_sum is a true baseline ---

def test_naive_sum_is_left_to_right():
    values = [1e16, 1.0, -1e16]
    # 1e16 + 1.0 rounds back to 1e16
    assert naive_sum(values) == 0.0
