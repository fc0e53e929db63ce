"""Tests for precision/exact.py and the derived quantities on PracticeParameters."""

from fractions import Fraction

import numpy as np
import pytest

from tempo_practice.precision.exact import exact_total_seconds, step_tempos, step_times
from tempo_practice.precision.validate import validate_parameters


def _params(a=60, b=120, s=10, B=4, R=2, N=3):
    return validate_parameters(a, b, s, B, R, N)


def test_derived_quantities():
    params = _params()
    assert params.total_beats_per_step == 8
    assert params.time_constant == 480.0
    assert params.step_count == 6
    assert params.actual_end_tempo == 120.0


def test_actual_end_tempo_below_target():
    """Step doesn't divide the range: stop at the last reachable tempo."""
    params = _params(a=60, b=100, s=15)
    assert params.step_count == 2
    assert params.actual_end_tempo == 90.0


@pytest.mark.parametrize("a,b,s", [
    (60, 120, 10),
    (60, 100, 15),
    (72.5, 133.3, 2.7),
    (40, 240, 0.05),
    (100, 101, 5),
])
def test_end_tempo_bounds(a, b, s):
    params = _params(a=a, b=b, s=s)
    n = params.step_count
    assert n >= 0
    assert params.actual_end_tempo == a + n * s
    assert a <= params.actual_end_tempo < b + s


def test_step_tempos():
    tempos = step_tempos(_params())
    np.testing.assert_array_equal(tempos, [60, 70, 80, 90, 100, 110, 120])


def test_step_times():
    times = step_times(_params())
    assert len(times) == 7
    assert times[0] == 480 / 60
    assert times[-1] == 480 / 120


def test_concrete_scenario():
    """a=60, b=120, s=10, B=4, R=2, N=3 against an exact rational sum."""
    reference = 3 * sum(Fraction(480, 60 + 10 * k) for k in range(7))
    assert exact_total_seconds(_params()) == pytest.approx(float(reference), rel=1e-14)
    assert exact_total_seconds(_params()) == pytest.approx(118.0623377, abs=1e-6)


def test_single_step_is_exact():
    """Step overshoots the target: n = 0, one term, no rounding beyond C / a."""
    params = _params(a=100, b=101, s=5, B=4, R=2, N=3)
    assert params.step_count == 0
    assert params.actual_end_tempo == 100.0
    np.testing.assert_array_equal(step_tempos(params), [100.0])
    assert exact_total_seconds(params) == 480.0 / 100.0 * 3


def test_thousands_of_steps_match_rational_reference():
    params = _params(a=40, b=240, s=0.05, B=3, R=5, N=2)
    assert params.step_count > 3000

    # Same float terms, summed without any rounding
    terms = step_times(params).tolist()
    reference = float(sum((Fraction(t) for t in terms), Fraction(0))) * params.sets

    assert exact_total_seconds(params) == pytest.approx(reference, rel=1e-12)


def test_scales_with_sets():
    one = exact_total_seconds(_params(N=1))
    assert exact_total_seconds(_params(N=5)) == one * 5
