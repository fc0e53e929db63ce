"""
Closed-form practice time estimate (the S-P formula).

O(1) alternative to the exact sum, plus the error analysis that
compares the two. Pure functions, no I/O.
"""

from typing import Iterable

from tempo_practice.precision.exact import exact_total_seconds
from tempo_practice.precision.validate import validate_parameters
from tempo_practice.types import ApproximationPoint, PracticeParameters


def sp_terms(params: PracticeParameters) -> tuple[float, float]:
    """
    The two terms of the S-P formula, per unit of C.

    With S = a + b' and P = a·b':

    - main term 4nS / (S² + 4P) stands in for the integral of 1/tempo over
      the range. It replaces the logarithmic mean of a and b' with the
      rational mean built from their arithmetic and harmonic means.
    - correction term S / 2P = (1/a + 1/b') / 2 is the trapezoidal
      end-point adjustment between a sum and an integral.

    When n = 0 the main term vanishes and b' = a, so the correction is 1/a
    and the estimate matches the single-term exact sum.

    Returns:
        (main_term, correction_term)
    """
    a = params.start_tempo
    b_prime = params.actual_end_tempo
    n = params.step_count

    S = a + b_prime
    P = a * b_prime

    main_term = (4 * n * S) / (S * S + 4 * P)
    correction_term = S / (2 * P)
    return main_term, correction_term


def approx_total_seconds(params: PracticeParameters) -> float:
    """Total practice time across all sets by the S-P formula: C × (main + correction) × N."""
    main_term, correction_term = sp_terms(params)
    return params.time_constant * (main_term + correction_term) * params.sets


def error_rate_percent(approx_seconds: float, exact_seconds: float) -> float:
    """Signed relative error in percent. Positive means the approximation overestimates."""
    return (approx_seconds - exact_seconds) / exact_seconds * 100


def error_profile(
    start_tempo: float,
    end_tempo: float,
    step_sizes: Iterable[float],
    beats_per_phrase: int = 1,
    repetitions: int = 1,
    sets: int = 1,
) -> list[ApproximationPoint]:
    """
    Evaluate the S-P formula against the exact sum for several step sizes.

    The error is independent of B, R and N (they scale both totals by the
    same factor), so the defaults only affect the reported seconds.

    The error does not vanish as steps get finer. For a fixed range it
    settles at the gap between the rational mean and the logarithmic mean
    of a and b', which is small when b'/a is close to 1.

    Args:
        start_tempo: Starting BPM.
        end_tempo: Target BPM.
        step_sizes: Step sizes to evaluate, in the order they should be reported.
        beats_per_phrase, repetitions, sets: Passed through to validation.

    Returns:
        One ApproximationPoint per step size.

    Raises:
        ValidationError: On the first step size that yields invalid parameters.
    """
    points = []
    for step_size in step_sizes:
        params = validate_parameters(
            start_tempo, end_tempo, step_size, beats_per_phrase, repetitions, sets,
        )
        exact = exact_total_seconds(params)
        approx = approx_total_seconds(params)
        points.append(ApproximationPoint(
            step_size=params.step_size,
            step_count=params.step_count,
            exact_seconds=exact,
            approx_seconds=approx,
            error_rate_percent=error_rate_percent(approx, exact),
        ))
    return points
