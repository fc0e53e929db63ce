"""
Main calculation pipeline.

Orchestrates validation and both precision engines
to produce a PracticeResult from raw numbers.
"""

import logging

from tempo_practice.precision.approximate import (
    approx_total_seconds,
    error_rate_percent,
)
from tempo_practice.precision.exact import exact_total_seconds
from tempo_practice.precision.validate import validate_parameters
from tempo_practice.types import PracticeParameters, PracticeResult

logger = logging.getLogger(__name__)


def calculate_practice_time(params: PracticeParameters) -> PracticeResult:
    """
    Run the exact and approximate engines on validated parameters.

    Both engines read the same params and share no state, so the result
    depends on params alone.

    Args:
        params: Output of validate_parameters().

    Returns:
        PracticeResult with both totals, their error rate and the derived quantities.
    """
    logger.debug(
        "Derived K=%d C=%.1f n=%d b'=%s",
        params.total_beats_per_step,
        params.time_constant,
        params.step_count,
        params.actual_end_tempo,
    )

    exact = exact_total_seconds(params)
    approx = approx_total_seconds(params)
    error = error_rate_percent(approx, exact)

    logger.debug("exact=%.6fs approx=%.6fs error=%+.4f%%", exact, approx, error)

    return PracticeResult(
        exact_seconds=exact,
        approx_seconds=approx,
        error_rate_percent=error,
        step_count=params.step_count,
        actual_end_tempo=params.actual_end_tempo,
        total_beats_per_step=params.total_beats_per_step,
        time_constant=params.time_constant,
        parameters=params,
    )


def calculate(
    start_tempo: float,
    end_tempo: float,
    step_size: float,
    beats_per_phrase: int,
    repetitions: int,
    sets: int,
) -> PracticeResult:
    """
    Validate raw inputs, then calculate.

    Fails fast: a ValidationError is raised before either engine runs.

    Args:
        start_tempo: Starting BPM.
        end_tempo: Target BPM.
        step_size: BPM added per step.
        beats_per_phrase: Beats in one phrase.
        repetitions: Phrase repetitions per tempo step.
        sets: Number of full climbs from start to target.

    Returns:
        PracticeResult for the validated parameters.
    """
    params = validate_parameters(
        start_tempo, end_tempo, step_size, beats_per_phrase, repetitions, sets,
    )
    return calculate_practice_time(params)
