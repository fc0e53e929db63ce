"""
Input validation for practice parameters.

Pure function: raw numbers in, PracticeParameters out (or a ValidationError).
Check order is fixed so the same bad input always reports the same error.
"""

import math
import numbers

from tempo_practice.errors import (
    InvalidTempoRangeError,
    NonPositiveCountError,
    NonPositiveStepError,
    NonPositiveTempoError,
)
from tempo_practice.types import PracticeParameters


def _is_positive(value: float) -> bool:
    # NaN compares False, so it fails here too
    return value > 0 and math.isfinite(value)


def _as_count(value) -> int | None:
    """Return value as a positive int, or None if it is not a positive whole number."""
    if isinstance(value, bool):
        return None
    if isinstance(value, numbers.Integral):
        count = int(value)
    elif isinstance(value, numbers.Real) and math.isfinite(value) and float(value).is_integer():
        count = int(value)
    else:
        return None
    return count if count > 0 else None


def validate_parameters(
    start_tempo: float,
    end_tempo: float,
    step_size: float,
    beats_per_phrase: int,
    repetitions: int,
    sets: int,
) -> PracticeParameters:
    """
    Check raw inputs and build PracticeParameters.

    Checks, first failure wins:
    1. step_size > 0                      → NonPositiveStepError
    2. start_tempo > 0 and end_tempo > 0  → NonPositiveTempoError
    3. start_tempo < end_tempo            → InvalidTempoRangeError
    4. counts are positive whole numbers  → NonPositiveCountError

    Args:
        start_tempo: Starting BPM (a).
        end_tempo: Target BPM (b).
        step_size: BPM added per step (s).
        beats_per_phrase: Beats in one phrase (B).
        repetitions: Phrase repetitions per tempo step (R).
        sets: Number of full climbs (N).

    Returns:
        Validated, immutable PracticeParameters.
    """
    if not _is_positive(step_size):
        raise NonPositiveStepError(
            f"step size must be a positive number, got {step_size!r}"
        )

    if not (_is_positive(start_tempo) and _is_positive(end_tempo)):
        raise NonPositiveTempoError(
            f"tempos must be positive numbers, got start={start_tempo!r} end={end_tempo!r}"
        )

    if not start_tempo < end_tempo:
        raise InvalidTempoRangeError(
            f"target tempo ({end_tempo}) must be greater than start tempo ({start_tempo})"
        )

    counts = {
        "beats_per_phrase": beats_per_phrase,
        "repetitions": repetitions,
        "sets": sets,
    }
    checked: dict[str, int] = {}
    for name, value in counts.items():
        count = _as_count(value)
        if count is None:
            raise NonPositiveCountError(
                f"{name} must be a positive whole number, got {value!r}"
            )
        checked[name] = count

    return PracticeParameters(
        start_tempo=float(start_tempo),
        end_tempo=float(end_tempo),
        step_size=float(step_size),
        **checked,
    )
