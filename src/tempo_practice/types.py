"""
Data types for tempo practice calculation.

This module defines all shared types. It has no dependencies beyond
the standard library.
"""

import math
from dataclasses import dataclass
from enum import Enum


class ErrorKind(Enum):
    """Which validation rule rejected the input."""
    NON_POSITIVE_STEP = "non_positive_step"
    NON_POSITIVE_TEMPO = "non_positive_tempo"
    INVALID_TEMPO_RANGE = "invalid_tempo_range"
    NON_POSITIVE_COUNT = "non_positive_count"


@dataclass(frozen=True)
class PracticeParameters:
    """
    One practice plan: climb from start_tempo toward end_tempo in step_size increments.

    Only produced by validate_parameters(), so the invariants
    0 < start_tempo < end_tempo, step_size > 0 and counts >= 1 always hold.
    """
    start_tempo: float       # a, BPM
    end_tempo: float         # b, BPM (target, may not be reached exactly)
    step_size: float         # s, BPM added per step
    beats_per_phrase: int    # B
    repetitions: int         # R, phrase repetitions per tempo step
    sets: int                # N, full climbs from a to b'

    @property
    def total_beats_per_step(self) -> int:
        """K = B × R, beats played at each tempo step in one set."""
        return self.beats_per_phrase * self.repetitions

    @property
    def step_count(self) -> int:
        """n = floor((b - a) / s), increments taken beyond the start tempo."""
        return math.floor((self.end_tempo - self.start_tempo) / self.step_size)

    @property
    def actual_end_tempo(self) -> float:
        """b' = a + n·s, the last tempo actually practised."""
        return self.start_tempo + self.step_count * self.step_size

    @property
    def time_constant(self) -> float:
        """C = 60 × K. Seconds for one step at tempo t are C / t."""
        return 60.0 * self.total_beats_per_step


@dataclass(frozen=True)
class PracticeResult:
    """
    The contract between the engine and whatever displays it.

    Plain numbers only, no formatting. See tempo_practice.formatting for
    human-readable renderings.
    """
    exact_seconds: float        # Kahan-summed total
    approx_seconds: float       # S-P formula total
    error_rate_percent: float   # (approx - exact) / exact × 100, positive = overestimate
    step_count: int             # n
    actual_end_tempo: float     # b'
    total_beats_per_step: int   # K
    time_constant: float        # C
    parameters: PracticeParameters


@dataclass(frozen=True)
class ApproximationPoint:
    """One row of an error profile: how the S-P formula fares at a given step size."""
    step_size: float
    step_count: int
    exact_seconds: float
    approx_seconds: float
    error_rate_percent: float
