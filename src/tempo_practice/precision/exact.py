"""
Exact practice time: sum the duration of every tempo step.

Ground truth the approximation is judged against.
Pure functions: PracticeParameters in, seconds out. O(n) in the step count.
"""

import numpy as np

from tempo_practice.precision.summation import kahan_sum
from tempo_practice.types import PracticeParameters


def step_tempos(params: PracticeParameters) -> np.ndarray:
    """
    Tempo of every step in one set.

    tempo_k = a + s·k for k = 0..n, so the array always has n + 1 entries
    and starts at the start tempo.
    """
    k = np.arange(params.step_count + 1, dtype=np.float64)
    return params.start_tempo + params.step_size * k


def step_times(params: PracticeParameters) -> np.ndarray:
    """Seconds spent at each step in one set: C / tempo_k."""
    return params.time_constant / step_tempos(params)


def exact_total_seconds(params: PracticeParameters) -> float:
    """
    Total practice time across all sets by explicit summation.

    The per-step times are reduced with Kahan summation; step counts in
    the thousands lose no meaningful precision. When n = 0 the sum has a
    single term and the result is exactly C / a × N.

    Args:
        params: Validated practice parameters.

    Returns:
        Total seconds.
    """
    per_set = kahan_sum(step_times(params).tolist())
    return per_set * params.sets
