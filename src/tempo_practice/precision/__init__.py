from tempo_practice.precision.summation import kahan_sum, naive_sum
from tempo_practice.precision.validate import validate_parameters
from tempo_practice.precision.exact import exact_total_seconds, step_tempos, step_times
from tempo_practice.precision.approximate import (
    approx_total_seconds,
    error_profile,
    error_rate_percent,
    sp_terms,
)

__all__ = [
    "kahan_sum",
    "naive_sum",
    "validate_parameters",
    "exact_total_seconds",
    "step_tempos",
    "step_times",
    "approx_total_seconds",
    "error_profile",
    "error_rate_percent",
    "sp_terms",
]
