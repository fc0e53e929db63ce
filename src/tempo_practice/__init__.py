"""
tempo-practice: How long does a stepwise tempo climb take to practise?

Usage:
    from tempo_practice import calculate
    result = calculate(60, 120, 10, beats_per_phrase=4, repetitions=2, sets=3)
    print(result.exact_seconds, result.approx_seconds, result.error_rate_percent)

For the summation primitive alone:
    from tempo_practice.precision.summation import kahan_sum
    total = kahan_sum([0.1] * 10)
"""

__version__ = "0.1.0"

from tempo_practice.types import (
    ApproximationPoint,
    ErrorKind,
    PracticeParameters,
    PracticeResult,
)
from tempo_practice.errors import (
    ConfigurationError,
    InvalidTempoRangeError,
    NonPositiveCountError,
    NonPositiveStepError,
    NonPositiveTempoError,
    TempoPracticeError,
    ValidationError,
)
from tempo_practice.calculate import calculate, calculate_practice_time
from tempo_practice.precision.validate import validate_parameters

__all__ = [
    "calculate",
    "calculate_practice_time",
    "validate_parameters",
    "ApproximationPoint",
    "ErrorKind",
    "PracticeParameters",
    "PracticeResult",
    "ConfigurationError",
    "InvalidTempoRangeError",
    "NonPositiveCountError",
    "NonPositiveStepError",
    "NonPositiveTempoError",
    "TempoPracticeError",
    "ValidationError",
]
