"""Custom exceptions for tempo-practice."""

from tempo_practice.types import ErrorKind


class TempoPracticeError(Exception):
    """Base exception for all tempo-practice errors."""

    pass


class ConfigurationError(TempoPracticeError):
    """Malformed value in the environment or .env file."""

    pass


class ValidationError(TempoPracticeError, ValueError):
    """
    Input rejected before any computation.

    Every subclass carries a fixed ErrorKind so callers can branch on
    `err.kind` instead of matching message text.
    """

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NonPositiveStepError(ValidationError):
    """step_size <= 0."""

    kind = ErrorKind.NON_POSITIVE_STEP


class NonPositiveTempoError(ValidationError):
    """start_tempo <= 0 or end_tempo <= 0."""

    kind = ErrorKind.NON_POSITIVE_TEMPO


class InvalidTempoRangeError(ValidationError):
    """start_tempo >= end_tempo."""

    kind = ErrorKind.INVALID_TEMPO_RANGE


class NonPositiveCountError(ValidationError):
    """beats_per_phrase, repetitions or sets is not a positive whole number."""

    kind = ErrorKind.NON_POSITIVE_COUNT
