"""Human-readable renderings of PracticeResult numbers."""

import math


def format_time(seconds: float) -> str:
    """
    Format seconds as "M:SS", or "H:MM:SS" once an hour is reached.

    Fractions of a second are truncated, not rounded.
    """
    hours = math.floor(seconds / 3600)
    minutes = math.floor((seconds % 3600) / 60)
    secs = math.floor(seconds % 60)

    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"


def format_seconds(seconds: float, decimals: int = 2) -> str:
    return f"{seconds:.{decimals}f} s"


def format_error_rate(rate_percent: float) -> str:
    """Signed percentage with four decimals, e.g. "+1.3423%"."""
    sign = "+" if rate_percent >= 0 else ""
    return f"{sign}{rate_percent:.4f}%"
