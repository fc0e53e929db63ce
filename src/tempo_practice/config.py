"""
CLI defaults from the environment.

Set any of these in the environment or a .env file:
    TEMPO_PRACTICE_BEATS_PER_PHRASE=4
    TEMPO_PRACTICE_REPETITIONS=1
    TEMPO_PRACTICE_SETS=1
    TEMPO_PRACTICE_LOG_LEVEL=WARNING

Only the CLI reads these. The library API always takes explicit arguments.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from tempo_practice.errors import ConfigurationError

ENV_PREFIX = "TEMPO_PRACTICE_"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class PracticeDefaults:
    """Fallback values for CLI options the user did not pass."""
    beats_per_phrase: int = 4
    repetitions: int = 1
    sets: int = 1
    log_level: str = "WARNING"


def _int_setting(name: str, default: int) -> int:
    raw = os.getenv(ENV_PREFIX + name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError as e:
        raise ConfigurationError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}") from e
    if value <= 0:
        raise ConfigurationError(f"{ENV_PREFIX}{name} must be positive, got {value}")
    return value


def load_defaults(env_file: str | Path | None = None) -> PracticeDefaults:
    """
    Read CLI defaults, loading a .env file first.

    Variables already set in the environment win over the .env file.

    Args:
        env_file: Path to a .env file. If None, search upward from the
            working directory.

    Returns:
        PracticeDefaults with every unset value left at its default.
    """
    load_dotenv(env_file if env_file is not None else find_dotenv(usecwd=True))

    base = PracticeDefaults()
    log_level = (os.getenv(ENV_PREFIX + "LOG_LEVEL") or base.log_level).strip().upper()
    if log_level not in _LOG_LEVELS:
        raise ConfigurationError(
            f"{ENV_PREFIX}LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}, got {log_level!r}"
        )

    return PracticeDefaults(
        beats_per_phrase=_int_setting("BEATS_PER_PHRASE", base.beats_per_phrase),
        repetitions=_int_setting("REPETITIONS", base.repetitions),
        sets=_int_setting("SETS", base.sets),
        log_level=log_level,
    )
