"""Configuration settings for signalign."""

import os

from .exceptions import ConfigError


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


# Penalty weights (can be overridden via environment variables)
MISSING_TARGET_PENALTY = int(os.getenv("SIGNALIGN_MISSING_TARGET_PENALTY", "10"))
MISSING_SOURCE_PENALTY = int(os.getenv("SIGNALIGN_MISSING_SOURCE_PENALTY", "5"))
SUBSTITUTION_PENALTY = int(os.getenv("SIGNALIGN_SUBSTITUTION_PENALTY", "1"))

# Optimizer passes are off unless explicitly requested
COMPACT_RUNS = _env_flag("SIGNALIGN_COMPACT_RUNS", False)
PROPAGATE_MATCHES = _env_flag("SIGNALIGN_PROPAGATE_MATCHES", False)

# Diff primitive
KNOWN_DIFFERS = ("myers", "difflib")
DEFAULT_DIFFER = os.getenv("SIGNALIGN_DIFFER", "myers")

# Pairing evaluation
MAX_WORKERS = int(os.getenv("SIGNALIGN_MAX_WORKERS", "1"))


def validate_config() -> None:
    """Validate configuration values."""
    if MISSING_TARGET_PENALTY < 0:
        raise ConfigError("MISSING_TARGET_PENALTY must be non-negative")

    if MISSING_SOURCE_PENALTY < 0:
        raise ConfigError("MISSING_SOURCE_PENALTY must be non-negative")

    if SUBSTITUTION_PENALTY < 0:
        raise ConfigError("SUBSTITUTION_PENALTY must be non-negative")

    if DEFAULT_DIFFER not in KNOWN_DIFFERS:
        raise ConfigError(
            f"Unknown differ: {DEFAULT_DIFFER}. "
            f"Use one of: {', '.join(KNOWN_DIFFERS)}"
        )

    if MAX_WORKERS < 1:
        raise ConfigError("MAX_WORKERS must be at least 1")


# Validate config on import
validate_config()
