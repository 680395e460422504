"""Validation utilities."""

from ..exceptions import ConfigError


def validate_candidates(line, role: str = "line") -> None:
    """Ensure a line offers at least one candidate sequence."""
    if not line.candidate_sequences():
        name = f" {line.name!r}" if getattr(line, "name", "") else ""
        raise ConfigError(f"{role.capitalize()}{name} has no candidate sequences")


def validate_penalty_weight(name: str, value: int) -> int:
    """Validate a single penalty weight."""
    if not isinstance(value, int) or isinstance(value, bool):
        raise ConfigError(f"Penalty weight {name} must be an integer, got {value!r}")
    if value < 0:
        raise ConfigError(f"Penalty weight {name} must be non-negative")
    return value


def validate_max_workers(max_workers: int) -> int:
    """Validate the worker count used for pairing evaluation."""
    if not isinstance(max_workers, int) or isinstance(max_workers, bool):
        raise ConfigError(f"max_workers must be an integer, got {max_workers!r}")
    if max_workers < 1:
        raise ConfigError("max_workers must be at least 1")
    return max_workers
