"""Utility modules."""

from .logging import setup_logging, get_logger
from .validation import (
    validate_candidates,
    validate_penalty_weight,
    validate_max_workers,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "validate_candidates",
    "validate_penalty_weight",
    "validate_max_workers",
]
