"""signalign - character-level reconciliation of two renditions of a line."""

__version__ = "0.1.0"

from .exceptions import (
    ConfigError,
    SignAlignError,
    SignNotFoundError,
    ValidationError,
)
from .core import (
    ChangeIds,
    CompareOptions,
    Line,
    LineComparer,
    MatchResult,
    PenaltyWeights,
    SignInterpretation,
    SignKind,
    SignSequence,
    compare_lines,
)

__all__ = [
    "__version__",
    "ConfigError",
    "SignAlignError",
    "SignNotFoundError",
    "ValidationError",
    "ChangeIds",
    "CompareOptions",
    "Line",
    "LineComparer",
    "MatchResult",
    "PenaltyWeights",
    "SignInterpretation",
    "SignKind",
    "SignSequence",
    "compare_lines",
]
