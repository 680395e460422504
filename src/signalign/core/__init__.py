"""Core alignment engine."""

from .models import (
    ChangeIds,
    DiffBlock,
    Line,
    SignInterpretation,
    SignKind,
    SignSequence,
)
from .diff import get_differ, indel_diff, sequence_matcher_diff
from .alignment import align_sequences
from .penalty import PenaltyWeights, calculate_penalty
from .selection import MatchResult, select_best_match
from .optimization import compact_adjacent_runs, propagate_character_matches
from .comparer import CompareOptions, LineComparer, compare_lines

__all__ = [
    "ChangeIds",
    "DiffBlock",
    "Line",
    "SignInterpretation",
    "SignKind",
    "SignSequence",
    "get_differ",
    "indel_diff",
    "sequence_matcher_diff",
    "align_sequences",
    "PenaltyWeights",
    "calculate_penalty",
    "MatchResult",
    "select_best_match",
    "compact_adjacent_runs",
    "propagate_character_matches",
    "CompareOptions",
    "LineComparer",
    "compare_lines",
]
