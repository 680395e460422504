"""Penalty model for scoring a correspondence list."""

from dataclasses import dataclass, field
from typing import Iterable, Optional

from .. import config
from ..utils.validation import validate_penalty_weight
from .models import ChangeIds, Line


@dataclass(frozen=True)
class PenaltyWeights:
    """Cost of each entry shape; an exact character match costs nothing.

    The weights are empirical: dropping a source sign is penalised more than
    leaving a target sign unmatched, which favours pairings that keep target
    content.
    """

    missing_target: int = field(default_factory=lambda: config.MISSING_TARGET_PENALTY)
    missing_source: int = field(default_factory=lambda: config.MISSING_SOURCE_PENALTY)
    substitution: int = field(default_factory=lambda: config.SUBSTITUTION_PENALTY)

    def __post_init__(self):
        validate_penalty_weight("missing_target", self.missing_target)
        validate_penalty_weight("missing_source", self.missing_source)
        validate_penalty_weight("substitution", self.substitution)


def entry_penalty(
    entry: ChangeIds,
    source_line: Line,
    target_line: Line,
    weights: PenaltyWeights,
) -> int:
    """Cost of a single entry. Raises SignNotFoundError for foreign ids."""
    if entry.target_id is None:
        source_line.sign_for(entry.source_id)
        return weights.missing_target
    if entry.source_id is None:
        target_line.sign_for(entry.target_id)
        return weights.missing_source

    source_char = source_line.character_for(entry.source_id)
    target_char = target_line.character_for(entry.target_id)
    return 0 if source_char == target_char else weights.substitution


def calculate_penalty(
    change_ids: Iterable[ChangeIds],
    source_line: Line,
    target_line: Line,
    weights: Optional[PenaltyWeights] = None,
) -> int:
    """Total penalty of a correspondence list; lower is better."""
    weights = weights or PenaltyWeights()
    return sum(
        entry_penalty(entry, source_line, target_line, weights)
        for entry in change_ids
    )
