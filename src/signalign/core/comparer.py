"""Compare two lines and produce the correspondence list for their best match."""

from dataclasses import dataclass, field
from typing import List, Optional

from .. import config
from ..utils.logging import get_logger
from .diff import get_differ
from .models import ChangeIds, Line
from .optimization import compact_adjacent_runs, propagate_character_matches
from .penalty import PenaltyWeights, calculate_penalty
from .selection import MatchResult, select_best_match

logger = get_logger(__name__)


@dataclass(frozen=True)
class CompareOptions:
    """Knobs for a line comparison.

    Attributes:
        compact_runs: Fold adjacent deletion/insertion runs into substitutions.
        propagate_matches: Shift matches one slot when characters agree.
        differ: Name of the diff primitive ("myers" or "difflib").
        weights: Penalty weights used to rank pairings.
        max_workers: Threads used to evaluate candidate pairings.
    """

    compact_runs: bool = field(default_factory=lambda: config.COMPACT_RUNS)
    propagate_matches: bool = field(default_factory=lambda: config.PROPAGATE_MATCHES)
    differ: str = field(default_factory=lambda: config.DEFAULT_DIFFER)
    weights: PenaltyWeights = field(default_factory=PenaltyWeights)
    max_workers: int = field(default_factory=lambda: config.MAX_WORKERS)


class LineComparer:
    """Runs best-match selection followed by the enabled refinement passes."""

    def __init__(self, options: Optional[CompareOptions] = None):
        self.options = options or CompareOptions()
        self._differ = get_differ(self.options.differ)

    def compare_detailed(self, source_line: Line, target_line: Line) -> MatchResult:
        options = self.options
        match = select_best_match(
            source_line,
            target_line,
            differ=self._differ,
            weights=options.weights,
            max_workers=options.max_workers,
        )

        change_ids = match.change_ids
        if options.compact_runs:
            change_ids = compact_adjacent_runs(change_ids)
        if options.propagate_matches:
            change_ids = propagate_character_matches(
                change_ids, source_line, target_line
            )

        if change_ids is match.change_ids:
            return match

        penalty = calculate_penalty(
            change_ids, source_line, target_line, options.weights
        )
        logger.debug(
            "Penalty of %r after refinement: %d -> %d",
            source_line.name or "line",
            match.penalty,
            penalty,
        )
        return MatchResult(
            change_ids=change_ids,
            penalty=penalty,
            source_index=match.source_index,
            target_index=match.target_index,
        )

    def compare(self, source_line: Line, target_line: Line) -> List[ChangeIds]:
        return self.compare_detailed(source_line, target_line).change_ids


def compare_lines(
    source_line: Line,
    target_line: Line,
    options: Optional[CompareOptions] = None,
) -> List[ChangeIds]:
    """Return the correspondence list for the best match of two lines."""
    return LineComparer(options).compare(source_line, target_line)
