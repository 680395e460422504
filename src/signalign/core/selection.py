"""Pick the cheapest alignment among all candidate sequence pairings."""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from itertools import product
from typing import List, Optional, Tuple

import numpy as np

from ..utils.logging import get_logger
from ..utils.validation import validate_candidates, validate_max_workers
from .alignment import align_sequences
from .diff import Differ, indel_diff
from .models import ChangeIds, Line, SignSequence
from .penalty import PenaltyWeights, calculate_penalty

logger = get_logger(__name__)


@dataclass
class MatchResult:
    """Best correspondence list and the pairing it came from."""

    change_ids: List[ChangeIds]
    penalty: int
    source_index: int
    target_index: int


def _evaluate_pairing(
    source_line: Line,
    target_line: Line,
    source: SignSequence,
    target: SignSequence,
    differ: Differ,
    weights: PenaltyWeights,
) -> Tuple[List[ChangeIds], int]:
    blocks = differ(source.text, target.text)
    change_ids = align_sequences(source, target, blocks)
    penalty = calculate_penalty(change_ids, source_line, target_line, weights)
    return change_ids, penalty


def select_best_match(
    source_line: Line,
    target_line: Line,
    differ: Optional[Differ] = None,
    weights: Optional[PenaltyWeights] = None,
    max_workers: int = 1,
) -> MatchResult:
    """Diff, align and score every source/target candidate pairing.

    Source candidates form the outer loop and target candidates the inner
    one; among equal penalties the first pairing in that order wins, whether
    or not the pairings were evaluated in parallel.

    Raises:
        ConfigError: If either line has no candidate sequences.
        SignNotFoundError: If a sequence holds an id its line cannot resolve.
    """
    validate_candidates(source_line, "source line")
    validate_candidates(target_line, "target line")
    validate_max_workers(max_workers)

    differ = differ or indel_diff
    weights = weights or PenaltyWeights()
    sources = source_line.candidate_sequences()
    targets = target_line.candidate_sequences()
    pairs = list(product(sources, targets))

    def evaluate(pair: Tuple[SignSequence, SignSequence]):
        return _evaluate_pairing(
            source_line, target_line, pair[0], pair[1], differ, weights
        )

    if max_workers > 1 and len(pairs) > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            results = list(executor.map(evaluate, pairs))
    else:
        results = [evaluate(pair) for pair in pairs]

    # argmin returns the first minimum in row-major (source, target) order
    penalties = np.array([penalty for _, penalty in results], dtype=np.int64)
    best = int(np.argmin(penalties))
    source_index, target_index = divmod(best, len(targets))

    if logger.isEnabledFor(logging.DEBUG):
        for idx, (_, penalty) in enumerate(results):
            s_idx, t_idx = divmod(idx, len(targets))
            logger.debug(
                "Pairing source[%d] %r / target[%d] %r: penalty %d",
                s_idx,
                sources[s_idx].text,
                t_idx,
                targets[t_idx].text,
                penalty,
            )
        logger.debug(
            "Best pairing source[%d] / target[%d] of %dx%d with penalty %d",
            source_index,
            target_index,
            len(sources),
            len(targets),
            int(penalties[best]),
        )

    change_ids, penalty = results[best]
    return MatchResult(
        change_ids=change_ids,
        penalty=penalty,
        source_index=source_index,
        target_index=target_index,
    )
