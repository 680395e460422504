"""Refinement passes over a correspondence list.

Both passes return a new list and leave their input untouched.
"""

from collections import deque
from dataclasses import replace
from typing import Deque, Iterable, List

from ..utils.logging import get_logger
from .models import ChangeIds, Line

logger = get_logger(__name__)


def compact_adjacent_runs(change_ids: Iterable[ChangeIds]) -> List[ChangeIds]:
    """Fold unpaired deletions and insertions of one run into substitutions.

    A run is a stretch of unpaired entries between two paired ones. Within a
    run, each deletion fills the earliest still-open insertion slot (and vice
    versa) instead of being kept as its own entry. A paired entry closes the
    run, so nothing is combined across it.
    """
    result: List[ChangeIds] = []
    open_deletions: Deque[int] = deque()
    open_insertions: Deque[int] = deque()
    merged = 0

    for entry in change_ids:
        if entry.is_deletion:
            if open_insertions:
                slot = open_insertions.popleft()
                result[slot] = replace(result[slot], source_id=entry.source_id)
                merged += 1
                continue
            open_deletions.append(len(result))
        elif entry.is_insertion:
            if open_deletions:
                slot = open_deletions.popleft()
                result[slot] = replace(result[slot], target_id=entry.target_id)
                merged += 1
                continue
            open_insertions.append(len(result))
        else:
            open_deletions.clear()
            open_insertions.clear()
        result.append(entry)

    if merged:
        logger.debug("Compacted %d deletion/insertion pairs", merged)
    return result


def propagate_character_matches(
    change_ids: Iterable[ChangeIds],
    source_line: Line,
    target_line: Line,
) -> List[ChangeIds]:
    """Move a match one slot back when the characters say it belongs there.

    An unpaired entry followed by a paired one takes over the paired entry's
    id from the other side if that makes its own character match; the paired
    entry is left unpaired instead. Scans repeat until nothing moves. Ids
    only ever move towards the front, so this terminates.
    """
    entries = list(change_ids)
    passes = 0
    changed = True

    while changed:
        changed = False
        passes += 1
        for i in range(len(entries) - 1):
            current = entries[i]
            following = entries[i + 1]
            if not following.is_paired:
                continue

            if current.is_deletion:
                source_char = source_line.character_for(current.source_id)
                target_char = target_line.character_for(following.target_id)
                if source_char == target_char:
                    entries[i] = replace(current, target_id=following.target_id)
                    entries[i + 1] = replace(following, target_id=None)
                    changed = True
            elif current.is_insertion:
                source_char = source_line.character_for(following.source_id)
                target_char = target_line.character_for(current.target_id)
                if source_char == target_char:
                    entries[i] = replace(current, source_id=following.source_id)
                    entries[i + 1] = replace(following, source_id=None)
                    changed = True

    logger.debug("Character propagation settled after %d passes", passes)
    return entries
