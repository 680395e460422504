"""Turn a character diff into a gap-free list of correspondence entries."""

from typing import Iterable, List

from .models import ChangeIds, DiffBlock, SignSequence


def align_sequences(
    source: SignSequence,
    target: SignSequence,
    blocks: Iterable[DiffBlock],
) -> List[ChangeIds]:
    """Pair every position of ``source`` and ``target`` using diff blocks.

    ``blocks`` must come from diffing ``source.text`` against
    ``target.text``: deletions refer to source offsets, insertions to target
    offsets.

    Returns:
        Entries in traversal order. Each source and each target position
        appears exactly once; unmatched positions get an entry with the other
        side left empty.
    """
    source_len = len(source)
    target_len = len(target)
    source_pos = 0
    target_pos = 0
    change_ids: List[ChangeIds] = []

    for block in blocks:
        # Unchanged run before the block; both sides must still be in range
        while (
            source_pos < block.delete_start
            and target_pos < block.insert_start
            and source_pos < source_len
            and target_pos < target_len
        ):
            change_ids.append(
                ChangeIds(source.id_at(source_pos), target.id_at(target_pos))
            )
            source_pos += 1
            target_pos += 1

        deleted = block.delete_count
        inserted = block.insert_count

        # Substitutions, even if the characters differ
        while deleted > 0 and inserted > 0:
            change_ids.append(
                ChangeIds(source.id_at(source_pos), target.id_at(target_pos))
            )
            source_pos += 1
            target_pos += 1
            deleted -= 1
            inserted -= 1

        while deleted > 0:
            change_ids.append(ChangeIds(source_id=source.id_at(source_pos)))
            source_pos += 1
            deleted -= 1

        while inserted > 0:
            change_ids.append(ChangeIds(target_id=target.id_at(target_pos)))
            target_pos += 1
            inserted -= 1

    while source_pos < source_len and target_pos < target_len:
        change_ids.append(ChangeIds(source.id_at(source_pos), target.id_at(target_pos)))
        source_pos += 1
        target_pos += 1

    while source_pos < source_len:
        change_ids.append(ChangeIds(source_id=source.id_at(source_pos)))
        source_pos += 1

    while target_pos < target_len:
        change_ids.append(ChangeIds(target_id=target.id_at(target_pos)))
        target_pos += 1

    return change_ids
