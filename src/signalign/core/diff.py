"""Character diffs between two flattened sign strings.

Both differs return an ascending list of :class:`DiffBlock` regions; the text
between two blocks is equal on both sides.
"""

from difflib import SequenceMatcher
from typing import Callable, Dict, Iterable, List, Tuple

from rapidfuzz.distance import Indel

from ..exceptions import ConfigError
from .models import DiffBlock

Differ = Callable[[str, str], List[DiffBlock]]


def _blocks_from_opcodes(
    opcodes: Iterable[Tuple[str, int, int, int, int]]
) -> List[DiffBlock]:
    """Collapse non-equal opcodes into blocks, merging touching ones."""
    blocks: List[DiffBlock] = []

    for tag, i1, i2, j1, j2 in opcodes:
        if tag == "equal" or (i1 == i2 and j1 == j2):
            continue
        if blocks:
            last = blocks[-1]
            if last.delete_start + last.delete_count == i1 and (
                last.insert_start + last.insert_count == j1
            ):
                blocks[-1] = last._replace(
                    delete_count=last.delete_count + (i2 - i1),
                    insert_count=last.insert_count + (j2 - j1),
                )
                continue
        blocks.append(DiffBlock(i1, i2 - i1, j1, j2 - j1))

    return blocks


def indel_diff(a: str, b: str) -> List[DiffBlock]:
    """Minimal edit-distance character diff of ``a`` against ``b``.

    Uses the shortest insert/delete script (the LCS alignment Myers' algorithm
    finds). A deletion directly followed by an insertion is one block, which
    the aligner then pairs up as substitutions.
    """
    return _blocks_from_opcodes(
        (op.tag, op.src_start, op.src_end, op.dest_start, op.dest_end)
        for op in Indel.opcodes(a, b)
    )


def sequence_matcher_diff(a: str, b: str) -> List[DiffBlock]:
    """Character diff built from :class:`difflib.SequenceMatcher` opcodes.

    Not guaranteed to be minimal, but often closer to what a reader would
    call the "same" region.
    """
    matcher = SequenceMatcher(None, a, b, autojunk=False)
    return _blocks_from_opcodes(matcher.get_opcodes())


# "myers" names the minimal-edit differ, whatever computes it
DIFFERS: Dict[str, Differ] = {
    "myers": indel_diff,
    "difflib": sequence_matcher_diff,
}


def get_differ(name: str) -> Differ:
    """Resolve a differ by name."""
    try:
        return DIFFERS[name]
    except KeyError:
        raise ConfigError(
            f"Unknown differ: {name}. Use one of: {', '.join(DIFFERS)}"
        ) from None
