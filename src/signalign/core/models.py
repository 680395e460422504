"""Data models for sign sequences, lines and their correspondence."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, NamedTuple, Optional, Tuple

from ..exceptions import SignNotFoundError, ValidationError
from .constants import (
    BREAK_CHARACTER,
    SPACE_CHARACTER,
    UNKNOWN_CHARACTER,
    VACAT_CHARACTER,
)


class SignKind(str, Enum):
    """What a sign interpretation stands for in the transcription."""

    LETTER = "letter"
    SPACE = "space"
    VACAT = "vacat"
    BREAK = "break"


_KIND_CHARACTERS = {
    SignKind.SPACE: SPACE_CHARACTER,
    SignKind.VACAT: VACAT_CHARACTER,
    SignKind.BREAK: BREAK_CHARACTER,
}


@dataclass(frozen=True)
class SignInterpretation:
    """A single character-bearing unit of a transcription."""

    id: int
    character: str
    kind: SignKind = SignKind.LETTER

    @property
    def comparison_character(self) -> str:
        """Character this sign contributes to a flattened diff string."""
        if self.kind in _KIND_CHARACTERS:
            return _KIND_CHARACTERS[self.kind]
        return self.character or UNKNOWN_CHARACTER


@dataclass(frozen=True)
class SignSequence:
    """One concrete, ordered rendition of the signs of a line.

    Positions are 0-based. ``text`` is the concatenation of the comparison
    characters and is what gets diffed, so every sign must flatten to exactly
    one character.
    """

    signs: Tuple[SignInterpretation, ...]

    def __post_init__(self):
        object.__setattr__(self, "signs", tuple(self.signs))
        for sign in self.signs:
            if len(sign.comparison_character) != 1:
                raise ValidationError(
                    f"Sign {sign.id} flattens to {sign.comparison_character!r}; "
                    "comparison characters must be a single character"
                )

    def __len__(self) -> int:
        return len(self.signs)

    def count(self) -> int:
        return len(self.signs)

    def id_at(self, position: int) -> int:
        return self.signs[position].id

    @property
    def ids(self) -> Tuple[int, ...]:
        return tuple(sign.id for sign in self.signs)

    @property
    def text(self) -> str:
        return "".join(sign.comparison_character for sign in self.signs)

    @classmethod
    def from_text(cls, text: str, start_id: int = 0) -> "SignSequence":
        """Build a sequence of plain letters with consecutive ids."""
        return cls(
            tuple(
                SignInterpretation(id=start_id + i, character=char)
                for i, char in enumerate(text)
            )
        )


@dataclass(frozen=True)
class Line:
    """All candidate sequences describing the same logical line.

    Sign interpretation ids are shared between candidates: the same id must
    always denote the same sign within one line. Lines are immutable so the
    id index always matches ``sequences``.
    """

    sequences: Tuple[SignSequence, ...]
    name: str = ""
    _signs: Dict[int, SignInterpretation] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self):
        sequences = tuple(self.sequences)
        signs: Dict[int, SignInterpretation] = {}
        object.__setattr__(self, "sequences", sequences)
        object.__setattr__(self, "_signs", signs)
        for sequence in sequences:
            for sign in sequence.signs:
                known = signs.setdefault(sign.id, sign)
                if known != sign:
                    raise ValidationError(
                        f"Sign interpretation {sign.id} has conflicting data "
                        f"in line {self.name!r}: {known} vs {sign}"
                    )

    def candidate_sequences(self) -> Tuple[SignSequence, ...]:
        return self.sequences

    def sign_for(self, sign_id: int) -> SignInterpretation:
        try:
            return self._signs[sign_id]
        except KeyError:
            raise SignNotFoundError(sign_id, self.name) from None

    def character_for(self, sign_id: int) -> str:
        return self.sign_for(sign_id).character

    @classmethod
    def from_text(cls, text: str, name: str = "", start_id: int = 0) -> "Line":
        """Build a line with a single candidate made of plain letters."""
        return cls((SignSequence.from_text(text, start_id),), name=name)

    @classmethod
    def from_variants(
        cls, variants: Iterable[str], name: str = "", start_id: int = 0
    ) -> "Line":
        """Build a line with one candidate per variant string.

        Each variant gets its own block of ids, continuing where the previous
        variant stopped.
        """
        sequences = []
        next_id = start_id
        for variant in variants:
            sequences.append(SignSequence.from_text(variant, next_id))
            next_id += len(variant)
        return cls(tuple(sequences), name=name)


@dataclass(frozen=True)
class ChangeIds:
    """One correspondence entry between a source and a target sign.

    A missing ``target_id`` marks a source sign without counterpart
    (deletion); a missing ``source_id`` marks a target sign without
    counterpart (insertion).
    """

    source_id: Optional[int] = None
    target_id: Optional[int] = None

    def __post_init__(self):
        if self.source_id is None and self.target_id is None:
            raise ValidationError("A correspondence entry needs at least one id")

    @property
    def is_paired(self) -> bool:
        return self.source_id is not None and self.target_id is not None

    @property
    def is_deletion(self) -> bool:
        return self.target_id is None

    @property
    def is_insertion(self) -> bool:
        return self.source_id is None


class DiffBlock(NamedTuple):
    """A contiguous region of disagreement between two flattened strings."""

    delete_start: int
    delete_count: int
    insert_start: int
    insert_count: int
