"""Tests for the penalty model."""

import pytest

from signalign import config
from signalign.core.models import (
    ChangeIds,
    Line,
    SignInterpretation,
    SignKind,
    SignSequence,
)
from signalign.core.penalty import PenaltyWeights, calculate_penalty, entry_penalty
from signalign.exceptions import ConfigError, SignNotFoundError


@pytest.fixture
def source():
    return Line.from_text("CAT", name="source")


@pytest.fixture
def target():
    return Line.from_text("COT", name="target")


class TestPenaltyWeights:
    def test_defaults(self):
        weights = PenaltyWeights()
        assert weights.missing_target == 10
        assert weights.missing_source == 5
        assert weights.substitution == 1

    def test_defaults_follow_config(self, monkeypatch):
        monkeypatch.setattr(config, "MISSING_TARGET_PENALTY", 20)
        assert PenaltyWeights().missing_target == 20

    def test_negative_weight_rejected(self):
        with pytest.raises(ConfigError, match="non-negative"):
            PenaltyWeights(substitution=-1)

    def test_non_integer_weight_rejected(self):
        with pytest.raises(ConfigError, match="integer"):
            PenaltyWeights(missing_source=2.5)


class TestEntryPenalty:
    def test_each_shape(self, source, target):
        weights = PenaltyWeights()
        assert entry_penalty(ChangeIds(source_id=0), source, target, weights) == 10
        assert entry_penalty(ChangeIds(target_id=0), source, target, weights) == 5
        assert entry_penalty(ChangeIds(1, 1), source, target, weights) == 1
        assert entry_penalty(ChangeIds(0, 0), source, target, weights) == 0


class TestCalculatePenalty:
    def test_substitution_example(self, source, target):
        change_ids = [ChangeIds(0, 0), ChangeIds(1, 1), ChangeIds(2, 2)]
        assert calculate_penalty(change_ids, source, target) == 1

    def test_insertion_example(self):
        source = Line.from_text("ABC")
        target = Line.from_text("ABXC")
        change_ids = [
            ChangeIds(0, 0),
            ChangeIds(1, 1),
            ChangeIds(target_id=2),
            ChangeIds(2, 3),
        ]
        assert calculate_penalty(change_ids, source, target) == 5

    def test_deletion_example(self):
        source = Line.from_text("AB")
        target = Line.from_text("A")
        change_ids = [ChangeIds(0, 0), ChangeIds(source_id=1)]
        assert calculate_penalty(change_ids, source, target) == 10

    def test_empty_list_costs_nothing(self, source, target):
        assert calculate_penalty([], source, target) == 0

    def test_custom_weights(self, source, target):
        weights = PenaltyWeights(missing_target=1, missing_source=1, substitution=7)
        change_ids = [ChangeIds(0, 0), ChangeIds(1, 1), ChangeIds(source_id=2)]
        assert calculate_penalty(change_ids, source, target, weights) == 8

    def test_raw_characters_decide_equality(self):
        # Diffed as " " and "?", but both raw characters are empty
        source = Line(
            (SignSequence((SignInterpretation(0, "", SignKind.SPACE),)),)
        )
        target = Line((SignSequence((SignInterpretation(0, ""),)),))
        assert calculate_penalty([ChangeIds(0, 0)], source, target) == 0

    def test_foreign_id_in_pair_raises(self, source, target):
        with pytest.raises(SignNotFoundError) as exc_info:
            calculate_penalty([ChangeIds(0, 42)], source, target)
        assert exc_info.value.line_name == "target"

    def test_foreign_id_in_unpaired_entry_raises(self, source, target):
        with pytest.raises(SignNotFoundError):
            calculate_penalty([ChangeIds(source_id=99)], source, target)
        with pytest.raises(SignNotFoundError):
            calculate_penalty([ChangeIds(target_id=99)], source, target)
