"""Tests for the roll record dataclasses."""

import dataclasses

import pytest

from rolenroll.records import DieConfig, PoolOutcome, PoolRoll, RollRecord, Round


def record(face: str, index: int = 0) -> RollRecord:
    return RollRecord(config=DieConfig(), rolled=1, face=face, round_index=index)


class TestDieConfig:
    def test_defaults_to_normal(self) -> None:
        assert DieConfig() == DieConfig(kind="normal", count=0)

    def test_immutable(self) -> None:
        die = DieConfig(kind="advantage", count=2)
        with pytest.raises(dataclasses.FrozenInstanceError):
            die.count = 3  # type: ignore[misc]

    def test_value_equality(self) -> None:
        assert DieConfig(kind="negative", count=1) == DieConfig(kind="negative", count=1)
        assert DieConfig(kind="negative", count=1) != DieConfig(kind="advantage", count=1)


class TestRound:
    def test_faces_and_rerolls(self) -> None:
        rnd = Round(index=0, rolls=[record("point_reroll"), record("blank"), record("point_reroll")])
        assert rnd.faces == ["point_reroll", "blank", "point_reroll"]
        assert rnd.rerolls == 2


class TestPoolRoll:
    def test_base_and_reroll_faces(self) -> None:
        roll = PoolRoll(rounds=[
            Round(index=0, rolls=[record("point_reroll"), record("plus")]),
            Round(index=1, rolls=[record("point_reroll", 1)]),
            Round(index=2, rolls=[record("minus", 2)]),
        ])
        assert roll.faces == ["point_reroll", "plus", "point_reroll", "minus"]
        assert roll.base_faces == ["point_reroll", "plus"]
        assert roll.reroll_faces == ["point_reroll", "minus"]
        assert roll.dice_rolled == 4

    def test_empty(self) -> None:
        roll = PoolRoll()
        assert roll.base_faces == []
        assert roll.reroll_faces == []
        assert roll.dice_rolled == 0
        assert roll.capped is False


class TestPoolOutcome:
    def test_ok_without_error(self) -> None:
        assert PoolOutcome(pool=[DieConfig()]).ok

    def test_not_ok_with_error(self) -> None:
        assert not PoolOutcome(error=ValueError("nope")).ok  # type: ignore[arg-type]
