"""
Scoring rules for Role&Roll face sequences.

Points come only from side 1 and side 6. Plus and minus tokens adjust the
total, but only when at least one point was scored: a roll of nothing but
tokens and blanks is a failure no matter how many pluses came up. The total
never drops below zero.
"""

from __future__ import annotations

from typing import Iterable

from rolenroll.records import PoolRoll, RollSummary, ScoreResult
from rolenroll.types import Face


def score(faces: Iterable[Face]) -> ScoreResult:
    """Tally a face sequence into a ScoreResult."""
    result = ScoreResult()
    for face in faces:
        if face == "point":
            result.base_points += 1
        elif face == "point_reroll":
            result.base_points += 1
            result.reroll_face_count += 1
        elif face == "plus":
            result.plus_count += 1
        elif face == "minus":
            result.minus_count += 1

    if result.base_points > 0:
        result.total = max(0, result.base_points + result.plus_count - result.minus_count)
    return result


def score_rounds(roll: PoolRoll) -> list[ScoreResult]:
    """Score every round on its own, round 0 first."""
    return [score(rnd.faces) for rnd in roll.rounds]


def summarize(roll: PoolRoll) -> RollSummary:
    """Break a roll down the way it is reported to the player.

    Base and reroll points are counted separately, but the total is scored
    over the whole flattened sequence, so a plus from the base round still
    counts when the only point came from a reroll.
    """
    overall = score(roll.faces)
    return RollSummary(
        based_score=score(roll.base_faces).base_points,
        reroll_points=score(roll.reroll_faces).base_points,
        reroll_count=overall.reroll_face_count,
        plus_tokens=overall.plus_count,
        minus_tokens=overall.minus_count,
        total=overall.total,
        score=overall,
    )
