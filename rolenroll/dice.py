"""
Dice primitives for the Role&Roll pool system.

Every die is a d6 with a fixed layout: side 1 scores a point, side 6 scores
a point and spawns another die of the same kind, and sides 2-5 are blank.
Advantage dice turn some of those blanks into "plus" faces, negative dice
into "minus" faces, between 1 and 4 of them.

Rolling a pool happens in rounds. Round 0 rolls every die once; each
point_reroll face then adds one die to the next round, which can chain
indefinitely. A hard cap on the number of rounds guarantees termination.
"""

from __future__ import annotations

from dataclasses import replace
from random import randrange
from typing import Callable, Iterable

from rolenroll.records import DieConfig, PoolRoll, RollRecord, Round
from rolenroll.types import DieKind, Face

FACE_COUNT_MIN = 1
FACE_COUNT_MAX = 4

MAX_ROUNDS = 100
"""Most rounds a single pool roll may produce. With fair dice a chain
this long is astronomically unlikely; the cap exists for rigged sources."""

ClampCallback = Callable[[str, int, int], None]
"""on_clamp(kind, requested, used), fired when a face count is corrected."""


def d6() -> int:
    """Roll a single fair d6."""
    return randrange(1, 7)


def clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


def clamp_count(kind: str, requested: int, on_clamp: ClampCallback | None = None) -> int:
    """Force a plus/minus face count into [1, 4].

    Out-of-range requests are corrected rather than rejected; the optional
    callback lets the caller tell the player which value was actually used.
    """
    used = clamp(requested, FACE_COUNT_MIN, FACE_COUNT_MAX)
    if used != requested and on_clamp is not None:
        on_clamp(kind, requested, used)
    return used


def make_die(kind: DieKind = "normal", count: int = 0, on_clamp: ClampCallback | None = None) -> DieConfig:
    """Build a DieConfig, clamping the face count of special dice."""
    if kind == "normal":
        return DieConfig()
    return DieConfig(kind=kind, count=clamp_count(kind, count, on_clamp))


def normal() -> DieConfig:
    return make_die("normal")


def advantage(count: int = 1, on_clamp: ClampCallback | None = None) -> DieConfig:
    return make_die("advantage", count, on_clamp)


def negative(count: int = 1, on_clamp: ClampCallback | None = None) -> DieConfig:
    return make_die("negative", count, on_clamp)


def build_face_map(config: DieConfig, on_clamp: ClampCallback | None = None) -> tuple[Face, ...]:
    """Return the six faces of a die, indexed by side - 1.

    Plus or minus faces fill sides 2-5 starting from side 2. A config built
    by hand with an out-of-range count is clamped here the same way
    make_die would have clamped it.
    """
    faces: list[Face] = ["point", "blank", "blank", "blank", "blank", "point_reroll"]
    if config.kind == "normal":
        return tuple(faces)

    token: Face = "plus" if config.kind == "advantage" else "minus"
    for i in range(clamp_count(config.kind, config.count, on_clamp)):
        faces[1 + i] = token
    return tuple(faces)


def resolve_face(config: DieConfig, rolled: int) -> Face:
    """Map a d6 value to the face it shows on this die.

    Values outside 1-6 are clamped rather than rejected.
    """
    return build_face_map(config)[clamp(rolled, 1, 6) - 1]


def roll_pool(
    configs: Iterable[DieConfig],
    rng: Callable[[], int] = d6,
    max_rounds: int = MAX_ROUNDS,
) -> PoolRoll:
    """Roll a pool, expanding point_reroll faces round by round.

    Every point_reroll spawns one copy of its die into the next round, in
    the order the rerolls came up. Expansion stops at the first empty round
    or once max_rounds rounds exist, whichever comes first.

    Args:
        configs: The initial dice, rolled in this order in round 0.
        rng: Zero-argument callable returning 1-6. Defaults to d6.
        max_rounds: Cap on rounds produced.
    """
    result = PoolRoll()
    pending = list(configs)

    while pending and len(result.rounds) < max_rounds:
        rnd = Round(index=len(result.rounds))
        spawned: list[DieConfig] = []

        for config in pending:
            rolled = clamp(rng(), 1, 6)
            face = resolve_face(config, rolled)
            rnd.rolls.append(RollRecord(config=config, rolled=rolled, face=face, round_index=rnd.index))
            if face == "point_reroll":
                spawned.append(replace(config))

        result.rounds.append(rnd)
        pending = spawned

    result.capped = bool(pending)
    return result
