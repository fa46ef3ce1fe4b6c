"""Structured roll records for the Role&Roll engine.

These dataclasses capture everything a roll produced: the configuration of
every die, what it showed, which round it belongs to, and how the faces
scored. The engine never mutates a record after building it, so hosts can
keep them around for history or hand them to a renderer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from rolenroll.types import DieKind, Face, SpecialKind

if TYPE_CHECKING:
    from rolenroll.pool import PoolError


@dataclass(frozen=True)
class DieConfig:
    """The face layout rule for one die."""

    kind: DieKind = "normal"

    count: int = 0
    """How many of sides 2-5 show plus (advantage) or minus (negative).
    Ignored for normal dice."""

    @property
    def label(self) -> str:
        """Short name used in logs: 'normal', 'a2', 'n1'."""
        if self.kind == "normal":
            return "normal"
        return f"{self.kind[0]}{self.count}"


@dataclass(frozen=True)
class SpecialToken:
    """One parsed aN / nN token from the special dice text."""

    kind: SpecialKind
    count: int
    """The count as typed; clamping happens when the die is built."""


@dataclass(frozen=True)
class RollRecord:
    """A single die rolled as part of a pool."""

    config: DieConfig
    rolled: int
    """The d6 value, 1-6."""

    face: Face
    round_index: int


@dataclass
class Round:
    """Every die resolved in one generation of the pool.

    Round 0 is the initial roll; round k holds only the dice spawned by
    point_reroll faces in round k-1.
    """

    index: int
    rolls: list[RollRecord] = field(default_factory=list)

    @property
    def faces(self) -> list[Face]:
        return [r.face for r in self.rolls]

    @property
    def rerolls(self) -> int:
        """How many dice this round spawns into the next one."""
        return sum(1 for r in self.rolls if r.face == "point_reroll")


@dataclass
class PoolRoll:
    """Full result of rolling a pool, rounds in order."""

    rounds: list[Round] = field(default_factory=list)

    capped: bool = False
    """True when expansion stopped at the round cap with dice still
    pending. Not an error; the extra rounds are simply not rolled."""

    @property
    def faces(self) -> list[Face]:
        """Every face in round order, base round first."""
        return [face for rnd in self.rounds for face in rnd.faces]

    @property
    def base_faces(self) -> list[Face]:
        return self.rounds[0].faces if self.rounds else []

    @property
    def reroll_faces(self) -> list[Face]:
        return [face for rnd in self.rounds[1:] for face in rnd.faces]

    @property
    def dice_rolled(self) -> int:
        return sum(len(rnd.rolls) for rnd in self.rounds)


@dataclass
class ScoreResult:
    """Aggregate of a face sequence."""

    base_points: int = 0
    plus_count: int = 0
    minus_count: int = 0
    reroll_face_count: int = 0
    total: int = 0


@dataclass
class RollSummary:
    """The breakdown a player sees after a roll."""

    based_score: int
    """Points from the initial round alone."""

    reroll_points: int
    """Points from every reroll round."""

    reroll_count: int
    """How many point_reroll faces came up, across all rounds."""

    plus_tokens: int
    minus_tokens: int
    total: int
    score: ScoreResult


@dataclass
class PoolOutcome:
    """Tagged result of a pool request: a pool, or the reason it was
    rejected. Lets hosts handle bad input without try/except."""

    pool: list[DieConfig] = field(default_factory=list)
    error: PoolError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
