"""Role&Roll dice-pool engine: build a pool, roll it, score it."""

from rolenroll.dice import (
    MAX_ROUNDS,
    advantage,
    build_face_map,
    d6,
    make_die,
    negative,
    normal,
    resolve_face,
    roll_pool,
)
from rolenroll.pool import (
    MAX_POOL,
    InvalidToken,
    InvalidTotal,
    PoolError,
    PoolTooLarge,
    TooManySpecialDice,
    build_pool,
    parse_special_tokens,
    request_pool,
)
from rolenroll.records import DieConfig, PoolOutcome, PoolRoll, RollRecord, RollSummary, Round, ScoreResult, SpecialToken
from rolenroll.scoring import score, score_rounds, summarize

__all__ = [
    "MAX_POOL",
    "MAX_ROUNDS",
    "DieConfig",
    "InvalidToken",
    "InvalidTotal",
    "PoolError",
    "PoolOutcome",
    "PoolRoll",
    "PoolTooLarge",
    "RollRecord",
    "RollSummary",
    "Round",
    "ScoreResult",
    "SpecialToken",
    "TooManySpecialDice",
    "advantage",
    "build_face_map",
    "build_pool",
    "d6",
    "make_die",
    "negative",
    "normal",
    "parse_special_tokens",
    "request_pool",
    "resolve_face",
    "roll_pool",
    "score",
    "score_rounds",
    "summarize",
]
