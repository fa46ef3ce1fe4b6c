"""
Turning a player's request into a concrete dice pool.

A request is a total number of dice plus an optional line of special dice
tokens: "a2" asks for an advantage die with two plus faces, "n1" for a
negative die with one minus face. Tokens are separated by commas and/or
spaces. Each token replaces one of the normal dice in the total.
"""

from __future__ import annotations

import re

from rolenroll.dice import ClampCallback, make_die
from rolenroll.records import DieConfig, PoolOutcome, SpecialToken
from rolenroll.types import SpecialKind

MAX_POOL = 50

TOKEN_SEP = re.compile(r"[,\s]+")
TOKEN_PATTERNS: tuple[tuple[SpecialKind, re.Pattern[str]], ...] = (
    ("advantage", re.compile(r"^[aA]([0-9]+)$")),
    ("negative", re.compile(r"^[nN]([0-9]+)$")),
)


class PoolError(ValueError):
    """A pool request that can't be rolled as entered.

    str(err) is a message fit to show the player.
    """


class InvalidToken(PoolError):
    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f'Invalid special dice token: "{token}". Use aX or nY, e.g. "a1, n2".')


class InvalidTotal(PoolError):
    def __init__(self, total: object) -> None:
        self.total = total
        super().__init__("Please enter a valid total number of dice (at least 1).")


class TooManySpecialDice(PoolError):
    def __init__(self, special: int, total: int) -> None:
        self.special = special
        self.total = total
        super().__init__(f"Number of special dice ({special}) cannot be more than total dice ({total}).")


class PoolTooLarge(PoolError):
    def __init__(self, size: int, limit: int = MAX_POOL) -> None:
        self.size = size
        self.limit = limit
        super().__init__(f"Too many dice requested: {size} (max {limit}).")


def parse_special_tokens(text: str | None) -> list[SpecialToken]:
    """Parse the special dice line into tokens, in the order typed.

    Counts are kept exactly as typed; "n99" parses to a count of 99 and is
    only clamped when the die is built.

    Raises:
        InvalidToken: on the first token that is neither aN nor nN.
    """
    tokens = []
    for raw in TOKEN_SEP.split((text or "").strip()):
        if not raw:
            continue
        for kind, pattern in TOKEN_PATTERNS:
            m = pattern.match(raw)
            if m:
                tokens.append(SpecialToken(kind=kind, count=int(m.group(1))))
                break
        else:
            raise InvalidToken(raw)
    return tokens


def parse_total(total: object) -> int:
    """Accept an int or a string of ASCII digits; anything else is InvalidTotal."""
    if isinstance(total, bool):
        raise InvalidTotal(total)
    if isinstance(total, int):
        value = total
    elif isinstance(total, str):
        digits = total.strip()
        if not (digits.isascii() and digits.isdecimal()):
            raise InvalidTotal(total)
        value = int(digits)
    else:
        raise InvalidTotal(total)

    if value <= 0:
        raise InvalidTotal(total)
    return value


def build_pool(total: int | str, text: str | None = "", on_clamp: ClampCallback | None = None) -> list[DieConfig]:
    """Build the dice pool for a request: special dice first, then normal.

    Checks run in a fixed order, since each assumes the previous passed:
    the total, the token text, the special count against the total, and
    finally the pool size against MAX_POOL.

    Args:
        total: How many dice to roll, special dice included.
        text: The special dice line, e.g. "a1, n2".
        on_clamp: Called as on_clamp(kind, requested, used) for every
            special die whose face count had to be clamped.

    Raises:
        InvalidTotal, InvalidToken, TooManySpecialDice, PoolTooLarge
    """
    count = parse_total(total)
    tokens = parse_special_tokens(text)
    if len(tokens) > count:
        raise TooManySpecialDice(len(tokens), count)
    # the pool always holds exactly count dice, so check before building it
    if count > MAX_POOL:
        raise PoolTooLarge(count)

    pool = [make_die(t.kind, t.count, on_clamp) for t in tokens]
    pool.extend(make_die() for _ in range(count - len(tokens)))
    return pool


def request_pool(total: int | str, text: str | None = "", on_clamp: ClampCallback | None = None) -> PoolOutcome:
    """Like build_pool, but returns the rejection instead of raising it."""
    try:
        return PoolOutcome(pool=build_pool(total, text, on_clamp))
    except PoolError as e:
        return PoolOutcome(error=e)
