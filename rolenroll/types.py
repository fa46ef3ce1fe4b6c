"""
Domain-specific type aliases for the Role&Roll dice engine.

These aren't used for runtime type checking. They exist to make function
signatures self-documenting: a parameter typed as Face is one of the five
symbolic die outcomes, not an arbitrary string.
"""

from typing import Literal, TypeAlias

# How a die's blank sides are filled in. Normal dice leave sides 2-5 blank;
# advantage dice turn some of them into "plus", negative dice into "minus".
DieKind: TypeAlias = Literal[
    "normal",
    "advantage",
    "negative",
]

# The kinds a player can request with an aN / nN token.
SpecialKind: TypeAlias = Literal[
    "advantage",
    "negative",
]

# The symbolic result of resolving one roll against a die's face layout.
Face: TypeAlias = Literal[
    "point",  # side 1: one base point
    "point_reroll",  # side 6: one base point, and roll another die
    "plus",  # +1 to the total, only if there is a base point
    "minus",  # -1 to the total, only if there is a base point
    "blank",
]
