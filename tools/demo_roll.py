#!/usr/bin/env python3
"""Roll a sample pool and print the log: 6 dice, one a2 and one n1."""

from rolenroll.dice import roll_pool
from rolenroll.pool import build_pool
from rolenroll.renderers import TextRenderer
from rolenroll.scoring import summarize

pool = build_pool(6, "a2, n1")
roll = roll_pool(pool)
for line in TextRenderer().render_roll(roll, summarize(roll)):
    print(line)
