#!/usr/bin/env python3
"""Generate Monte Carlo odds for Role&Roll pools.

For every pool of 1-10 dice, alone or with one a1-a4 / n1-n4 special die,
estimates the average total and the chance of reaching each total.

Usage:
    python tools/generate_odds.py [output_file]

If no output file is given, writes to /tmp/odds.py.
"""

import sys
from collections import defaultdict
from pprint import pprint

from rolenroll.dice import roll_pool
from rolenroll.pool import build_pool
from rolenroll.scoring import score

ROLLS = 100000
SPECIALS = ["", "a1", "a2", "a3", "a4", "n1", "n2", "n3", "n4"]


def main() -> None:
    [fname] = sys.argv[1:2] or ["/tmp/odds.py"]
    odds: dict = defaultdict(int)
    for i in range(ROLLS):
        for dice in range(1, 11):
            for special in SPECIALS:
                total = score(roll_pool(build_pool(dice, special)).faces).total
                odds[dice, special] += total
                for target in range(total + 1):
                    odds[dice, special, target] += 1

    odds = {key: val / ROLLS for key, val in odds.items()}

    with open(fname, "w") as f:
        f.write("odds = ")
        pprint(odds, stream=f)


if __name__ == "__main__":
    main()
