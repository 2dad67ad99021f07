"""
Day 2: Rock Paper Scissors

Scoring is table-driven. Shapes are indexed rock=0, paper=1, scissors=2;
OUTCOME[ours, theirs] holds the outcome score of our shape against theirs.

Two readings of the second column:
  - strategy (part 1): X/Y/Z is the shape we play
  - order (part 2): X/Y/Z is the outcome we must reach (lose/draw/win)
"""

from typing import Iterable, NamedTuple

import numpy as np

ROCK, PAPER, SCISSORS = 0, 1, 2

SHAPE_SCORE = np.array([1, 2, 3], dtype=np.int64)

LOST_SCORE = 0
DRAW_SCORE = 3
WIN_SCORE = 6

# Rows: our shape, columns: their shape
OUTCOME = np.array([
    [DRAW_SCORE, LOST_SCORE, WIN_SCORE],    # rock
    [WIN_SCORE, DRAW_SCORE, LOST_SCORE],    # paper
    [LOST_SCORE, WIN_SCORE, DRAW_SCORE],    # scissors
], dtype=np.int64)

ATTACKS = {"A": ROCK, "B": PAPER, "C": SCISSORS}
DEFENSES = {"X": ROCK, "Y": PAPER, "Z": SCISSORS}
ORDERS = {"X": LOST_SCORE, "Y": DRAW_SCORE, "Z": WIN_SCORE}

MODES = ("strategy", "order")


class UnsupportedAction(ValueError):
    """Raised for a symbol outside A/B/C or X/Y/Z."""


class Round(NamedTuple):
    attack: str
    defense: str


def _lookup(table: dict, symbol: str, what: str) -> int:
    if symbol not in table:
        raise UnsupportedAction(f"Unsupported {what}: {symbol!r}")
    return table[symbol]


def parse_round(line: str) -> Round:
    """Parse "A X" into a Round (symbols are not validated here)."""
    parts = line.split()
    if len(parts) != 2:
        raise UnsupportedAction(f"Expected '<attack> <defense>', got {line!r}")
    return Round(parts[0], parts[1])


def score_strategy(attack: str, defense: str) -> int:
    """Score when the second column is the shape we play."""
    theirs = _lookup(ATTACKS, attack, "attack")
    ours = _lookup(DEFENSES, defense, "defense")
    return int(SHAPE_SCORE[ours] + OUTCOME[ours, theirs])


def score_order(attack: str, order: str) -> int:
    """Score when the second column is the outcome we must reach."""
    theirs = _lookup(ATTACKS, attack, "attack")
    wanted = _lookup(ORDERS, order, "order")

    # Exactly one shape yields the wanted outcome against theirs
    ours = int(np.flatnonzero(OUTCOME[:, theirs] == wanted)[0])
    return int(SHAPE_SCORE[ours] + wanted)


def total_score(lines: Iterable[str], mode: str = "strategy") -> int:
    """
    Total score over all non-empty lines.

    Args:
        lines: Round lines like "A Y"
        mode: "strategy" (part 1) or "order" (part 2)
    """
    if mode not in MODES:
        raise ValueError(f"Unknown mode: {mode}")
    score = score_strategy if mode == "strategy" else score_order

    total = 0
    for line in lines:
        if not line.strip():
            continue
        r = parse_round(line)
        total += score(r.attack, r.defense)
    return total
