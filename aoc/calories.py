"""
Day 1: Calorie Counting

Input is one integer per line; a blank line ends one elf's inventory.
Part 1 asks for the largest inventory, part 2 for the sum of the top three.
"""

from typing import Iterable, List, NamedTuple

import numpy as np


class Elf(NamedTuple):
    index: int      # 1-based, input order
    calories: int


class CalorieParseError(ValueError):
    """Raised for a line that is neither blank nor an integer."""

    def __init__(self, line_no: int, text: str):
        self.line_no = line_no
        self.text = text
        super().__init__(f"Line {line_no}: expected an integer, got {text!r}")


def parse_inventories(lines: Iterable[str]) -> List[Elf]:
    """
    Group calorie lines into elves.

    Runs of blank lines count as one separator, and a final inventory
    without a trailing blank line is kept.

    Args:
        lines: Raw lines, blanks included

    Returns:
        Elves in input order
    """
    elves: List[Elf] = []
    current: List[int] = []

    for line_no, line in enumerate(lines, start=1):
        text = line.strip()
        if not text:
            if current:
                elves.append(Elf(len(elves) + 1, sum(current)))
                current = []
            continue
        try:
            current.append(int(text))
        except ValueError:
            raise CalorieParseError(line_no, text) from None

    if current:
        elves.append(Elf(len(elves) + 1, sum(current)))

    return elves


def top_k(elves: List[Elf], k: int) -> List[Elf]:
    """The k heaviest elves, heaviest first; ties keep input order."""
    if k < 1:
        raise ValueError(f"k must be >= 1, got {k}")
    if not elves:
        return []

    calories = np.array([e.calories for e in elves], dtype=np.int64)
    # Stable sort on negated calories: descending, index order on ties
    order = np.argsort(-calories, kind="stable")[:k]
    return [elves[i] for i in order.tolist()]


def top_k_total(elves: List[Elf], k: int = 3) -> int:
    return int(sum(e.calories for e in top_k(elves, k)))
