"""
Day 3: Rucksack Reorganization

Each line lists the items of one rucksack. The first half of the line is
compartment one, the second half compartment two. Items found in both
compartments are "common"; the answer is the sum of their priorities over
all rucksacks.

Pipeline per line:
  chars -> priorities -> split at n//2 -> intersection -> sum
"""

import logging
from typing import Any, Dict, Iterable, Optional, Set, Tuple

import numpy as np

from aoc.priority import PriorityTable


class RucksackAnalyzer:
    """
    Stateless per-line analyzer over an injected PriorityTable.

    The table is only read, so one instance can be shared freely.
    """

    def __init__(self, table: Optional[PriorityTable] = None):
        self.table = table if table is not None else PriorityTable()

    def parse_line(self, line: str) -> np.ndarray:
        """Map each character to its priority (raises UnknownCharacter)."""
        return self.table.encode(line)

    @staticmethod
    def split(items: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
        """
        Split into compartments [0, n//2) and [n//2, n).

        Odd lengths give a shorter first half.
        """
        mid = len(items) // 2
        return items[:mid], items[mid:]

    @staticmethod
    def common_items(first: np.ndarray, second: np.ndarray) -> Set[int]:
        """Priorities present in both compartments."""
        shared = np.intersect1d(np.asarray(first), np.asarray(second))
        return {int(p) for p in shared}

    @staticmethod
    def priority_sum(items: Iterable[int]) -> int:
        """Sum of priorities, 0 for no items."""
        return sum(int(p) for p in items)

    def rucksack_priority(self, line: str) -> int:
        """Priority sum of the common items of a single rucksack."""
        first, second = self.split(self.parse_line(line))
        return self.priority_sum(self.common_items(first, second))

    def analyze_file(self, lines: Iterable[str]) -> int:
        """
        Total priority over all non-empty lines.

        Fails fast: the first UnknownCharacter aborts the whole run.
        """
        total = 0
        count = 0
        odd = 0

        for line in lines:
            if not line.strip():
                continue
            if len(line) % 2:
                odd += 1
                logging.warning(
                    f"Rucksack {count + 1} has odd length {len(line)}; "
                    f"compartments will be {len(line) // 2}/{len(line) - len(line) // 2}"
                )
            total += self.rucksack_priority(line)
            count += 1

        logging.info(f"Processed rucksacks={count}, odd_length={odd}, total={total}")
        return total

    def line_receipt(self, index: int, line: str) -> Dict[str, Any]:
        """
        Build a receipt for one rucksack.

        Args:
            index: 0-based position among the non-empty lines
            line: Rucksack contents

        Returns:
            JSON-ready dict with both compartments and the common items
        """
        items = self.parse_line(line)
        first, second = self.split(items)
        common = sorted(self.common_items(first, second))

        return {
            "kind": "rucksack",
            "index": index,
            "length": len(line),
            "first": self.table.decode(first),
            "second": self.table.decode(second),
            "common": self.table.decode(common),
            "priorities": common,
            "priority_sum": self.priority_sum(common),
            "even": len(line) % 2 == 0,
        }
