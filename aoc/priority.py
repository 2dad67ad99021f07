"""
Day 3: Priority table

Fixed bijection between item characters and priorities:
  - a..z -> 1..26
  - A..Z -> 27..52

Backed by a NumPy lookup array indexed by code point, so whole lines are
encoded in one vectorized pass. Built once and read-only afterwards.
"""

import hashlib
import string
from typing import Iterable

import numpy as np

ALPHABET = string.ascii_lowercase + string.ascii_uppercase
MIN_PRIORITY = 1
MAX_PRIORITY = len(ALPHABET)

# Lookup array covers ASCII only; 0 marks "not an item"
_LOOKUP_SIZE = 128


class UnknownCharacter(ValueError):
    """Raised when a character has no priority."""

    def __init__(self, char: str):
        self.char = char
        super().__init__(f"Unknown item character: {char!r}")


class InvalidPriority(ValueError):
    """Raised when a priority falls outside 1..52."""

    def __init__(self, priority: int):
        self.priority = priority
        super().__init__(
            f"Invalid priority {priority}: expected {MIN_PRIORITY}..{MAX_PRIORITY}"
        )


class PriorityTable:
    """
    Character <-> priority mapping.

    Attributes:
        alphabet: Characters ordered by priority (index 0 -> priority 1)
        lookup: int32 array of length 128, lookup[ord(c)] = priority(c) or 0
    """

    def __init__(self):
        self.alphabet = np.array(list(ALPHABET))
        codes = np.fromiter((ord(c) for c in ALPHABET), dtype=np.int64)

        self.lookup = np.zeros(_LOOKUP_SIZE, dtype=np.int32)
        self.lookup[codes] = np.arange(MIN_PRIORITY, MAX_PRIORITY + 1, dtype=np.int32)

        self.alphabet.setflags(write=False)
        self.lookup.setflags(write=False)

    def __len__(self) -> int:
        return MAX_PRIORITY

    def to_priority(self, char: str) -> int:
        """Priority of a single character."""
        if len(char) != 1:
            raise UnknownCharacter(char)
        code = ord(char)
        if code >= _LOOKUP_SIZE or self.lookup[code] == 0:
            raise UnknownCharacter(char)
        return int(self.lookup[code])

    def to_char(self, priority: int) -> str:
        """Character carrying the given priority."""
        if not MIN_PRIORITY <= priority <= MAX_PRIORITY:
            raise InvalidPriority(priority)
        return str(self.alphabet[priority - 1])

    def encode(self, line: str) -> np.ndarray:
        """
        Encode a whole line to priorities.

        Args:
            line: Rucksack contents

        Returns:
            int32 array of shape (len(line),)

        Raises:
            UnknownCharacter: for the first character outside the alphabet
        """
        codes = np.fromiter((ord(c) for c in line), dtype=np.int64, count=len(line))

        # Out-of-range code points are clamped to 0 so the lookup yields 0
        in_range = codes < _LOOKUP_SIZE
        items = self.lookup[np.where(in_range, codes, 0)]

        bad = np.flatnonzero(items == 0)
        if bad.size:
            raise UnknownCharacter(line[int(bad[0])])

        return items

    def decode(self, items: Iterable[int]) -> str:
        """Inverse of encode()."""
        return "".join(self.to_char(int(p)) for p in items)

    def table_hash(self) -> str:
        """
        Deterministic SHA256 of the table, serialized as "priority:char;" pairs.

        Returns:
            Hex SHA256 hash string (64 chars)
        """
        parts = []
        for priority, char in enumerate(ALPHABET, start=MIN_PRIORITY):
            parts.append(f"{priority}:{char};")
        return hashlib.sha256("".join(parts).encode("utf-8")).hexdigest()
