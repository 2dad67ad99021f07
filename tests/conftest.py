"""Shared fixtures."""
import pytest

from aoc.priority import PriorityTable
from aoc.rucksack import RucksackAnalyzer

EXAMPLE_RUCKSACKS = [
    "vJrwpWtwJgWrhcsFMMfFFhFp",
    "jqHRNqRjqzjGDLGLrsFMfFZSrLrFZsS",
    "PmmdzqPrVvPwwTWBwg",
    "wMqvLMZHhHMvwLHjbvcjnnSBnvTQFn",
    "ttgJtRGJQctTZtZT",
    "CrZsJsPPZsGzwwsLwLmpwMDw",
]


@pytest.fixture
def example_rucksacks():
    return list(EXAMPLE_RUCKSACKS)


@pytest.fixture(scope="session")
def table():
    return PriorityTable()


@pytest.fixture
def analyzer(table):
    return RucksackAnalyzer(table)


@pytest.fixture
def write_input(tmp_path):
    """Write text to a fresh input file and return its path."""
    def _write(text, name="input.txt"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write
