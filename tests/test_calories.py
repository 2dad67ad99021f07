"""Tests for day 1 calorie counting."""
import pytest

from aoc.calories import CalorieParseError, Elf, parse_inventories, top_k, top_k_total

EXAMPLE = """1000
2000
3000

4000

5000
6000

7000
8000
9000

10000
""".split("\n")


def test_parse_example():
    elves = parse_inventories(EXAMPLE)
    assert [e.calories for e in elves] == [6000, 4000, 11000, 24000, 10000]
    assert [e.index for e in elves] == [1, 2, 3, 4, 5]


def test_parse_keeps_last_group_without_blank_line():
    assert parse_inventories(["1", "2", "", "3"]) == [Elf(1, 3), Elf(2, 3)]


def test_parse_collapses_blank_runs():
    assert parse_inventories(["", "1", "", "", "2", ""]) == [Elf(1, 1), Elf(2, 2)]


def test_parse_error_names_line():
    with pytest.raises(CalorieParseError) as exc:
        parse_inventories(["100", "", "abc"])
    assert exc.value.line_no == 3
    assert "abc" in str(exc.value)


def test_max():
    assert top_k_total(parse_inventories(EXAMPLE), k=1) == 24000


def test_top_three():
    elves = parse_inventories(EXAMPLE)
    assert [e.index for e in top_k(elves, 3)] == [4, 3, 5]
    assert top_k_total(elves) == 45000


def test_top_k_ties_keep_input_order():
    elves = [Elf(1, 5), Elf(2, 9), Elf(3, 5)]
    assert top_k(elves, 2) == [Elf(2, 9), Elf(1, 5)]


def test_top_k_larger_than_input():
    elves = [Elf(1, 5), Elf(2, 9)]
    assert top_k_total(elves, k=10) == 14


def test_top_k_empty():
    assert top_k([], 3) == []
    assert top_k_total([]) == 0


def test_top_k_rejects_non_positive():
    with pytest.raises(ValueError):
        top_k([Elf(1, 1)], 0)
