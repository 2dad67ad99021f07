"""End-to-end tests for the CLI runner."""
import pytest

from aoc.receipts import read_receipts
from aoc.solve import main


def run(argv, capsys):
    main(argv)
    return capsys.readouterr().out.strip()


def test_day3(write_input, capsys):
    path = write_input("vJrwpWtwJgWrhcsFMMfFFhFp\njqHRNqRjqzjGDLGLrsFMfFZSrLrFZsS\n")
    assert run(["--day", "3", "--input", str(path)], capsys) == "54"


def test_day3_receipts(write_input, tmp_path, capsys):
    path = write_input("vJrwpWtwJgWrhcsFMMfFFhFp\njqHRNqRjqzjGDLGLrsFMfFZSrLrFZsS\n")
    out = tmp_path / "out" / "day3.jsonl"
    assert run(["--day", "3", "--input", str(path), "--out", str(out)], capsys) == "54"

    receipts = read_receipts(out)
    assert [r["kind"] for r in receipts] == ["rucksack", "rucksack", "summary"]
    assert receipts[1]["common"] == "L"
    assert receipts[1]["even"] is False
    assert receipts[2]["answer"] == 54
    assert receipts[2]["line_count"] == 2


def test_day3_unknown_character_exits(write_input, tmp_path, capsys):
    path = write_input("vJrwpWtwJgWrhcsFMMfFFhFp\nab5cd\n")
    out = tmp_path / "day3.jsonl"
    with pytest.raises(SystemExit) as exc:
        main(["--day", "3", "--input", str(path), "--out", str(out)])
    assert exc.value.code == 1
    assert capsys.readouterr().out == ""
    assert not out.exists()


def test_day3_part2_rejected(write_input):
    path = write_input("abab\n")
    with pytest.raises(SystemExit) as exc:
        main(["--day", "3", "--part", "2", "--input", str(path)])
    assert exc.value.code == 1


def test_missing_input(tmp_path):
    with pytest.raises(SystemExit) as exc:
        main(["--day", "3", "--input", str(tmp_path / "nope.txt")])
    assert exc.value.code == 1


def test_day1(write_input, capsys):
    path = write_input("1000\n2000\n\n500\n\n4000\n")
    assert run(["--day", "1", "--input", str(path)], capsys) == "4000"
    assert run(["--day", "1", "--part", "2", "--input", str(path)], capsys) == "7500"
    assert run(["--day", "1", "--part", "2", "--top-k", "2", "--input", str(path)], capsys) == "7000"


def test_day2(write_input, capsys):
    path = write_input("A Y\nB X\nC Z\n")
    assert run(["--day", "2", "--input", str(path)], capsys) == "15"
    assert run(["--day", "2", "--part", "2", "--input", str(path)], capsys) == "12"


def test_day2_bad_symbol_exits(write_input):
    path = write_input("A Q\n")
    with pytest.raises(SystemExit) as exc:
        main(["--day", "2", "--input", str(path)])
    assert exc.value.code == 1
