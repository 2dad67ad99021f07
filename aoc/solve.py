"""
Daily Solver Runner (days 1-3)

Reads one puzzle input file and prints the answer alone on stdout.
Diagnostics go to the log.

Days:
  - 1: Calorie Counting (part 1: max, part 2: sum of top --top-k, default 3)
  - 2: Rock Paper Scissors (part 1: strategy, part 2: order)
  - 3: Rucksack Reorganization (part 1 only; --out writes JSONL receipts)

CLI:
  python -m aoc.solve --day 1 --input inputs/day1.txt --part 2
  python -m aoc.solve --day 2 --input inputs/day2.txt --part 1
  python -m aoc.solve --day 3 --input inputs/day3.txt --out outputs/day3.jsonl
"""

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from aoc.calories import parse_inventories, top_k, top_k_total
from aoc.inputs import read_lines
from aoc.priority import PriorityTable
from aoc.receipts import ReceiptWriter, build_summary_receipt
from aoc.rps import total_score
from aoc.rucksack import RucksackAnalyzer


def run_day1(input_path: Path, part: int, k: int = 3) -> int:
    """
    Run day 1.

    Args:
        input_path: Puzzle input
        part: 1 for the heaviest elf, 2 for the top-k total
        k: How many elves part 2 sums

    Returns:
        Total calories
    """
    elves = parse_inventories(read_lines(input_path, keep_blank=True))
    k = 1 if part == 1 else k

    for elf in top_k(elves, k):
        logging.info(f"Elf {elf.index}: {elf.calories} calories")
    answer = top_k_total(elves, k)

    logging.info(f"Processed elves={len(elves)}, k={k}, total={answer}")
    return answer


def run_day2(input_path: Path, part: int) -> int:
    """Run day 2 and return the total score."""
    mode = "strategy" if part == 1 else "order"
    lines = read_lines(input_path)
    answer = total_score(lines, mode=mode)

    logging.info(f"Processed rounds={len(lines)}, mode={mode}, total={answer}")
    return answer


def run_day3(
    input_path: Path,
    table: PriorityTable,
    out_path: Optional[Path] = None,
) -> int:
    """
    Run day 3.

    The whole file is analyzed before any receipt is written, so a bad
    character leaves no partial receipts behind.

    Args:
        input_path: Puzzle input
        table: Priority table shared by the run
        out_path: Optional receipts JSONL path

    Returns:
        Sum of common-item priorities
    """
    analyzer = RucksackAnalyzer(table)
    lines = read_lines(input_path)
    answer = analyzer.analyze_file(lines)

    if out_path is not None:
        with ReceiptWriter(out_path) as writer:
            for index, line in enumerate(lines):
                writer.write(analyzer.line_receipt(index, line))
            writer.write(build_summary_receipt(
                day=3,
                part=1,
                line_count=len(lines),
                answer=answer,
                table_sha256=table.table_hash(),
            ))
        logging.info(f"Receipts written={writer.count} to: {out_path}")

    return answer


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entry point with argparse."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(message)s",
    )

    parser = argparse.ArgumentParser(
        description="Advent of Code 2022 - daily solvers",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--day",
        type=int,
        required=True,
        choices=[1, 2, 3],
        help="Puzzle day",
    )

    parser.add_argument(
        "--input",
        type=Path,
        required=True,
        help="Path to the puzzle input text file",
    )

    parser.add_argument(
        "--part",
        type=int,
        choices=[1, 2],
        default=1,
        help="Puzzle part (day 3 has part 1 only)",
    )

    parser.add_argument(
        "--top-k",
        type=int,
        default=3,
        help="Number of elves summed by day 1 part 2",
    )

    parser.add_argument(
        "--out",
        type=Path,
        help="Output path for receipts JSONL (day 3)",
    )

    args = parser.parse_args(argv)

    if not args.input.exists():
        logging.error(f"Input file not found: {args.input}")
        raise SystemExit(1)

    if args.day == 3 and args.part == 2:
        logging.error("Day 3 part 2 is not implemented")
        raise SystemExit(1)

    if args.out is not None and args.day != 3:
        logging.warning(f"--out is only used by day 3, ignoring {args.out}")

    # Built once per process and handed to the analyzer
    table = PriorityTable()

    try:
        if args.day == 1:
            answer = run_day1(args.input, args.part, k=args.top_k)
        elif args.day == 2:
            answer = run_day2(args.input, args.part)
        else:
            answer = run_day3(args.input, table, out_path=args.out)
    except (OSError, ValueError) as exc:
        logging.error(f"Day {args.day} failed: {exc}")
        raise SystemExit(1)

    print(answer)


if __name__ == "__main__":
    main()
