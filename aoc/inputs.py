"""Puzzle input loading."""

from pathlib import Path
from typing import List


def read_lines(path: Path, keep_blank: bool = False) -> List[str]:
    """
    Read a puzzle input file as lines.

    Lines are split on "\\n" with any trailing "\\r" removed. Blank lines are
    dropped unless keep_blank is set (day 1 uses them as separators).

    Args:
        path: Path to the input text file
        keep_blank: Keep blank lines

    Returns:
        List of lines without terminators
    """
    with open(path, 'r', encoding='utf-8', newline='') as f:
        text = f.read()

    lines = [line.rstrip('\r') for line in text.split('\n')]
    if keep_blank:
        # A final newline does not open another line
        if lines and lines[-1] == '':
            lines.pop()
        return lines
    return [line for line in lines if line.strip()]
