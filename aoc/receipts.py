"""
Receipts Writer

JSONL audit trail for a solver run: one JSON object per line.
Day 3 writes one receipt per rucksack followed by a single summary receipt.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional


def build_summary_receipt(
    day: int,
    part: int,
    line_count: int,
    answer: int,
    table_sha256: str,
) -> Dict[str, Any]:
    """
    Build the closing summary receipt of a run.

    Args:
        day: Puzzle day
        part: Puzzle part
        line_count: Number of non-empty input lines processed
        answer: Value printed to stdout
        table_sha256: Hash of the priority table used

    Returns:
        Summary receipt dict
    """
    return {
        "kind": "summary",
        "day": day,
        "part": part,
        "line_count": line_count,
        "answer": answer,
        "table_sha256": table_sha256,
    }


class ReceiptWriter:
    """
    Streams day-3 receipts to a JSONL file.

    A run writes one "rucksack" receipt per input line, then one "summary"
    receipt. Keys are sorted so identical runs produce identical files.

    Attributes:
        output_path: Target file (parent directories are created)
        count: Receipts written so far
    """

    def __init__(self, output_path: Path):
        self.output_path = Path(output_path)
        self.output_path.parent.mkdir(parents=True, exist_ok=True)
        self.count = 0
        self._fh = None

    def __enter__(self):
        self._fh = open(self.output_path, 'w', encoding='utf-8')
        self.count = 0
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self._fh:
            self._fh.close()
            self._fh = None

    def write(self, receipt: Dict[str, Any]):
        """Append one receipt line."""
        if self._fh is None:
            raise RuntimeError("ReceiptWriter not opened (use context manager)")

        self._fh.write(json.dumps(receipt, sort_keys=True, ensure_ascii=False) + '\n')
        self.count += 1


def read_receipts(receipts_path: Path, kind: Optional[str] = None) -> List[Dict[str, Any]]:
    """
    Load receipts back from a JSONL file.

    Args:
        receipts_path: Path written by ReceiptWriter
        kind: Keep only receipts of this kind ("rucksack" or "summary")

    Returns:
        Receipts in file order
    """
    with open(receipts_path, 'r', encoding='utf-8') as f:
        receipts = [json.loads(line) for line in f if line.strip()]
    if kind is not None:
        receipts = [r for r in receipts if r.get("kind") == kind]
    return receipts
