"""
Advent of Code 2022 - daily solvers (days 1-3)

Modules:
- priority: item character <-> priority table (day 3)
- rucksack: compartment intersection analyzer (day 3)
- calories: inventory grouping and top-k selection (day 1)
- rps: table-driven rock paper scissors scoring (day 2)
- inputs: puzzle input loading
- receipts: JSONL receipt writer
- solve: CLI runner
"""

__version__ = "0.1.0"
