"""Maximise the sum of binary rows by flipping rows and columns."""

from __future__ import annotations

from functools import reduce
from typing import Sequence


def _validated(grid: Sequence[Sequence[int]]) -> list[list[int]]:
    rows = [list(row) for row in grid]
    if not rows or not rows[0]:
        raise ValueError("grid must be non-empty")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("grid rows must all have the same length")
    return rows


def _flip(bits: Sequence[int]) -> list[int]:
    return [0 if bit else 1 for bit in bits]


def matrix_score(grid: Sequence[Sequence[int]]) -> int:
    """Best row sum, counting each column's contribution directly."""
    rows = _validated(grid)
    n, m = len(rows), len(rows[0])
    normalised = [row if row[0] != 0 else [bit ^ 1 for bit in row] for row in rows]
    score = 0
    for exponent, column in zip(range(m - 1, -1, -1), zip(*normalised)):
        ones = sum(column)
        score += (1 << exponent) * max(ones, n - ones)
    return score


def matrix_score_greedy(grid: Sequence[Sequence[int]]) -> int:
    """Best row sum, by actually flipping rows then columns and adding rows up."""
    rows = _validated(grid)
    rows = [row if row[0] != 0 else _flip(row) for row in rows]
    columns = [list(column) for column in zip(*rows)]
    columns = [
        _flip(column) if column.count(0) > column.count(1) else column
        for column in columns
    ]
    return sum(
        reduce(lambda acc, bit: acc * 2 + bit, row, 0) for row in zip(*columns)
    )