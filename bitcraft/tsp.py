"""Bit-mask dynamic programming over orderings: tours and superstrings."""

from __future__ import annotations

import argparse
import sys
from functools import lru_cache
from typing import Iterable, Sequence

EXAMPLE_DISTANCES: tuple[tuple[int, ...], ...] = (
    (0, 20, 42, 25),
    (20, 0, 30, 34),
    (42, 30, 0, 10),
    (25, 34, 10, 0),
)

MAX_WORDS = 12


def shortest_tour(dist: Sequence[Sequence[int]]) -> int:
    """Cost of the cheapest tour that starts at city 0, visits all and returns."""
    matrix = [list(row) for row in dist]
    n = len(matrix)
    if n == 0:
        raise ValueError("distance matrix is empty")
    if any(len(row) != n for row in matrix):
        raise ValueError("distance matrix must be square")
    full = (1 << n) - 1

    @lru_cache(maxsize=None)
    def visit(visited: int, city: int) -> int:
        if visited == full:
            return matrix[city][0]
        return min(
            matrix[city][choice] + visit(visited | 1 << choice, choice)
            for choice in range(n)
            if not visited >> choice & 1
        )

    return visit(1, 0)


def _overlap(left: str, right: str) -> int:
    """Longest suffix of ``left`` that is a prefix of ``right``."""
    best = 0
    for size in range(1, min(len(left), len(right)) + 1):
        if left.endswith(right[:size]):
            best = size
    return best


def shortest_superstring(words: Iterable[str]) -> str:
    """Shortest string found that holds every word, chaining maximal overlaps."""
    words = list(words)
    n = len(words)
    if n > MAX_WORDS:
        raise ValueError(f"at most {MAX_WORDS} words are supported, got {n}")
    full = (1 << n) - 1
    overlaps = [[_overlap(a, b) for b in words] for a in words]

    @lru_cache(maxsize=None)
    def extend(used: int, last: int) -> str:
        if used == full:
            return ""
        best = ""
        for choice, word in enumerate(words):
            if used >> choice & 1:
                continue
            candidate = word[overlaps[last][choice]:] + extend(used | 1 << choice, choice)
            if not best or len(candidate) < len(best):
                best = candidate
        return best

    result = ""
    for start, word in enumerate(words):
        candidate = word + extend(1 << start, start)
        if not result or len(candidate) < len(result):
            result = candidate
    return result


def main(argv: Sequence[str] | None = None) -> int:
    """Solve the example tour, or a superstring problem read from stdin."""
    parser = argparse.ArgumentParser(
        prog="bitcraft-tsp", description="Bit-mask ordering problems."
    )
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("tour", help="print the cheapest tour of the example map")
    commands.add_parser(
        "superstring", help="read a word count and the words from standard input"
    )
    args = parser.parse_args(argv)

    if args.command == "tour":
        print(shortest_tour(EXAMPLE_DISTANCES))
        return 0

    tokens = sys.stdin.read().split()
    try:
        count = int(tokens[0])
    except (IndexError, ValueError):
        parser.error("expected a word count followed by that many words")
    words = tokens[1:1 + count]
    if count < 0 or len(words) < count:
        parser.error("expected a word count followed by that many words")
    try:
        print(shortest_superstring(words))
    except ValueError as exc:
        parser.error(str(exc))
    return 0