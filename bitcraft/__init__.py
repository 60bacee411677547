"""Bit manipulation helpers, bitmask dynamic programming and shortest paths."""

__version__ = "0.1.0"
__all__ = ["bits", "puzzles", "subsets", "tsp", "matrix_score", "dijkstra"]