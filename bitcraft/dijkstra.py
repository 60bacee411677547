"""Single-source shortest paths with Dijkstra's algorithm."""

from __future__ import annotations

import argparse
import heapq
import sys
from typing import Sequence


class Graph:
    """A weighted graph over vertices ``0 .. vertex_count - 1``."""

    def __init__(self, vertex_count: int, directed: bool = False) -> None:
        if vertex_count < 0:
            raise ValueError("vertex_count must be non-negative")
        self.vertex_count = vertex_count
        self.directed = directed
        self._adjacency: list[list[tuple[int, int]]] = [[] for _ in range(vertex_count)]

    def _check_vertex(self, vertex: int) -> None:
        if not 0 <= vertex < self.vertex_count:
            raise IndexError(f"vertex {vertex} out of range 0..{self.vertex_count - 1}")

    def add_edge(self, u: int, v: int, weight: int) -> None:
        """Add an edge from ``u`` to ``v``; undirected graphs get both directions."""
        self._check_vertex(u)
        self._check_vertex(v)
        self._adjacency[u].append((v, weight))
        if not self.directed:
            self._adjacency[v].append((u, weight))

    def shortest_distances(self, start: int) -> list[int | None]:
        """Distance from ``start`` to every vertex; ``None`` where unreachable."""
        self._check_vertex(start)
        best: list[int | None] = [None] * self.vertex_count
        best[start] = 0
        visited: set[int] = set()
        queue = [(0, start)]
        while queue:
            distance, vertex = heapq.heappop(queue)
            if vertex in visited:
                continue
            visited.add(vertex)
            for neighbour, weight in self._adjacency[vertex]:
                candidate = distance + weight
                known = best[neighbour]
                if known is None or candidate < known:
                    best[neighbour] = candidate
                    heapq.heappush(queue, (candidate, neighbour))
        return best


def parse_graph(text: str) -> tuple[Graph, int]:
    """Read ``n m``, ``m`` lines of ``u v w`` and a start vertex, all 1-based.

    Returns the undirected graph and the 0-based start vertex.
    """
    try:
        numbers = [int(token) for token in text.split()]
    except ValueError as exc:
        raise ValueError(f"graph description must hold only integers: {exc}") from None
    if len(numbers) < 2:
        raise ValueError("graph description must start with vertex and edge counts")
    vertex_count, edge_count = numbers[0], numbers[1]
    if vertex_count < 0 or edge_count < 0:
        raise ValueError("vertex and edge counts must be non-negative")
    expected = 2 + 3 * edge_count + 1
    if len(numbers) < expected:
        raise ValueError("graph description is truncated")

    graph = Graph(vertex_count)
    edge_numbers = numbers[2:2 + 3 * edge_count]
    for u, v, weight in zip(*[iter(edge_numbers)] * 3):
        for vertex in (u, v):
            if not 1 <= vertex <= vertex_count:
                raise ValueError(f"vertex {vertex} out of range 1..{vertex_count}")
        graph.add_edge(u - 1, v - 1, weight)

    start = numbers[expected - 1]
    if not 1 <= start <= vertex_count:
        raise ValueError(f"start vertex {start} out of range 1..{vertex_count}")
    return graph, start - 1


def main(argv: Sequence[str] | None = None) -> int:
    """Read a graph from standard input and print distances from the start."""
    parser = argparse.ArgumentParser(
        prog="bitcraft-dijkstra",
        description="Read 'n m', m lines 'u v w' and a start vertex (1-based) "
        "from standard input and print shortest distances.",
    )
    parser.parse_args(argv)
    try:
        graph, start = parse_graph(sys.stdin.read())
    except ValueError as exc:
        parser.error(str(exc))
    for vertex, distance in enumerate(graph.shortest_distances(start), start=1):
        shown = "unreachable" if distance is None else distance
        print(f"Distance to {vertex}: {shown}")
    return 0