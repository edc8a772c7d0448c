"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from __future__ import annotations

import pytest

from pathkit.graph import DirectedGraph, Edge, SpatialUndirectedGraph, UndirectedGraph


class NeighborOnlyGraph:
    """Graph exposing nothing beyond the minimal capability."""

    def __init__(self, pairs: list[tuple[str, str]]) -> None:
        self._adj: dict[str, list[str]] = {}
        for a, b in pairs:
            self._adj.setdefault(a, []).append(b)
            self._adj.setdefault(b, []).append(a)

    def neighbors(self, node):
        return list(self._adj.get(node, []))

    def edge_between(self, a, b):
        if b in self._adj.get(a, []):
            return Edge(a, b)
        return None


@pytest.fixture
def abc_graph() -> DirectedGraph:
    """Directed A -> B (2), B -> C (3)."""
    graph = DirectedGraph()
    graph.add_edge("A", "B", 2.0)
    graph.add_edge("B", "C", 3.0)
    return graph


@pytest.fixture
def diamond_graph() -> DirectedGraph:
    """
    Directed diamond where the cheap route has more hops.

    S -> A (1) -> B (1) -> G (1)  total 3, 3 hops
    S -> G (10)                   total 10, 1 hop
    S -> C (4) -> G (4)           total 8, 2 hops
    """
    graph = DirectedGraph()
    for source, target, weight in [
        ("S", "A", 1.0),
        ("A", "B", 1.0),
        ("B", "G", 1.0),
        ("S", "G", 10.0),
        ("S", "C", 4.0),
        ("C", "G", 4.0),
    ]:
        graph.add_edge(source, target, weight)
    return graph


@pytest.fixture
def triangle_graph() -> UndirectedGraph:
    """Undirected triangle 1-2 (1), 2-3 (2), 1-3 (5), plus isolated 4."""
    graph = UndirectedGraph()
    graph.add_edge(1, 2, 1.0)
    graph.add_edge(2, 3, 2.0)
    graph.add_edge(1, 3, 5.0)
    graph.add_node(4)
    return graph


@pytest.fixture
def neighbor_only_graph() -> NeighborOnlyGraph:
    """Undirected path a - b - c with no cost or heuristic capability."""
    return NeighborOnlyGraph([("a", "b"), ("b", "c")])


@pytest.fixture
def grid_graph() -> SpatialUndirectedGraph:
    """
    5x5 4-connected grid with a wall in column 2 except at row 4.

    Nodes are (row, col) tuples positioned at their own coordinates.
    """
    size = 5
    walls = {(r, 2) for r in range(4)}
    graph = SpatialUndirectedGraph()
    for r in range(size):
        for c in range(size):
            if (r, c) in walls:
                continue
            graph.add_node((r, c))
            graph.set_position((r, c), (r, c))
            for nr, nc in ((r + 1, c), (r, c + 1)):
                if nr < size and nc < size and (nr, nc) not in walls:
                    graph.add_edge((r, c), (nr, nc), 1.0)
    return graph
