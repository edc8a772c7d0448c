"""
Graph capability protocols and the edge record.

A graph only has to provide neighbor listing and an undirected edge
lookup. Direction, edge costs and heuristics are optional capabilities
detected with isinstance() against the runtime-checkable protocols below.
"""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

# Nodes are opaque identifiers: hashable (used as dict keys) and orderable
Node = Hashable


@dataclass(frozen=True)
class Edge:
    """
    A weighted relation between two nodes.

    Attributes:
        source: Node the edge leaves from
        target: Node the edge points to
        weight: Finite non-negative traversal cost
    """

    source: Node
    target: Node
    weight: float = 1.0

    def reversed(self) -> Edge:
        """Same edge with its endpoints swapped."""
        return Edge(self.target, self.source, self.weight)


@runtime_checkable
class Graph(Protocol):
    """Minimal capability every searchable graph must have."""

    def neighbors(self, node: Node) -> list[Node]:
        """All nodes sharing an edge with node, in either direction."""
        ...

    def edge_between(self, a: Node, b: Node) -> Edge | None:
        """Edge joining a and b regardless of direction, or None."""
        ...


@runtime_checkable
class Directed(Graph, Protocol):
    """Graph that can tell successors apart from predecessors."""

    def successors(self, node: Node) -> list[Node]:
        ...

    def predecessors(self, node: Node) -> list[Node]:
        ...

    def edge_to(self, a: Node, b: Node) -> Edge | None:
        """Edge a -> b, or None."""
        ...


@runtime_checkable
class Coster(Protocol):
    """Graph that prices its own edges."""

    def cost(self, edge: Edge | None) -> float:
        ...


@runtime_checkable
class HeuristicCoster(Protocol):
    """Graph that can estimate the remaining cost between two nodes."""

    def heuristic_cost(self, a: Node, b: Node) -> float:
        ...
