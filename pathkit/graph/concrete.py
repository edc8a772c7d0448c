"""
In-memory graphs satisfying the pathkit capability contract.

DirectedGraph and UndirectedGraph store adjacency as dict-of-dicts keyed
by node, so neighbor listing and edge lookups are O(1) per hop.

Usage:
    from pathkit.graph import DirectedGraph

    graph = DirectedGraph()
    graph.add_edge("A", "B", 2.0)
    graph.add_edge("B", "C", 3.0)
    graph.successors("A")       # ["B"]
    graph.cost(graph.edge_to("A", "B"))  # 2.0
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping, Sequence

from pathkit.config import ABSENT_EDGE_COST
from pathkit.graph.base import Edge, Node
from pathkit.heuristics.spatial import EuclideanHeuristic


def _check_weight(weight: float) -> float:
    weight = float(weight)
    if math.isnan(weight) or weight < 0 or math.isinf(weight):
        raise ValueError(f"Edge weight must be finite and non-negative, got {weight}")
    return weight


class UndirectedGraph:
    """
    Undirected weighted graph.

    Each edge is stored once and indexed from both endpoints, so
    edge_between(a, b) and edge_between(b, a) return the same Edge.
    Parallel edges are not kept: adding an existing pair replaces it.
    """

    def __init__(self, edges: Iterable[Edge] | None = None) -> None:
        self._adj: dict[Node, dict[Node, Edge]] = {}
        for edge in edges or ():
            self.add_edge(edge.source, edge.target, edge.weight)

    # =========================================================================
    # Mutation
    # =========================================================================

    def add_node(self, node: Node) -> None:
        """Add an isolated node (no-op if present)."""
        self._adj.setdefault(node, {})

    def add_edge(self, a: Node, b: Node, weight: float = 1.0) -> Edge:
        """Add or replace the edge between a and b."""
        edge = Edge(a, b, _check_weight(weight))
        self.add_node(a)
        self.add_node(b)
        self._adj[a][b] = edge
        self._adj[b][a] = edge
        return edge

    def remove_edge(self, a: Node, b: Node) -> None:
        """Remove the edge between a and b.

        Raises:
            KeyError: If there is no such edge
        """
        if self.edge_between(a, b) is None:
            raise KeyError(f"No edge between {a!r} and {b!r}")
        del self._adj[a][b]
        self._adj[b].pop(a, None)

    # =========================================================================
    # Accessors
    # =========================================================================

    def has_node(self, node: Node) -> bool:
        return node in self._adj

    def nodes(self) -> list[Node]:
        return list(self._adj)

    def edges(self) -> list[Edge]:
        """Every edge exactly once."""
        seen: set[int] = set()
        result = []
        for targets in self._adj.values():
            for edge in targets.values():
                if id(edge) not in seen:
                    seen.add(id(edge))
                    result.append(edge)
        return result

    def node_count(self) -> int:
        return len(self._adj)

    def edge_count(self) -> int:
        return len(self.edges())

    def neighbors(self, node: Node) -> list[Node]:
        return list(self._adj.get(node, ()))

    def edge_between(self, a: Node, b: Node) -> Edge | None:
        return self._adj.get(a, {}).get(b)

    def degree(self, node: Node) -> int:
        return len(self._adj.get(node, ()))

    def cost(self, edge: Edge | None) -> float:
        """Weight of a present edge, infinity for an absent one."""
        if edge is None:
            return ABSENT_EDGE_COST
        return edge.weight

    def __contains__(self, node: Node) -> bool:
        return node in self._adj

    def __len__(self) -> int:
        return len(self._adj)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(nodes={self.node_count()}, "
            f"edges={self.edge_count()})"
        )


class DirectedGraph:
    """
    Directed weighted graph.

    Successor and predecessor maps are kept in lockstep so both
    directions can be listed without scanning the whole graph.
    """

    def __init__(self, edges: Iterable[Edge] | None = None) -> None:
        self._succ: dict[Node, dict[Node, Edge]] = {}
        self._pred: dict[Node, dict[Node, Edge]] = {}
        for edge in edges or ():
            self.add_edge(edge.source, edge.target, edge.weight)

    # =========================================================================
    # Mutation
    # =========================================================================

    def add_node(self, node: Node) -> None:
        """Add an isolated node (no-op if present)."""
        self._succ.setdefault(node, {})
        self._pred.setdefault(node, {})

    def add_edge(self, source: Node, target: Node, weight: float = 1.0) -> Edge:
        """Add or replace the edge source -> target."""
        edge = Edge(source, target, _check_weight(weight))
        self.add_node(source)
        self.add_node(target)
        self._succ[source][target] = edge
        self._pred[target][source] = edge
        return edge

    def remove_edge(self, source: Node, target: Node) -> None:
        """Remove the edge source -> target.

        Raises:
            KeyError: If there is no such edge
        """
        if self.edge_to(source, target) is None:
            raise KeyError(f"No edge {source!r} -> {target!r}")
        del self._succ[source][target]
        del self._pred[target][source]

    # =========================================================================
    # Accessors
    # =========================================================================

    def has_node(self, node: Node) -> bool:
        return node in self._succ

    def nodes(self) -> list[Node]:
        return list(self._succ)

    def edges(self) -> list[Edge]:
        return [edge for targets in self._succ.values() for edge in targets.values()]

    def node_count(self) -> int:
        return len(self._succ)

    def edge_count(self) -> int:
        return sum(len(targets) for targets in self._succ.values())

    def successors(self, node: Node) -> list[Node]:
        return list(self._succ.get(node, ()))

    def predecessors(self, node: Node) -> list[Node]:
        return list(self._pred.get(node, ()))

    def neighbors(self, node: Node) -> list[Node]:
        """Successors followed by predecessors not already listed."""
        result = self.successors(node)
        seen = set(result)
        result.extend(n for n in self._pred.get(node, ()) if n not in seen)
        return result

    def edge_to(self, source: Node, target: Node) -> Edge | None:
        return self._succ.get(source, {}).get(target)

    def edge_between(self, a: Node, b: Node) -> Edge | None:
        """Edge a -> b if present, otherwise b -> a, otherwise None."""
        edge = self.edge_to(a, b)
        if edge is None:
            edge = self.edge_to(b, a)
        return edge

    def cost(self, edge: Edge | None) -> float:
        """Weight of a present edge, infinity for an absent one."""
        if edge is None:
            return ABSENT_EDGE_COST
        return edge.weight

    def __contains__(self, node: Node) -> bool:
        return node in self._succ

    def __len__(self) -> int:
        return len(self._succ)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(nodes={self.node_count()}, "
            f"edges={self.edge_count()})"
        )


class _SpatialMixin:
    """Adds a Euclidean heuristic_cost backed by per-node coordinates."""

    def _init_positions(self, positions: Mapping[Node, Sequence[float]] | None) -> None:
        self._heuristic = EuclideanHeuristic(positions or {})

    def set_position(self, node: Node, position: Sequence[float]) -> None:
        self._heuristic.set_vector(node, position)

    def position(self, node: Node):
        return self._heuristic.vector(node)

    def heuristic_cost(self, a: Node, b: Node) -> float:
        return self._heuristic(a, b)


class SpatialUndirectedGraph(_SpatialMixin, UndirectedGraph):
    """Undirected graph whose nodes carry coordinates."""

    def __init__(
        self,
        edges: Iterable[Edge] | None = None,
        positions: Mapping[Node, Sequence[float]] | None = None,
    ) -> None:
        super().__init__(edges)
        self._init_positions(positions)


class SpatialDirectedGraph(_SpatialMixin, DirectedGraph):
    """Directed graph whose nodes carry coordinates."""

    def __init__(
        self,
        edges: Iterable[Edge] | None = None,
        positions: Mapping[Node, Sequence[float]] | None = None,
    ) -> None:
        super().__init__(edges)
        self._init_positions(positions)
