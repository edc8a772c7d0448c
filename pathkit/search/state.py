"""
Result records returned by the search algorithms.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from pathkit.graph.base import Node
from pathkit.search.path import rebuild_path


@dataclass
class SearchResult:
    """
    Outcome of a single-pair search.

    Attributes:
        start: Node the search began at
        goal: Node the search was aiming for
        path: Nodes from start to goal inclusive (empty if not found)
        cost: Total path cost (infinity if not found)
        expanded: Number of nodes taken off the open set
        elapsed_ms: Wall-clock search time in milliseconds
        algorithm: Name of the algorithm that produced the result
    """

    start: Node
    goal: Node
    path: list[Node] = field(default_factory=list)
    cost: float = math.inf
    expanded: int = 0
    elapsed_ms: float = 0.0
    algorithm: str = ""

    @property
    def found(self) -> bool:
        """Whether a path to the goal exists."""
        return bool(self.path)

    @property
    def hops(self) -> int | None:
        """Number of edges on the path, or None if not found."""
        if not self.path:
            return None
        return len(self.path) - 1


@dataclass
class ShortestPaths:
    """
    Single-source shortest-path tree.

    Attributes:
        source: Node the tree is rooted at
        distances: Best known cost to every reached node
        predecessors: Parent of every reached node except the source
    """

    source: Node
    distances: dict[Node, float] = field(default_factory=dict)
    predecessors: dict[Node, Node] = field(default_factory=dict)

    def reached(self, node: Node) -> bool:
        return node in self.distances

    def distance_to(self, node: Node) -> float:
        """Cost of the best path to node, infinity if unreachable."""
        return self.distances.get(node, math.inf)

    def path_to(self, node: Node) -> list[Node]:
        """Nodes from the source to node inclusive, or [] if unreachable."""
        if node not in self.distances:
            return []
        return rebuild_path(self.predecessors, node)
