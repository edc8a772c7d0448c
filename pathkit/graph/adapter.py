"""
Capability adapter that turns any graph into a fixed bundle of search functions.

Capability checks (directed? prices its own edges? has a heuristic?) are
isinstance() calls against runtime-checkable protocols, which are slow
relative to a dict lookup. setup_funcs() runs them once per search and
hands back plain callables, so the traversal loop never dispatches on
graph type again.

Usage:
    from pathkit.graph import setup_funcs

    funcs = setup_funcs(graph)
    for succ in funcs.successors(node):
        g = gscore + funcs.cost(funcs.edge(node, succ))
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from pathkit.graph.base import Coster, Directed, Edge, Graph, HeuristicCoster, Node
from pathkit.heuristics.cost import null_heuristic, uniform_cost

logger = logging.getLogger(__name__)

CostFunc = Callable[[Edge | None], float]
HeuristicCostFunc = Callable[[Node, Node], float]
NodesFunc = Callable[[Node], list[Node]]
AdjacencyFunc = Callable[[Node, Node], bool]
EdgeFunc = Callable[[Node, Node], Edge | None]


@dataclass(frozen=True)
class SearchFuncs:
    """
    Immutable per-search bundle of graph accessors and scoring functions.

    Attributes:
        successors: Nodes reachable in one hop from a node
        predecessors: Nodes that reach a node in one hop
        neighbors: Nodes adjacent in either direction
        is_successor: is_successor(a, b) iff there is an edge a -> b
        is_predecessor: is_predecessor(a, b) iff there is an edge b -> a
        is_neighbor: is_neighbor(a, b) iff a and b share an edge
        edge: Direction-aware edge lookup used to price a hop
        cost: Edge cost (infinity for an absent edge)
        heuristic_cost: Estimated remaining cost between two nodes
        directed: Whether the graph distinguished successors from predecessors
    """

    successors: NodesFunc
    predecessors: NodesFunc
    neighbors: NodesFunc
    is_successor: AdjacencyFunc
    is_predecessor: AdjacencyFunc
    is_neighbor: AdjacencyFunc
    edge: EdgeFunc
    cost: CostFunc
    heuristic_cost: HeuristicCostFunc
    directed: bool

    def step_cost(self, a: Node, b: Node) -> float:
        """Cost of moving from a to b (infinity if there is no such edge)."""
        return self.cost(self.edge(a, b))


def _gen_is_successor(graph: Directed) -> AdjacencyFunc:
    def is_successor(node: Node, succ: Node) -> bool:
        return graph.edge_to(node, succ) is not None

    return is_successor


def _gen_is_predecessor(graph: Directed) -> AdjacencyFunc:
    def is_predecessor(node: Node, pred: Node) -> bool:
        return graph.edge_to(pred, node) is not None

    return is_predecessor


def _gen_is_neighbor(graph: Graph) -> AdjacencyFunc:
    def is_neighbor(node: Node, other: Node) -> bool:
        return graph.edge_between(other, node) is not None

    return is_neighbor


def setup_funcs(
    graph: Graph,
    cost: CostFunc | None = None,
    heuristic_cost: HeuristicCostFunc | None = None,
) -> SearchFuncs:
    """
    Build the search bundle for a graph.

    Args:
        graph: Any object with neighbors() and edge_between()
        cost: Explicit edge-cost override
        heuristic_cost: Explicit heuristic override

    Returns:
        SearchFuncs wired to the graph's strongest capabilities

    Raises:
        TypeError: If graph lacks even the minimal neighbor capability
    """
    if not isinstance(graph, Graph):
        raise TypeError(
            f"{type(graph).__name__} must provide neighbors() and edge_between()"
        )

    directed = isinstance(graph, Directed)
    if directed:
        successors = graph.successors
        predecessors = graph.predecessors
        neighbors = graph.neighbors
        is_successor = _gen_is_successor(graph)
        is_predecessor = _gen_is_predecessor(graph)
        is_neighbor = _gen_is_neighbor(graph)
        edge = graph.edge_to
    else:
        successors = predecessors = neighbors = graph.neighbors
        is_successor = is_predecessor = is_neighbor = _gen_is_neighbor(graph)
        edge = graph.edge_between

    if heuristic_cost is None:
        if isinstance(graph, HeuristicCoster):
            heuristic_cost = graph.heuristic_cost
        else:
            heuristic_cost = null_heuristic

    if cost is None:
        if isinstance(graph, Coster):
            cost = graph.cost
        else:
            cost = uniform_cost

    logger.debug(
        f"Search funcs for {type(graph).__name__}: directed={directed}, "
        f"cost={getattr(cost, '__name__', type(cost).__name__)}, "
        f"heuristic={getattr(heuristic_cost, '__name__', type(heuristic_cost).__name__)}"
    )

    return SearchFuncs(
        successors=successors,
        predecessors=predecessors,
        neighbors=neighbors,
        is_successor=is_successor,
        is_predecessor=is_predecessor,
        is_neighbor=is_neighbor,
        edge=edge,
        cost=cost,
        heuristic_cost=heuristic_cost,
        directed=directed,
    )
