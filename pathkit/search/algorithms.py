"""
Search algorithms built on the pathkit traversal layer.

Each algorithm builds its SearchFuncs bundle once, then drives its own
loop with the relaxable priority queue and a predecessor dict:
- a_star: Best-first search ordered by g + epsilon * h
- dijkstra: A* with the null heuristic
- uniform_cost_search: A* counting hops, ignoring the graph's own costs
- dijkstra_from: Single-source shortest-path tree
- breadth_first_search: Fewest-hop path, neighbors visited in id order
- minimum_spanning_tree: Kruskal over the edge ordering
"""

from __future__ import annotations

import logging
import math
import time
from collections import deque
from collections.abc import Sequence
from dataclasses import replace

from pathkit.config import ASTAR_EPSILON, BFS_MAX_DEPTH
from pathkit.errors import NegativeWeightError, NodeNotFoundError
from pathkit.graph.adapter import CostFunc, HeuristicCostFunc, SearchFuncs, setup_funcs
from pathkit.graph.base import Edge, Graph, Node
from pathkit.heuristics.cost import null_heuristic, uniform_cost
from pathkit.search.ordering import sort_edges, sort_nodes
from pathkit.search.path import rebuild_path
from pathkit.search.queue import AStarPriorityQueue
from pathkit.search.state import SearchResult, ShortestPaths

logger = logging.getLogger(__name__)


def _require_node(graph: Graph, node: Node) -> None:
    """Raise if the graph can report membership and node is not a member."""
    has_node = getattr(graph, "has_node", None)
    if has_node is not None and not has_node(node):
        raise NodeNotFoundError(node)


def _step_cost(funcs: SearchFuncs, a: Node, b: Node) -> float:
    step = funcs.step_cost(a, b)
    if step < 0:
        raise NegativeWeightError(a, b, step)
    return step


def _elapsed_ms(started: float) -> float:
    return (time.perf_counter() - started) * 1000


# =============================================================================
# Single-pair Searches
# =============================================================================


def a_star(
    graph: Graph,
    start: Node,
    goal: Node,
    cost: CostFunc | None = None,
    heuristic_cost: HeuristicCostFunc | None = None,
    epsilon: float = ASTAR_EPSILON,
) -> SearchResult:
    """
    Find a cheapest path from start to goal with A*.

    Args:
        graph: Graph satisfying at least the neighbor capability
        start: Node to search from
        goal: Node to reach
        cost: Edge-cost override (default: graph.cost, else uniform)
        heuristic_cost: Heuristic override (default: graph.heuristic_cost, else 0)
        epsilon: Heuristic weight; f = g + epsilon * h. Values above 1
            search faster but may return a suboptimal path.

    Returns:
        SearchResult; result.found is False if goal is unreachable

    Raises:
        NodeNotFoundError: If start or goal is not in the graph
        NegativeWeightError: If an edge on the frontier has negative cost
        ValueError: If epsilon is negative
    """
    if epsilon < 0:
        raise ValueError(f"epsilon must be non-negative, got {epsilon}")
    _require_node(graph, start)
    _require_node(graph, goal)

    return _best_first(
        setup_funcs(graph, cost, heuristic_cost),
        start,
        goal,
        epsilon,
        algorithm="a_star",
    )


def dijkstra(
    graph: Graph,
    start: Node,
    goal: Node,
    cost: CostFunc | None = None,
) -> SearchResult:
    """Cheapest path from start to goal, ignoring any heuristic."""
    _require_node(graph, start)
    _require_node(graph, goal)

    return _best_first(
        setup_funcs(graph, cost, null_heuristic),
        start,
        goal,
        1.0,
        algorithm="dijkstra",
    )


def uniform_cost_search(graph: Graph, start: Node, goal: Node) -> SearchResult:
    """Fewest-edge path found by cost-ordered search with every edge costing 1."""
    _require_node(graph, start)
    _require_node(graph, goal)

    return _best_first(
        setup_funcs(graph, uniform_cost, null_heuristic),
        start,
        goal,
        1.0,
        algorithm="uniform_cost",
    )


def _best_first(
    funcs: SearchFuncs,
    start: Node,
    goal: Node,
    epsilon: float,
    algorithm: str,
) -> SearchResult:
    started = time.perf_counter()
    heuristic = funcs.heuristic_cost

    open_set = AStarPriorityQueue()
    open_set.push(start, 0.0, epsilon * heuristic(start, goal))
    predecessors: dict[Node, Node] = {}
    closed: set[Node] = set()
    expanded = 0

    while open_set:
        current = open_set.pop()
        expanded += 1

        if current.node == goal:
            path = rebuild_path(predecessors, current)
            logger.debug(
                f"{algorithm}: found path ({len(path) - 1} hops, cost {current.gscore}) "
                f"after expanding {expanded} nodes"
            )
            return SearchResult(
                start=start,
                goal=goal,
                path=path,
                cost=current.gscore,
                expanded=expanded,
                elapsed_ms=_elapsed_ms(started),
                algorithm=algorithm,
            )

        closed.add(current.node)

        for succ in funcs.successors(current.node):
            if succ in closed:
                continue

            step = _step_cost(funcs, current.node, succ)
            if math.isinf(step):
                continue
            gscore = current.gscore + step

            existing, queued = open_set.find(succ)
            if not queued:
                predecessors[succ] = current.node
                open_set.push(succ, gscore, gscore + epsilon * heuristic(succ, goal))
            elif gscore < existing.gscore:
                predecessors[succ] = current.node
                open_set.relax(succ, gscore, gscore + epsilon * heuristic(succ, goal))

    logger.debug(f"{algorithm}: no path from {start!r} to {goal!r} ({expanded} expanded)")
    return SearchResult(
        start=start,
        goal=goal,
        expanded=expanded,
        elapsed_ms=_elapsed_ms(started),
        algorithm=algorithm,
    )


def breadth_first_search(
    graph: Graph,
    start: Node,
    goal: Node,
    max_depth: int | None = BFS_MAX_DEPTH,
) -> SearchResult:
    """
    Find a fewest-hop path with BFS.

    Successors are visited in node-id order so the returned path is the
    same on every run. The reported cost is the sum of the graph's edge
    costs along that path, which need not be the cheapest one.

    Args:
        graph: Graph to search
        start: Node to search from
        goal: Node to reach
        max_depth: Stop expanding past this many hops (None = unbounded)

    Raises:
        NodeNotFoundError: If start or goal is not in the graph
    """
    _require_node(graph, start)
    _require_node(graph, goal)
    started = time.perf_counter()
    funcs = setup_funcs(graph)

    # Maps node to parent node
    visited: dict[Node, Node | None] = {start: None}
    queue = deque([(start, 0)])
    expanded = 0
    found = start == goal

    while queue and not found:
        current, depth = queue.popleft()
        expanded += 1

        if max_depth is not None and depth >= max_depth:
            continue

        for succ in sort_nodes(funcs.successors(current)):
            if succ in visited:
                continue
            visited[succ] = current
            if succ == goal:
                found = True
                break
            queue.append((succ, depth + 1))

    if not found:
        logger.debug(f"bfs: no path from {start!r} to {goal!r} within depth {max_depth}")
        return SearchResult(
            start=start,
            goal=goal,
            expanded=expanded,
            elapsed_ms=_elapsed_ms(started),
            algorithm="bfs",
        )

    path = rebuild_path(visited, goal)
    return SearchResult(
        start=start,
        goal=goal,
        path=path,
        cost=path_cost(graph, path),
        expanded=expanded,
        elapsed_ms=_elapsed_ms(started),
        algorithm="bfs",
    )


# =============================================================================
# Whole-graph Algorithms
# =============================================================================


def dijkstra_from(
    graph: Graph,
    start: Node,
    cost: CostFunc | None = None,
) -> ShortestPaths:
    """
    Shortest-path tree from start to every reachable node.

    Raises:
        NodeNotFoundError: If start is not in the graph
        NegativeWeightError: If a reachable edge has negative cost
    """
    _require_node(graph, start)
    funcs = setup_funcs(graph, cost, null_heuristic)
    tree = ShortestPaths(source=start)

    open_set = AStarPriorityQueue()
    open_set.push(start, 0.0, 0.0)

    while open_set:
        current = open_set.pop()
        tree.distances[current.node] = current.gscore

        for succ in funcs.successors(current.node):
            if succ in tree.distances:
                continue

            step = _step_cost(funcs, current.node, succ)
            if math.isinf(step):
                continue
            gscore = current.gscore + step

            existing, queued = open_set.find(succ)
            if not queued:
                tree.predecessors[succ] = current.node
                open_set.push(succ, gscore, gscore)
            elif gscore < existing.gscore:
                tree.predecessors[succ] = current.node
                open_set.relax(succ, gscore, gscore)

    logger.debug(f"dijkstra_from: reached {len(tree.distances)} nodes from {start!r}")
    return tree


def minimum_spanning_tree(graph: Graph, cost: CostFunc | None = None) -> list[Edge]:
    """
    Minimum spanning forest by Kruskal's algorithm.

    Direction is ignored. The graph must also provide nodes() and edges(),
    as the in-memory graphs do. Returned edges carry the weight they were
    ranked by, in edge order.

    Raises:
        TypeError: If the graph cannot list its nodes and edges
    """
    if not (hasattr(graph, "nodes") and hasattr(graph, "edges")):
        raise TypeError(f"{type(graph).__name__} must provide nodes() and edges()")
    funcs = setup_funcs(graph, cost)

    parent: dict[Node, Node] = {node: node for node in graph.nodes()}

    def find(node: Node) -> Node:
        while parent[node] != node:
            parent[node] = parent[parent[node]]
            node = parent[node]
        return node

    weighted = [replace(edge, weight=funcs.cost(edge)) for edge in graph.edges()]
    tree = []
    for edge in sort_edges(weighted):
        root_a = find(edge.source)
        root_b = find(edge.target)
        if root_a == root_b:
            continue
        parent[root_a] = root_b
        tree.append(edge)

    return tree


# =============================================================================
# Path Helpers
# =============================================================================


def is_path(graph: Graph, path: Sequence[Node]) -> bool:
    """
    Whether every consecutive pair in path is joined by an edge.

    Directed graphs require each hop to follow an edge's direction.
    An empty path is trivially valid; a single node is valid if the graph has it.
    """
    if not path:
        return True
    if len(path) == 1:
        has_node = getattr(graph, "has_node", None)
        return has_node is None or has_node(path[0])

    funcs = setup_funcs(graph)
    return all(funcs.is_successor(a, b) for a, b in zip(path, path[1:]))


def path_cost(graph: Graph, path: Sequence[Node], cost: CostFunc | None = None) -> float:
    """Total cost of walking path (infinity if a hop has no edge)."""
    funcs = setup_funcs(graph, cost)
    return sum((funcs.step_cost(a, b) for a, b in zip(path, path[1:])), 0.0)
