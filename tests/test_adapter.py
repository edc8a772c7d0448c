"""
Unit tests for graph capability adaptation.
"""

import math

import pytest

from pathkit.graph import DirectedGraph, SpatialDirectedGraph, setup_funcs
from pathkit.graph.base import Coster, Directed, Graph, HeuristicCoster
from pathkit.heuristics import null_heuristic, uniform_cost


class TestCapabilityDetection:
    """Test protocol checks on the in-memory graphs."""

    def test_directed_graph_capabilities(self, abc_graph):
        """DirectedGraph is directed and prices edges, but has no heuristic."""
        assert isinstance(abc_graph, Graph)
        assert isinstance(abc_graph, Directed)
        assert isinstance(abc_graph, Coster)
        assert not isinstance(abc_graph, HeuristicCoster)

    def test_undirected_graph_capabilities(self, triangle_graph):
        """UndirectedGraph is not directed."""
        assert isinstance(triangle_graph, Graph)
        assert not isinstance(triangle_graph, Directed)

    def test_spatial_graph_has_heuristic(self, grid_graph):
        """Spatial graphs expose heuristic_cost."""
        assert isinstance(grid_graph, HeuristicCoster)

    def test_non_graph_rejected(self):
        """Objects without neighbors() should fail loudly."""
        with pytest.raises(TypeError):
            setup_funcs(object())


class TestDirectedWiring:
    """Test accessors built for a directed graph."""

    def test_successors_and_predecessors_differ(self, abc_graph):
        """Direction should be preserved."""
        funcs = setup_funcs(abc_graph)
        assert funcs.directed is True
        assert funcs.successors("B") == ["C"]
        assert funcs.predecessors("B") == ["A"]
        assert sorted(funcs.neighbors("B")) == ["A", "C"]

    def test_adjacency_predicates(self, abc_graph):
        """is_successor/is_predecessor follow edge direction, is_neighbor ignores it."""
        funcs = setup_funcs(abc_graph)
        assert funcs.is_successor("A", "B")
        assert not funcs.is_successor("B", "A")
        assert funcs.is_predecessor("B", "A")
        assert not funcs.is_predecessor("A", "B")
        assert funcs.is_neighbor("A", "B")
        assert funcs.is_neighbor("B", "A")
        assert not funcs.is_neighbor("A", "C")

    def test_edge_lookup_is_direction_aware(self, abc_graph):
        """Stepping against an edge should be unreachable."""
        funcs = setup_funcs(abc_graph)
        assert funcs.step_cost("A", "B") == 2.0
        assert funcs.step_cost("B", "A") == math.inf


class TestUndirectedFallback:
    """Test accessors collapsed for an undirected graph."""

    def test_accessors_identical(self, neighbor_only_graph):
        """successors, predecessors and neighbors should agree for every node."""
        funcs = setup_funcs(neighbor_only_graph)
        assert funcs.directed is False
        for node in ["a", "b", "c", "missing"]:
            expected = neighbor_only_graph.neighbors(node)
            assert funcs.successors(node) == expected
            assert funcs.predecessors(node) == expected
            assert funcs.neighbors(node) == expected

    def test_predicates_symmetric(self, triangle_graph):
        """All three predicates should be the symmetric edge test."""
        funcs = setup_funcs(triangle_graph)
        for check in (funcs.is_successor, funcs.is_predecessor, funcs.is_neighbor):
            assert check(1, 2) and check(2, 1)
            assert not check(1, 4)


class TestCostResolution:
    """Test cost and heuristic resolution order."""

    def test_defaults_without_capabilities(self, neighbor_only_graph):
        """No capability and no override should give the stateless defaults."""
        funcs = setup_funcs(neighbor_only_graph)
        assert funcs.cost is uniform_cost
        assert funcs.heuristic_cost is null_heuristic
        assert funcs.step_cost("a", "b") == 1.0
        assert funcs.step_cost("a", "c") == math.inf

    def test_graph_cost_used(self, abc_graph):
        """The graph's own cost capability should win over the default."""
        funcs = setup_funcs(abc_graph)
        assert funcs.step_cost("B", "C") == 3.0

    def test_override_wins_over_graph(self, abc_graph):
        """An explicit cost argument should win over the graph's cost."""
        funcs = setup_funcs(abc_graph, cost=lambda edge: 42.0)
        assert funcs.step_cost("A", "B") == 42.0

    def test_graph_heuristic_used(self):
        """A spatial graph's heuristic should be picked up."""
        graph = SpatialDirectedGraph(positions={"a": (0, 0), "b": (0, 3)})
        funcs = setup_funcs(graph)
        assert funcs.heuristic_cost("a", "b") == pytest.approx(3.0)

    def test_heuristic_override_wins(self, grid_graph):
        """An explicit heuristic should win over the graph's own."""
        funcs = setup_funcs(grid_graph, heuristic_cost=lambda a, b: 7.0)
        assert funcs.heuristic_cost((0, 0), (4, 4)) == 7.0

    def test_bundle_is_immutable(self, abc_graph):
        """SearchFuncs should not allow reassignment."""
        funcs = setup_funcs(abc_graph)
        with pytest.raises(AttributeError):
            funcs.cost = uniform_cost

    def test_bundle_tracks_graph_changes(self):
        """Accessors are bound methods, so later edges are visible."""
        graph = DirectedGraph()
        funcs = setup_funcs(graph)
        graph.add_edge(1, 2)
        assert funcs.successors(1) == [2]
