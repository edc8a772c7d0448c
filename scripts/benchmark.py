#!/usr/bin/env python3
"""
Benchmark the search algorithms on a random grid graph.

Usage:
    python scripts/benchmark.py
    python scripts/benchmark.py --size 60 --walls 0.25 --queries 50 --seed 7
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import numpy as np

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from pathkit.config import (  # noqa: E402 - must be after sys.path modification
    BENCHMARK_GRID_SIZE,
    BENCHMARK_QUERIES,
    BENCHMARK_WALL_DENSITY,
    LOG_LEVEL,
)
from pathkit.graph import SpatialUndirectedGraph  # noqa: E402
from pathkit.search import get_algorithm  # noqa: E402

logger = logging.getLogger(__name__)

ALGORITHMS = ["a_star", "dijkstra", "uniform_cost", "bfs"]


def build_grid(size: int, wall_density: float, rng: np.random.Generator) -> SpatialUndirectedGraph:
    """4-connected grid with random walls; every cell is positioned at (row, col)."""
    open_cells = rng.random((size, size)) >= wall_density
    graph = SpatialUndirectedGraph()

    for row, col in zip(*np.nonzero(open_cells), strict=True):
        node = (int(row), int(col))
        graph.add_node(node)
        graph.set_position(node, node)
        for d_row, d_col in ((1, 0), (0, 1)):
            r, c = row + d_row, col + d_col
            if r < size and c < size and open_cells[r, c]:
                graph.add_edge(node, (int(r), int(c)), 1.0)

    return graph


def run_benchmark(size: int, wall_density: float, queries: int, seed: int | None) -> None:
    rng = np.random.default_rng(seed)
    graph = build_grid(size, wall_density, rng)
    nodes = graph.nodes()

    print("=" * 70)
    print("pathkit - Algorithm Comparison")
    print("=" * 70)
    print(f"\nGrid {size}x{size}, {graph.node_count():,} nodes, {graph.edge_count():,} edges")
    print(f"Running {len(ALGORITHMS)} algorithms on {queries} random queries...\n")

    results: dict[str, list] = {name: [] for name in ALGORITHMS}

    for i in range(queries):
        start, goal = (nodes[j] for j in rng.choice(len(nodes), size=2, replace=False))

        for name in ALGORITHMS:
            result = get_algorithm(name)(graph, start, goal)
            results[name].append(result)

        reference = results["dijkstra"][-1]
        status = f"cost {reference.cost:.0f}" if reference.found else "unreachable"
        logger.info(f"[{i + 1}/{queries}] {start} -> {goal}: {status}")

    print("\n" + "=" * 70)
    print("SUMMARY")
    print("=" * 70)

    for name in ALGORITHMS:
        runs = results[name]
        found = [r for r in runs if r.found]
        avg_expanded = sum(r.expanded for r in runs) / len(runs) if runs else 0
        avg_ms = sum(r.elapsed_ms for r in runs) / len(runs) if runs else 0
        avg_cost = sum(r.cost for r in found) / len(found) if found else 0

        print(
            f"  {name:15} : {len(found)}/{len(runs)} found, avg cost {avg_cost:.1f}, "
            f"avg {avg_expanded:,.0f} expanded, {avg_ms:.2f} ms"
        )


def main() -> None:
    parser = argparse.ArgumentParser(description="Benchmark pathkit search algorithms")
    parser.add_argument("--size", type=int, default=BENCHMARK_GRID_SIZE, help="Grid side length")
    parser.add_argument("--walls", type=float, default=BENCHMARK_WALL_DENSITY, help="Wall density (0-1)")
    parser.add_argument("--queries", type=int, default=BENCHMARK_QUERIES, help="Number of start/goal pairs")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log every query")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO if args.verbose else LOG_LEVEL,
        format="%(message)s",
    )

    run_benchmark(args.size, args.walls, args.queries, args.seed)


if __name__ == "__main__":
    main()
