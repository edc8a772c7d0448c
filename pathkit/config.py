"""
Configuration constants for pathkit.

All tunable search parameters are defined here.
Overrides are read from environment variables at import time.
"""

import os

# =============================================================================
# Cost Configuration
# =============================================================================

# Cost of traversing a present edge when the graph has no cost capability
UNIFORM_EDGE_COST = 1.0

# Cost of an absent edge (unreachable via that edge)
ABSENT_EDGE_COST = float("inf")

# Heuristic estimate used when neither caller nor graph supplies one
NULL_HEURISTIC_COST = 0.0

# =============================================================================
# Search Configuration
# =============================================================================

# Weighted A* epsilon: f(n) = g(n) + EPSILON * h(n)
# 1.0 keeps A* optimal with an admissible heuristic; > 1 trades optimality for speed
ASTAR_EPSILON = float(os.environ.get("PATHKIT_ASTAR_EPSILON", "1.0"))

# Maximum BFS depth (None = unbounded)
_bfs_max_depth = os.environ.get("PATHKIT_BFS_MAX_DEPTH")
BFS_MAX_DEPTH = int(_bfs_max_depth) if _bfs_max_depth else None

# =============================================================================
# Benchmark Configuration
# =============================================================================

# Side length of the generated grid graph
BENCHMARK_GRID_SIZE = 40

# Fraction of grid cells turned into walls
BENCHMARK_WALL_DENSITY = 0.2

# Number of random start/goal pairs per run
BENCHMARK_QUERIES = 20

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("PATHKIT_LOG_LEVEL", "WARNING")
