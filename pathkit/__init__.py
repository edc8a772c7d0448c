"""
Pathkit graph traversal toolkit.

A support layer that lets uniform-cost search, Dijkstra and A* run
over directed and undirected graphs through one set of accessors,
plus the relaxable priority queue and path helpers they share.
"""

__version__ = "0.1.0"
