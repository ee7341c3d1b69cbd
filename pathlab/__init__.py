"""
Graph Path Lab.

A small laboratory for finite graphs: build a graph edge by edge, derive
its adjacency and incidence representations, generate random graphs under
degree constraints, and compare BFS and DFS path finding on them.
"""

__version__ = "0.1.0"
