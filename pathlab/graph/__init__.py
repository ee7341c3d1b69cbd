"""
Graph module.

Provides the graph model and algorithms on it:
- Graph: adjacency matrix/list, edge list and incidence matrix
- RandomGraphGenerator: constrained random graphs
- bfs_shortest_path: minimum hop-count path
- dfs_path: depth-first path discovery
"""

from pathlab.graph.core import Graph
from pathlab.graph.errors import GraphError, InfeasibleConstraintsError, OutOfRangeError
from pathlab.graph.generator import RandomGraphGenerator, generate_graph, max_simple_edges
from pathlab.graph.search import (
    SEARCHES,
    bfs_shortest_path,
    dfs_path,
    dfs_shortest_path,
    get_search,
)

__all__ = [
    "Graph",
    "GraphError",
    "OutOfRangeError",
    "InfeasibleConstraintsError",
    "RandomGraphGenerator",
    "generate_graph",
    "max_simple_edges",
    "SEARCHES",
    "bfs_shortest_path",
    "dfs_path",
    "dfs_shortest_path",
    "get_search",
]
