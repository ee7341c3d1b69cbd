"""
Path finding on a Graph.

- bfs_shortest_path: minimum hop-count path (weights ignored)
- dfs_path: some path discovered depth-first, not necessarily minimal

Both read the graph without copying or mutating it and return an empty
list when the target is unreachable.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Callable

from pathlab.graph.core import Graph, check_vertex

logger = logging.getLogger(__name__)

SearchFn = Callable[[Graph, int, int], "list[int]"]


def bfs_shortest_path(graph: Graph, source: int, target: int) -> list[int]:
    """
    Find a minimum hop-count path using breadth-first search.

    Neighbors are scanned in ascending index order, so among equally short
    paths the one through lower-numbered vertices is returned.

    Args:
        graph: Graph to search
        source: Start vertex
        target: End vertex

    Returns:
        Vertices from source to target inclusive, or [] if no path exists

    Raises:
        OutOfRangeError: If source or target is not a vertex of graph
    """
    _check_endpoints(graph, source, target)

    visited = {source}
    parent: dict[int, int] = {}
    queue = deque([source])

    while queue:
        u = queue.popleft()
        for v in graph.neighbors(u):
            if v in visited:
                continue
            visited.add(v)
            parent[v] = u
            queue.append(v)

    path = _reconstruct(parent, visited, source, target)
    logger.debug(f"BFS {source} -> {target}: {path or 'no path'}")
    return path


def dfs_path(graph: Graph, source: int, target: int) -> list[int]:
    """
    Find a path using depth-first search.

    The scan of a vertex's neighbors stops as soon as the target is pushed,
    but the search keeps draining the stack afterwards. Once the target is
    visited its parent link is fixed, so the result is the first discovery
    route. It is not guaranteed to be the shortest.

    Args:
        graph: Graph to search
        source: Start vertex
        target: End vertex

    Returns:
        Vertices from source to target inclusive, or [] if no path exists

    Raises:
        OutOfRangeError: If source or target is not a vertex of graph
    """
    _check_endpoints(graph, source, target)

    visited = {source}
    parent: dict[int, int] = {}
    stack = [source]

    while stack:
        u = stack.pop()
        for v in graph.neighbors(u):
            if v in visited:
                continue
            visited.add(v)
            parent[v] = u
            stack.append(v)
            if v == target:
                break

    path = _reconstruct(parent, visited, source, target)
    logger.debug(f"DFS {source} -> {target}: {path or 'no path'}")
    return path


# Name used by older callers; the routine does not guarantee minimality
dfs_shortest_path = dfs_path


SEARCHES: dict[str, SearchFn] = {
    "bfs": bfs_shortest_path,
    "dfs": dfs_path,
}


def get_search(name: str) -> SearchFn:
    """
    Get a search routine by name.

    Args:
        name: Algorithm identifier (bfs, dfs)

    Returns:
        Function taking (graph, source, target) and returning a path

    Raises:
        ValueError: If the name is unknown
    """
    if name not in SEARCHES:
        available = ", ".join(SEARCHES.keys())
        raise ValueError(f"Unknown search '{name}'. Available: {available}")
    return SEARCHES[name]


def _check_endpoints(graph: Graph, source: int, target: int) -> None:
    for vertex in (source, target):
        check_vertex(vertex, graph.vertex_count)


def _reconstruct(parent: dict[int, int], visited: set[int], source: int, target: int) -> list[int]:
    """Follow parent links back from target, then flip to source -> target."""
    if target not in visited:
        return []

    path = [target]
    while path[-1] != source:
        path.append(parent[path[-1]])
    path.reverse()
    return path
