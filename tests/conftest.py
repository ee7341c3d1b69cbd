"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

import pytest

from pathlab.graph import Graph


@pytest.fixture
def shortcut_graph() -> Graph:
    """Undirected 4-vertex graph where 0-2-3 beats 0-1-2-3."""
    return Graph.from_edges(4, [(0, 1, 5), (1, 2, 3), (0, 2, 1), (2, 3, 4)])


@pytest.fixture
def chain_graph() -> Graph:
    """Undirected path 0-1-2-3-4 plus an isolated vertex 5."""
    return Graph.from_edges(6, [(0, 1), (1, 2), (2, 3), (3, 4)])


@pytest.fixture
def directed_cycle() -> Graph:
    """Directed cycle 0 -> 1 -> 2 -> 3 -> 0."""
    return Graph.from_edges(4, [(0, 1, 2), (1, 2, 2), (2, 3, 2), (3, 0, 2)], directed=True)


@pytest.fixture
def dfs_detour_graph() -> Graph:
    """
    Undirected graph where DFS takes the long way from 0 to 4.

    Shortest route is 0-1-4. DFS pops the higher-numbered branch first and
    discovers 4 through 0-2-3-4; the first discovery fixes the parent link.
    """
    return Graph.from_edges(5, [(0, 1), (1, 4), (0, 2), (2, 3), (3, 4)])
