"""
Graph data structure with adjacency and incidence representations.

Usage:
    from pathlab.graph import Graph

    g = Graph(4)
    g.add_edge(0, 1, 5)
    g.add_edge(1, 2)
    g.get_adj_matrix()   # 4x4 weight grid, 0 = no edge
    g.get_inc_matrix()   # 4x2 signed incidence grid
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

import numpy as np

from pathlab.graph.errors import OutOfRangeError

logger = logging.getLogger(__name__)

Edge = tuple[int, int]
WeightedEdge = tuple[int, int, int]


class Graph:
    """
    Finite weighted graph over vertices 0..vertex_count-1.

    The adjacency matrix, adjacency list and edge list are updated on every
    add_edge call. The incidence matrix is derived lazily and cached until
    the next add_edge.

    Attributes:
        vertex_count: Number of vertices (fixed at construction)
        directed: Whether edges are one-way
    """

    def __init__(self, vertex_count: int, directed: bool = False) -> None:
        """
        Initialize an edgeless graph.

        Args:
            vertex_count: Number of vertices (>= 0)
            directed: Whether the graph is directed
        """
        if vertex_count < 0:
            raise ValueError(f"vertex_count must be >= 0, got {vertex_count}")

        self._vertices = int(vertex_count)
        self._directed = bool(directed)
        self._adj_matrix = np.zeros((self._vertices, self._vertices), dtype=np.int64)
        self._adj_list: list[list[tuple[int, int]]] = [[] for _ in range(self._vertices)]
        self._edges: list[Edge] = []
        self._inc_matrix: np.ndarray | None = None

    @classmethod
    def from_edges(
        cls,
        vertex_count: int,
        edges: Iterable[WeightedEdge | Edge],
        directed: bool = False,
    ) -> Graph:
        """
        Build a graph from (u, v) or (u, v, weight) tuples, in order.
        """
        graph = cls(vertex_count, directed=directed)
        for edge in edges:
            graph.add_edge(*edge)
        return graph

    # ------------------------------------------------------------------ #
    # Properties
    # ------------------------------------------------------------------ #

    @property
    def vertex_count(self) -> int:
        return self._vertices

    @property
    def directed(self) -> bool:
        return self._directed

    @property
    def edge_count(self) -> int:
        """Number of add_edge calls so far (duplicates included)."""
        return len(self._edges)

    def __len__(self) -> int:
        return self._vertices

    def __repr__(self) -> str:
        kind = "directed" if self._directed else "undirected"
        return f"Graph(vertices={self._vertices}, edges={len(self._edges)}, {kind})"

    # ------------------------------------------------------------------ #
    # Mutation
    # ------------------------------------------------------------------ #

    def add_edge(self, u: int, v: int, weight: int = 1) -> None:
        """
        Add an edge from u to v.

        Duplicate edges and self-loops are not rejected; a repeated (u, v)
        overwrites the matrix weight and is listed again in the edge list.

        Args:
            u: Starting vertex
            v: Ending vertex
            weight: Positive integer weight

        Raises:
            OutOfRangeError: If u or v is not a vertex of this graph
            ValueError: If weight is not a positive integer
        """
        self._check_vertex(u)
        self._check_vertex(v)
        if not is_integer(weight) or weight <= 0:
            raise ValueError(f"Edge weight must be a positive integer, got {weight!r}")
        u, v, weight = int(u), int(v), int(weight)

        self._adj_matrix[u, v] = weight
        if not self._directed:
            self._adj_matrix[v, u] = weight
        self._adj_list[u].append((v, weight))
        self._edges.append((u, v))

        # Incidence columns follow the edge list
        self._inc_matrix = None

        logger.debug(f"Added edge {u} -> {v} (weight {weight})")

    # ------------------------------------------------------------------ #
    # Representations (snapshots, never live views)
    # ------------------------------------------------------------------ #

    def get_adj_matrix(self) -> np.ndarray:
        """Return a copy of the vertex x vertex weight matrix."""
        return self._adj_matrix.copy()

    def get_adj_list(self) -> list[list[tuple[int, int]]]:
        """Return a copy of the per-vertex (neighbor, weight) lists."""
        return [list(neighbors) for neighbors in self._adj_list]

    def get_edges(self) -> list[Edge]:
        """Return a copy of the (u, v) edge list in insertion order."""
        return list(self._edges)

    def get_inc_matrix(self) -> np.ndarray:
        """
        Return the vertex x edge incidence matrix.

        Column i describes edges[i] = (u, v) with w = |weight(u, v)|:
        row u holds w, row v holds -w for directed graphs and w otherwise.

        Returns:
            A copy of the cached matrix, rebuilt if edges were added since
            the last call
        """
        if self._inc_matrix is None:
            self._inc_matrix = self._build_inc_matrix()
        return self._inc_matrix.copy()

    def _build_inc_matrix(self) -> np.ndarray:
        inc = np.zeros((self._vertices, len(self._edges)), dtype=np.int64)
        for i, (u, v) in enumerate(self._edges):
            w = abs(int(self._adj_matrix[u, v]))
            inc[u, i] = w
            inc[v, i] = -w if self._directed else w
        logger.debug(f"Built {inc.shape[0]}x{inc.shape[1]} incidence matrix")
        return inc

    # ------------------------------------------------------------------ #
    # Read-only queries
    # ------------------------------------------------------------------ #

    def has_edge(self, u: int, v: int) -> bool:
        """Whether the matrix holds a nonzero weight at (u, v)."""
        return self.weight(u, v) != 0

    def weight(self, u: int, v: int) -> int:
        """Weight at (u, v), 0 when there is no edge."""
        self._check_vertex(u)
        self._check_vertex(v)
        return int(self._adj_matrix[u, v])

    def neighbors(self, u: int) -> Iterator[int]:
        """Yield vertices reachable from u in one hop, ascending."""
        self._check_vertex(u)
        for v in np.flatnonzero(self._adj_matrix[u]):
            yield int(v)

    def out_degree(self, u: int) -> int:
        self._check_vertex(u)
        return int(np.count_nonzero(self._adj_matrix[u]))

    def in_degree(self, v: int) -> int:
        self._check_vertex(v)
        return int(np.count_nonzero(self._adj_matrix[:, v]))

    def _check_vertex(self, vertex: int) -> None:
        check_vertex(vertex, self._vertices)


def is_integer(value: object) -> bool:
    """True for Python and numpy integers, False for bools, floats and the rest."""
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


def check_vertex(vertex: int, vertex_count: int) -> None:
    """Raise OutOfRangeError unless vertex is an integer in [0, vertex_count)."""
    if not is_integer(vertex) or not 0 <= vertex < vertex_count:
        raise OutOfRangeError(vertex, vertex_count)
