"""
Random graph generator with degree and edge-count constraints.

Edges are placed by rejection sampling: a random (u, v) pair is drawn and
kept only if it satisfies every constraint. When earlier choices leave no
legal pair, placement restarts from an empty graph. Sampling and restarts
share one attempt budget, so unreachable targets fail with
InfeasibleConstraintsError instead of spinning forever.
"""

from __future__ import annotations

import logging
import random

from pathlab.config import (
    GENERATOR_MAX_ATTEMPTS_PER_EDGE,
    GENERATOR_MIN_ATTEMPTS,
    WEIGHT_MAX,
    WEIGHT_MIN,
)
from pathlab.graph.core import Graph
from pathlab.graph.errors import InfeasibleConstraintsError

logger = logging.getLogger(__name__)


def max_simple_edges(vertex_count: int, directed: bool) -> int:
    """Maximum number of edges without self-loops or parallel edges."""
    pairs = vertex_count * (vertex_count - 1)
    return pairs if directed else pairs // 2


class _Placement:
    """Graph under construction plus the degree counters its caps are checked against."""

    def __init__(
        self,
        vertex_count: int,
        directed: bool,
        degree_cap: int,
        in_cap: int | None,
        out_cap: int | None,
    ) -> None:
        self.graph = Graph(vertex_count, directed=directed)
        self.placed = 0
        self._degree_cap = degree_cap
        self._in_cap = in_cap
        self._out_cap = out_cap
        self._degree = [0] * vertex_count
        self._incoming = [0] * vertex_count
        self._outgoing = [0] * vertex_count

    def allows(self, u: int, v: int) -> bool:
        """Whether u -> v can be added without breaking a constraint."""
        if u == v:
            return False
        if self._degree[u] >= self._degree_cap or self._degree[v] >= self._degree_cap:
            return False
        if self._in_cap is not None and self._incoming[v] >= self._in_cap:
            return False
        if self._out_cap is not None and self._outgoing[u] >= self._out_cap:
            return False
        return not self.graph.has_edge(u, v)

    def is_stuck(self) -> bool:
        n = self.graph.vertex_count
        return not any(self.allows(u, v) for u in range(n) for v in range(n))

    def add(self, u: int, v: int, weight: int) -> None:
        self.graph.add_edge(u, v, weight)
        self.placed += 1
        self._degree[u] += 1
        self._degree[v] += 1
        if self.graph.directed:
            self._incoming[v] += 1
            self._outgoing[u] += 1


class RandomGraphGenerator:
    """
    Builds random graphs satisfying degree and edge-count constraints.

    Degree counts both endpoints of every accepted edge. The per-vertex cap
    is min(vertex_count - 1, max_edges_per_vertex). For directed graphs the
    in/out caps are applied on top of it, and u->v and v->u count as
    distinct edges.
    """

    def __init__(
        self,
        seed: int | None = None,
        rng: random.Random | None = None,
        max_attempts_per_edge: int = GENERATOR_MAX_ATTEMPTS_PER_EDGE,
    ) -> None:
        """
        Initialize the generator.

        Args:
            seed: Random seed for reproducibility (ignored if rng is given)
            rng: Random source to draw from
            max_attempts_per_edge: Sampling budget per requested edge
        """
        self._rng = rng if rng is not None else random.Random(seed)
        self._max_attempts_per_edge = max_attempts_per_edge

    def generate(
        self,
        min_vertices: int,
        max_vertices: int,
        min_edges: int,
        max_edges: int,
        max_edges_per_vertex: int | None = None,
        directed: bool = False,
        max_incoming_edges: int | None = None,
        max_outgoing_edges: int | None = None,
    ) -> Graph:
        """
        Generate a random graph.

        Args:
            min_vertices: Lower bound on the vertex count (inclusive)
            max_vertices: Upper bound on the vertex count (inclusive)
            min_edges: Lower bound on the edge count (inclusive)
            max_edges: Upper bound on the edge count (inclusive)
            max_edges_per_vertex: Degree cap per vertex (None = structural cap only)
            directed: Whether to build a directed graph
            max_incoming_edges: In-degree cap per vertex (directed only, None = no cap)
            max_outgoing_edges: Out-degree cap per vertex (directed only, None = no cap)

        Returns:
            A Graph with exactly the drawn number of edges

        Raises:
            InfeasibleConstraintsError: If the bounds are invalid or the drawn
                edge count cannot be placed under the caps
        """
        _check_range("vertices", min_vertices, max_vertices)
        _check_range("edges", min_edges, max_edges)

        vertex_count = self._rng.randint(min_vertices, max_vertices)
        target = self._rng.randint(min_edges, max_edges)

        degree_cap = max(vertex_count - 1, 0)
        if max_edges_per_vertex is not None:
            degree_cap = min(degree_cap, max_edges_per_vertex)
        in_cap = max_incoming_edges if directed and max_incoming_edges is not None else None
        out_cap = max_outgoing_edges if directed and max_outgoing_edges is not None else None

        self._check_feasible(vertex_count, target, directed, degree_cap, in_cap, out_cap)

        logger.debug(
            f"Generating {'directed' if directed else 'undirected'} graph: "
            f"{vertex_count} vertices, {target} edges, degree cap {degree_cap}"
        )

        budget = max(target * self._max_attempts_per_edge, GENERATOR_MIN_ATTEMPTS)
        # Misses in a row before scanning for a dead end
        stall_limit = max(vertex_count * vertex_count, 1)
        attempts = 0
        restarts = 0
        misses = 0
        placement = _Placement(vertex_count, directed, degree_cap, in_cap, out_cap)

        while placement.placed < target:
            if attempts >= budget:
                raise InfeasibleConstraintsError(
                    f"Could not place {target} edges on {vertex_count} vertices "
                    f"within {budget} attempts ({restarts} restarts)"
                )
            attempts += 1

            u = self._rng.randrange(vertex_count)
            v = self._rng.randrange(vertex_count)
            if not placement.allows(u, v):
                misses += 1
                if misses >= stall_limit:
                    misses = 0
                    if placement.is_stuck():
                        # Earlier choices left no legal pair: start over
                        restarts += 1
                        logger.debug(
                            f"Dead end after {placement.placed}/{target} edges, restarting"
                        )
                        placement = _Placement(vertex_count, directed, degree_cap, in_cap, out_cap)
                continue

            misses = 0
            placement.add(u, v, self._rng.randint(WEIGHT_MIN, WEIGHT_MAX))

        graph = placement.graph
        logger.debug(f"Generated {graph!r} in {attempts} attempts, {restarts} restarts")
        return graph

    @staticmethod
    def _check_feasible(
        vertex_count: int,
        target: int,
        directed: bool,
        degree_cap: int,
        in_cap: int | None,
        out_cap: int | None,
    ) -> None:
        """Reject edge counts that no placement could satisfy."""
        limit = max_simple_edges(vertex_count, directed)
        if target > limit:
            raise InfeasibleConstraintsError(
                f"{target} edges requested but {vertex_count} vertices allow at most {limit}"
            )
        if 2 * target > vertex_count * degree_cap:
            raise InfeasibleConstraintsError(
                f"{target} edges need total degree {2 * target}, "
                f"but {vertex_count} vertices capped at {degree_cap} allow {vertex_count * degree_cap}"
            )
        if in_cap is not None and target > vertex_count * in_cap:
            raise InfeasibleConstraintsError(
                f"{target} edges exceed in-degree capacity {vertex_count} x {in_cap}"
            )
        if out_cap is not None and target > vertex_count * out_cap:
            raise InfeasibleConstraintsError(
                f"{target} edges exceed out-degree capacity {vertex_count} x {out_cap}"
            )


def _check_range(name: str, low: int, high: int) -> None:
    if low < 0 or high < low:
        raise InfeasibleConstraintsError(
            f"Invalid {name} range [{low}, {high}]: need 0 <= min <= max"
        )


def generate_graph(
    min_vertices: int,
    max_vertices: int,
    min_edges: int,
    max_edges: int,
    max_edges_per_vertex: int | None = None,
    directed: bool = False,
    max_incoming_edges: int | None = None,
    max_outgoing_edges: int | None = None,
    seed: int | None = None,
) -> Graph:
    """Generate a random graph with a fresh generator. See RandomGraphGenerator.generate."""
    return RandomGraphGenerator(seed=seed).generate(
        min_vertices,
        max_vertices,
        min_edges,
        max_edges,
        max_edges_per_vertex,
        directed,
        max_incoming_edges,
        max_outgoing_edges,
    )
