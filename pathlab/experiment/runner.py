"""
Experiment runner: generate graphs and time path searches on them.

Each trial draws a random graph, picks a random source and target among its
vertices, and runs every configured search on the same endpoints.
"""

from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass
from typing import Iterator, Sequence

from pathlab.config import (
    DEFAULT_ALGORITHMS,
    DEFAULT_DIRECTED,
    DEFAULT_MAX_EDGES,
    DEFAULT_MAX_EDGES_PER_VERTEX,
    DEFAULT_MAX_INCOMING_EDGES,
    DEFAULT_MAX_OUTGOING_EDGES,
    DEFAULT_MAX_VERTICES,
    DEFAULT_MIN_EDGES,
    DEFAULT_MIN_VERTICES,
)
from pathlab.experiment.state import SearchRun, TrialResult
from pathlab.graph import Graph, InfeasibleConstraintsError, RandomGraphGenerator, get_search

logger = logging.getLogger(__name__)


@dataclass
class GeneratorSettings:
    """
    Parameters passed to RandomGraphGenerator.generate for every trial.

    Attributes:
        min_vertices / max_vertices: Vertex count bounds (inclusive)
        min_edges / max_edges: Edge count bounds (inclusive)
        max_edges_per_vertex: Degree cap per vertex
        directed: Whether graphs are directed
        max_incoming_edges / max_outgoing_edges: Directed degree caps
    """

    min_vertices: int = DEFAULT_MIN_VERTICES
    max_vertices: int = DEFAULT_MAX_VERTICES
    min_edges: int = DEFAULT_MIN_EDGES
    max_edges: int = DEFAULT_MAX_EDGES
    max_edges_per_vertex: int | None = DEFAULT_MAX_EDGES_PER_VERTEX
    directed: bool = DEFAULT_DIRECTED
    max_incoming_edges: int | None = DEFAULT_MAX_INCOMING_EDGES
    max_outgoing_edges: int | None = DEFAULT_MAX_OUTGOING_EDGES


class ExperimentRunner:
    """
    Runs timed BFS/DFS comparisons on random graphs.

    A single random source drives graph generation and endpoint selection,
    so a seeded runner reproduces the same trials.
    """

    def __init__(
        self,
        settings: GeneratorSettings | None = None,
        algorithms: Sequence[str] = DEFAULT_ALGORITHMS,
        seed: int | None = None,
    ) -> None:
        """
        Initialize the runner.

        Args:
            settings: Generator parameters (defaults from config)
            algorithms: Search identifiers to run on every trial
            seed: Random seed for reproducibility

        Raises:
            ValueError: If an algorithm name is unknown
        """
        self._settings = settings or GeneratorSettings()
        # Resolve eagerly so a typo fails before any graph is built
        self._searches = {name: get_search(name) for name in algorithms}
        self._rng = random.Random(seed)
        self._generator = RandomGraphGenerator(rng=self._rng)

    @property
    def settings(self) -> GeneratorSettings:
        return self._settings

    @property
    def algorithms(self) -> list[str]:
        return list(self._searches)

    def generate(self) -> Graph:
        """Generate one graph with the configured settings."""
        s = self._settings
        return self._generator.generate(
            s.min_vertices,
            s.max_vertices,
            s.min_edges,
            s.max_edges,
            s.max_edges_per_vertex,
            s.directed,
            s.max_incoming_edges,
            s.max_outgoing_edges,
        )

    def run_trial(self, index: int = 0) -> TrialResult:
        """
        Generate a graph and time every search on random endpoints.

        Args:
            index: Trial number recorded in the result

        Returns:
            TrialResult with one SearchRun per algorithm

        Raises:
            InfeasibleConstraintsError: If generation fails or yields no vertices
        """
        graph = self.generate()
        if graph.vertex_count == 0:
            raise InfeasibleConstraintsError("Generated graph has no vertices to search")

        source = self._rng.randrange(graph.vertex_count)
        target = self._rng.randrange(graph.vertex_count)
        trial = TrialResult(index=index, graph=graph, source=source, target=target)

        logger.info(f"Trial {index + 1}: {graph!r}, {source} -> {target}")

        for name, search in self._searches.items():
            start = time.perf_counter()
            path = search(graph, source, target)
            elapsed_ms = (time.perf_counter() - start) * 1000

            trial.runs[name] = SearchRun(
                algorithm=name,
                source=source,
                target=target,
                path=path,
                elapsed_ms=elapsed_ms,
            )
            if path:
                logger.info(f"  {name}: {len(path) - 1} hops in {elapsed_ms:.3f}ms")
            else:
                logger.info(f"  {name}: no path ({elapsed_ms:.3f}ms)")

        return trial

    def run(self, num_graphs: int) -> Iterator[TrialResult]:
        """Yield num_graphs trials in order."""
        for index in range(num_graphs):
            yield self.run_trial(index)
