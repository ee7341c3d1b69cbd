"""
Experiment record dataclasses for timed path searches.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlab.graph import Graph


@dataclass
class SearchRun:
    """
    Records a single search on a single graph.

    Attributes:
        algorithm: Search identifier (e.g., 'bfs', 'dfs')
        source: Start vertex
        target: End vertex
        path: Vertices from source to target, empty if unreachable
        elapsed_ms: Wall-clock time spent in the search (milliseconds)
    """

    algorithm: str
    source: int
    target: int
    path: list[int]
    elapsed_ms: float

    @property
    def found(self) -> bool:
        """Whether a path was found."""
        return bool(self.path)

    @property
    def hops(self) -> int | None:
        """Number of edges on the path, None if no path."""
        return len(self.path) - 1 if self.path else None


@dataclass
class TrialResult:
    """
    Complete record of one generated graph and the searches run on it.

    Attributes:
        index: 0-indexed trial number within the experiment
        graph: The generated graph
        source: Start vertex shared by all searches
        target: End vertex shared by all searches
        runs: Search records keyed by algorithm, in run order
        timestamp: When the trial was run
    """

    index: int
    graph: Graph
    source: int
    target: int
    runs: dict[str, SearchRun] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def all_found(self) -> bool:
        """Whether every search found a path."""
        return all(run.found for run in self.runs.values())
