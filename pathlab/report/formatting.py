"""
Plain-text rendering of graphs and experiment trials.

Matrix renderers show presence (1) or absence (0) rather than weights;
the adjacency list shows weights in parentheses.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    import numpy as np

    from pathlab.experiment.state import TrialResult
    from pathlab.graph import Graph

NO_PATH = "Path does not exist"


def _grid(row_prefix: str, col_prefix: str, grid: np.ndarray) -> str:
    rows, cols = grid.shape
    lines = [("    " + " ".join(f"{col_prefix}{j:<2}" for j in range(cols))).rstrip()]
    for i in range(rows):
        cells = " ".join(f"{int(grid[i, j] != 0):<3}" for j in range(cols))
        lines.append(f"{row_prefix}{i:<2} {cells}".rstrip())
    return "\n".join(lines)


def format_adj_matrix(graph: Graph) -> str:
    """Vertex x vertex presence grid."""
    return _grid("V", "V", graph.get_adj_matrix())


def format_inc_matrix(graph: Graph) -> str:
    """Edge x vertex presence grid, one row per edge in insertion order."""
    return _grid("E", "V", graph.get_inc_matrix().T)


def format_adj_list(graph: Graph) -> str:
    """One line per vertex: 'i: j(w) k(w) ...' in ascending neighbor order."""
    matrix = graph.get_adj_matrix()
    lines = []
    for u in range(graph.vertex_count):
        entries = " ".join(f"{v}({matrix[u, v]})" for v in graph.neighbors(u))
        lines.append(f"{u}: {entries}".rstrip())
    return "\n".join(lines)


def format_path(path: Sequence[int]) -> str:
    """Space-separated vertices, or a notice when there is no path."""
    if not path:
        return NO_PATH
    return " ".join(str(v) for v in path)


def format_trial(trial: TrialResult) -> str:
    """Summary block for a trial: graph size, then one path and time per search."""
    graph = trial.graph
    lines = [
        f"Graph {trial.index + 1} with {graph.vertex_count} vertices "
        f"and {graph.edge_count} edges"
    ]
    for name, run in trial.runs.items():
        label = name.upper()
        lines.append(f"{label} path from vertex {run.source} to vertex {run.target}: {format_path(run.path)}")
        lines.append(f"{label} time: {run.elapsed_ms:.3f} ms")
    return "\n".join(lines)
