"""
Exceptions raised by the graph package.

Both concrete errors also derive from the matching built-in exception so
callers can catch IndexError / ValueError without importing this module.
"""


class GraphError(Exception):
    """Base class for graph-related errors."""


class OutOfRangeError(GraphError, IndexError):
    """A vertex index fell outside [0, vertex_count)."""

    def __init__(self, vertex: int, vertex_count: int) -> None:
        self.vertex = vertex
        self.vertex_count = vertex_count
        super().__init__(f"Vertex {vertex} out of range [0, {vertex_count})")


class InfeasibleConstraintsError(GraphError, ValueError):
    """The generator was asked for a graph it cannot build."""
