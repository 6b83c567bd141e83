"""Exceptions raised by the graph modules."""

from __future__ import annotations

from typing import Optional


class GraphError(Exception):
    """Base class for graph errors; each subclass carries a default message."""

    default_message = "Graph error"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message if message is not None else self.default_message)


class NotConnected(GraphError):
    """Two vertices have no path between them."""

    default_message = "Vertices aren't connected"


class InvalidDensity(GraphError):
    """A density value lies outside 0..1."""

    default_message = "Density values should be between 0 and 1"


class EdgeNonExistent(GraphError):
    """An edge that was asked for is not in the graph."""

    default_message = "Edges does not exist"


class InvalidTranspose(GraphError):
    """An undirected graph cannot be transposed."""

    default_message = "Undirected Graphs can not be transposed"


class InvalidBipartite(GraphError):
    """The graph has no bipartite split."""

    default_message = "Graph can not have Bipartite Set"


class TopologicalSortUnavailable(GraphError):
    """The graph has a cycle, so it has no topological order."""

    default_message = "Cycle exists, Topological sort not available"