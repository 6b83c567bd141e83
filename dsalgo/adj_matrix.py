"""A weighted graph stored as an adjacency matrix."""

from __future__ import annotations

from typing import Iterable, List, Sequence


class AdjacencyMatrix:
    """A weighted graph in which a zero entry means "no edge"."""

    def __init__(
        self,
        node_count: int,
        directed: bool,
        edges: Iterable[Sequence[float]] = (),
    ) -> None:
        self.directed = directed
        self._matrix: List[List[float]] = [[0.0] * node_count for _ in range(node_count)]
        self._edge_count = 0
        for source, destination, weight in edges:
            u, v = int(source), int(destination)
            self._check(u)
            self._check(v)
            self._matrix[u][v] = float(weight)
            if not directed:
                self._matrix[v][u] = float(weight)
            self._edge_count += 1

    @property
    def node_count(self) -> int:
        return len(self._matrix)

    @property
    def edge_count(self) -> int:
        return self._edge_count

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._matrix):
            raise IndexError(f"vertex {vertex} out of range")

    def add_edge(self, source: int, destination: int, weight: float) -> None:
        """Add an edge; raises ValueError if one is already there."""
        self._check(source)
        self._check(destination)
        if self._matrix[source][destination] != 0:
            raise ValueError("Edge already exist")
        self._matrix[source][destination] = float(weight)
        if not self.directed:
            self._matrix[destination][source] = float(weight)
        self._edge_count += 1

    def has_edge(self, source: int, destination: int) -> bool:
        """True if a non-zero entry joins ``source`` to ``destination``."""
        self._check(source)
        self._check(destination)
        return self._matrix[source][destination] != 0

    def __str__(self) -> str:
        parts = []
        for vertex, row in enumerate(self._matrix):
            connected = "".join(
                f"{target}({weight:g}) " for target, weight in enumerate(row) if weight != 0
            )
            parts.append(f"Vertex: {vertex}\nConnected vertices: {connected}\n")
        return "".join(parts)