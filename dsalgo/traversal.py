"""Vertex colours, traversal result kinds and the weighted edge record."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum


class Color(IntEnum):
    """Marks a vertex's state during a traversal."""

    WHITE = 0
    GRAY = 1
    BLACK = 2
    GREEN = 3
    RED = 4


INF = -1
"""Distance, parent or time of a vertex that a traversal never reached."""


class Result(Enum):
    """Which per-vertex list a traversal returns."""

    DISTANCE = 0
    PARENT = 1
    COLOR = 2
    DISCOVER = 3
    FINISH = 4


@dataclass(frozen=True)
class Edge:
    """A directed, weighted edge."""

    source: int
    destination: int
    weight: float = 0.0

    def reversed(self) -> "Edge":
        """The same edge pointing the other way."""
        return Edge(self.destination, self.source, self.weight)