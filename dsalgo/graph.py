"""An unweighted adjacency-list graph with breadth-first algorithms."""

from __future__ import annotations

from collections import deque
from typing import Iterable, List, Sequence

from dsalgo.errors import NotConnected
from dsalgo.traversal import INF, Color, Result


class UnweightedGraph:
    """A graph without edge weights, stored as adjacency lists."""

    def __init__(
        self,
        directed: bool,
        node_count: int,
        edges: Iterable[Sequence[int]] = (),
    ) -> None:
        self.directed = directed
        self._adjacency: List[List[int]] = [[] for _ in range(node_count)]
        self._edge_count = 0
        for source, destination in edges:
            self.add_edge(int(source), int(destination))

    @property
    def node_count(self) -> int:
        return len(self._adjacency)

    @property
    def edge_count(self) -> int:
        return self._edge_count

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._adjacency):
            raise IndexError(f"vertex {vertex} out of range")

    def add_edge(self, source: int, destination: int) -> None:
        """Add an edge, and its mirror when the graph is undirected."""
        self._check(source)
        self._check(destination)
        self._adjacency[source].append(destination)
        if not self.directed:
            self._adjacency[destination].append(source)
        self._edge_count += 1

    def _search(self, source: int, color: List[Color], visit) -> None:
        color[source] = Color.GRAY
        queue = deque([source])
        while queue:
            vertex = queue.popleft()
            for target in self._adjacency[vertex]:
                if color[target] == Color.WHITE:
                    color[target] = Color.GRAY
                    visit(vertex, target)
                    queue.append(target)
            color[vertex] = Color.BLACK

    def bfs(self, source: int, result: Result) -> list:
        """Breadth-first search from ``source``; returns the chosen per-vertex list.

        DISTANCE, PARENT and COLOR are supported; other kinds give an empty list.
        """
        self._check(source)
        n = self.node_count
        color = [Color.WHITE] * n
        distance = [INF] * n
        parent = [INF] * n
        distance[source] = 0

        def visit(vertex: int, target: int) -> None:
            distance[target] = distance[vertex] + 1
            parent[target] = vertex

        self._search(source, color, visit)
        lists = {Result.DISTANCE: distance, Result.PARENT: parent, Result.COLOR: color}
        return list(lists.get(result, []))

    def bfs_tree(self, source: int) -> "UnweightedGraph":
        """The directed breadth-first tree rooted at ``source``."""
        self._check(source)
        tree = UnweightedGraph(True, self.node_count)
        self._search(source, [Color.WHITE] * self.node_count, tree.add_edge)
        return tree

    def bfs_forest(self) -> List["UnweightedGraph"]:
        """One breadth-first tree for each vertex not reached by an earlier tree."""
        color = [Color.WHITE] * self.node_count
        forest: List[UnweightedGraph] = []
        for source in range(self.node_count):
            if color[source] == Color.WHITE:
                tree = UnweightedGraph(True, self.node_count)
                self._search(source, color, tree.add_edge)
                forest.append(tree)
        return forest

    def bfs_distance(self, source: int, destination: int) -> int:
        """Number of edges on a shortest path; NotConnected if there is none."""
        self._check(destination)
        distance = self.bfs(source, Result.DISTANCE)[destination]
        if distance == INF:
            raise NotConnected()
        return distance

    def __str__(self) -> str:
        return "".join(
            f"vertex: {vertex}\nConnected vertex: "
            + "".join(f"{target} " for target in targets)
            + "\n"
            for vertex, targets in enumerate(self._adjacency)
        )