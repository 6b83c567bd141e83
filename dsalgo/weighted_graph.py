"""A weighted adjacency-list graph with trees, orders and component searches."""

from __future__ import annotations

from collections import deque
from typing import Iterable, List, Optional, Sequence

from dsalgo.errors import (
    EdgeNonExistent,
    InvalidBipartite,
    InvalidTranspose,
    TopologicalSortUnavailable,
)
from dsalgo.mst import Graph
from dsalgo.traversal import Color, Result


class WeightedGraph(Graph):
    """A weighted graph with breadth- and depth-first algorithms."""

    def __init__(
        self,
        directed: bool,
        node_count: int,
        edges: Optional[Iterable[Sequence[float]]] = None,
    ) -> None:
        """Build a graph of ``node_count`` vertices from ``(source, destination, weight)`` edges."""
        super().__init__(directed, node_count, edges if edges is not None else ())

    def add_edge(self, source: int, destination: int, weight: float) -> None:
        """Add an edge; an undirected graph stores it both ways."""
        super().add_edge(source, destination, weight)

    def has_edge(self, source: int, destination: int) -> bool:
        """True if an edge leads from ``source`` to ``destination``."""
        return super().has_edge(source, destination)

    def bfs(self, source: int, result: Result = Result.DISTANCE) -> List[int]:
        """Breadth-first search from ``source``, returning the chosen per-vertex list."""
        return super().bfs(source, result)

    def dfs(self, source: int, result: Result = Result.FINISH) -> List[int]:
        """Depth-first search from ``source``, returning the chosen per-vertex list."""
        return super().dfs(source, result)

    def dfs_all(self, result: Result = Result.FINISH) -> List[int]:
        """Depth-first search from every unvisited vertex in order."""
        return super().dfs_all(result)

    def __str__(self) -> str:
        return super().__str__()

    def edge_weight(self, source: int, destination: int) -> float:
        """Weight of the first edge from ``source`` to ``destination``."""
        self._check(source)
        for edge in self._adjacency[source]:
            if edge.destination == destination:
                return edge.weight
        raise EdgeNonExistent()

    def transpose(self) -> "WeightedGraph":
        """The directed graph with every edge reversed."""
        if not self.directed:
            raise InvalidTranspose()
        transposed = WeightedGraph(True, self.node_count)
        for vertex, edges in enumerate(self._adjacency):
            for edge in edges:
                transposed.add_edge(edge.destination, vertex, edge.weight)
        return transposed

    def _edge_lines(self, with_weight: bool) -> str:
        lines = [f"{self.node_count} {self.edge_count}\n"]
        for edges in self._adjacency:
            for edge in edges:
                line = f"{edge.source} {edge.destination}"
                if with_weight:
                    line += f" {edge.weight:f}"
                lines.append(line + "\n")
        return "".join(lines)

    def edge_format(self) -> str:
        """``nodes edges`` then one ``source destination weight`` line per stored edge."""
        return self._edge_lines(True)

    def edge_format_without_weight(self) -> str:
        """``nodes edges`` then one ``source destination`` line per stored edge."""
        return self._edge_lines(False)

    def bfs_tree(self, source: int) -> "WeightedGraph":
        """The directed breadth-first tree rooted at ``source``."""
        self._check(source)
        tree = WeightedGraph(True, self.node_count)
        color = [Color.WHITE] * self.node_count
        color[source] = Color.GRAY
        queue = deque([source])
        while queue:
            vertex = queue.popleft()
            for edge in self._adjacency[vertex]:
                if color[edge.destination] == Color.WHITE:
                    tree.add_edge(vertex, edge.destination, edge.weight)
                    color[edge.destination] = Color.GRAY
                    queue.append(edge.destination)
            color[vertex] = Color.BLACK
        return tree

    def bipartite_sets(self) -> List[List[int]]:
        """Split the vertices of an undirected graph into two independent sets."""
        if self.directed:
            raise InvalidBipartite()
        sets: List[List[int]] = [[], []]
        color = [Color.WHITE] * self.node_count
        for source in range(self.node_count):
            if color[source] != Color.WHITE:
                continue
            color[source] = Color.GREEN
            sets[0].append(source)
            queue = deque([source])
            while queue:
                vertex = queue.popleft()
                scheme = Color.RED if color[vertex] == Color.GREEN else Color.GREEN
                for edge in self._adjacency[vertex]:
                    target = edge.destination
                    if color[target] == Color.WHITE:
                        color[target] = scheme
                        queue.append(target)
                        sets[0 if scheme == Color.GREEN else 1].append(target)
                    if color[target] != scheme:
                        raise InvalidBipartite()
        return sets

    def is_connected(self) -> bool:
        """True if every vertex is reachable from vertex 0."""
        if not self.node_count:
            return True
        return all(c != Color.WHITE for c in self.bfs(0, Result.COLOR))

    def dfs_tree(self, source: int) -> "WeightedGraph":
        """The directed depth-first tree rooted at ``source``."""
        self._check(source)
        tree = WeightedGraph(True, self.node_count)
        color = [Color.WHITE] * self.node_count
        color[source] = Color.GRAY
        stack = [source]
        while stack:
            vertex = stack.pop()
            if color[vertex] == Color.GRAY:
                color[vertex] = Color.GREEN
                stack.append(vertex)
                for edge in self._adjacency[vertex]:
                    if color[edge.destination] == Color.WHITE:
                        color[edge.destination] = Color.GRAY
                        stack.append(edge.destination)
                        tree.add_edge(vertex, edge.destination, edge.weight)
            elif color[vertex] == Color.GREEN:
                color[vertex] = Color.BLACK
        return tree

    def topological_sort(self) -> List[int]:
        """Vertices ordered so that edges point forward.

        Raises TopologicalSortUnavailable when the search meets a vertex that
        is still open.
        """
        finished: List[int] = []
        color = [Color.WHITE] * self.node_count
        for start in range(self.node_count):
            if color[start] != Color.WHITE:
                continue
            color[start] = Color.GRAY
            stack = [start]
            while stack:
                vertex = stack.pop()
                if color[vertex] == Color.GRAY:
                    color[vertex] = Color.GREEN
                    stack.append(vertex)
                    for edge in self._adjacency[vertex]:
                        state = color[edge.destination]
                        if state == Color.WHITE:
                            color[edge.destination] = Color.GRAY
                            stack.append(edge.destination)
                        elif state in (Color.GRAY, Color.GREEN):
                            raise TopologicalSortUnavailable()
                elif color[vertex] == Color.GREEN:
                    color[vertex] = Color.BLACK
                    finished.append(vertex)
        finished.reverse()
        return finished

    def dfs_components(self, order: Iterable[int]) -> List[List[int]]:
        """Vertex sets reached by depth-first searches started in ``order``.

        Each set is listed in vertex order; with no search started the result
        is a single empty list.
        """
        color = [Color.WHITE] * self.node_count
        owner = [-1] * self.node_count
        components: List[List[int]] = []
        for source in order:
            if color[source] != Color.WHITE:
                continue
            color[source] = Color.GRAY
            stack = [source]
            while stack:
                vertex = stack.pop()
                if color[vertex] == Color.GRAY:
                    color[vertex] = Color.GREEN
                    stack.append(vertex)
                    for edge in self._adjacency[vertex]:
                        if color[edge.destination] == Color.WHITE:
                            color[edge.destination] = Color.GRAY
                            stack.append(edge.destination)
                elif color[vertex] == Color.GREEN:
                    color[vertex] = Color.BLACK
                    owner[vertex] = source
            components.append([v for v, o in enumerate(owner) if o == source])
        return components or [[]]

    def strongly_connected_components(self) -> List[List[int]]:
        """Strongly connected components of a directed graph."""
        finish = self.dfs_all(Result.FINISH)
        order = sorted(range(self.node_count), key=finish.__getitem__, reverse=True)
        return self.transpose().dfs_components(order)