"""A weighted adjacency-list graph with traversals and minimum spanning trees."""

from __future__ import annotations

import argparse
import math
import random
import sys
from collections import deque
from dataclasses import dataclass, field
from operator import attrgetter
from pathlib import Path
from typing import (
    Dict,
    Generic,
    Iterable,
    List,
    Optional,
    Sequence,
    TypeVar,
    Union,
)

from dsalgo.errors import NotConnected
from dsalgo.traversal import INF, Color, Edge, Result

T = TypeVar("T")
PathLike = Union[str, Path]


@dataclass(order=True)
class VertexKey:
    """A heap entry: reach ``vertex`` from ``origin`` at cost ``key``.

    Entries compare by key only.
    """

    vertex: int = field(compare=False)
    key: float
    origin: int = field(compare=False)


class Heap(Generic[T]):
    """A binary min-heap ordered by ``<`` on its items."""

    def __init__(self) -> None:
        self._data: List[T] = []

    def insert(self, value: T) -> None:
        """Add a value."""
        data = self._data
        data.append(value)
        index = len(data) - 1
        while index > 0:
            parent = (index + 1) // 2 - 1
            if not data[index] < data[parent]:
                break
            data[index], data[parent] = data[parent], data[index]
            index = parent

    def remove(self) -> T:
        """Remove and return the smallest value."""
        data = self._data
        if not data:
            raise IndexError("remove from an empty heap")
        top = data[0]
        last = data.pop()
        if data:
            data[0] = last
        size = len(data)
        index = 0
        while True:
            left = 2 * index + 1
            right = left + 1
            if left >= size:
                break
            if right == size:
                if data[left] < data[index]:
                    data[left], data[index] = data[index], data[left]
                break
            if not (data[left] < data[index] or data[right] < data[index]):
                break
            child = left if data[left] < data[right] else right
            data[child], data[index] = data[index], data[child]
            index = child
        return top

    def __len__(self) -> int:
        return len(self._data)


class DisjointSet:
    """Union-find over the integers ``0 .. size-1`` with path halving."""

    def __init__(self, size: int) -> None:
        self._root = list(range(size))

    def find(self, item: int) -> int:
        """The representative of the set holding ``item``."""
        root = self._root
        while root[item] != item:
            root[item] = root[root[item]]
            item = root[item]
        return item

    def union(self, a: int, b: int) -> None:
        """Merge the sets holding ``a`` and ``b``."""
        self._root[self.find(a)] = self.find(b)


class Graph:
    """A weighted graph stored as adjacency lists."""

    def __init__(
        self,
        directed: bool,
        node_count: int,
        edges: Iterable[Sequence[float]] = (),
    ) -> None:
        self.directed = directed
        self._adjacency: List[List[Edge]] = [[] for _ in range(node_count)]
        self._edge_count = 0
        for source, destination, weight in edges:
            self.add_edge(int(source), int(destination), weight)

    @property
    def node_count(self) -> int:
        return len(self._adjacency)

    @property
    def edge_count(self) -> int:
        return self._edge_count

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._adjacency):
            raise IndexError(f"vertex {vertex} out of range")

    def add_edge(self, source: int, destination: int, weight: float) -> None:
        """Add an edge, and its mirror when the graph is undirected."""
        self._check(source)
        self._check(destination)
        edge = Edge(source, destination, float(weight))
        self._adjacency[source].append(edge)
        if not self.directed:
            self._adjacency[destination].append(edge.reversed())
        self._edge_count += 1

    def has_edge(self, source: int, destination: int) -> bool:
        """True if an edge leads from ``source`` to ``destination``."""
        self._check(source)
        return any(e.destination == destination for e in self._adjacency[source])

    def _bfs_from(
        self,
        source: int,
        color: List[Color],
        distance: List[int],
        parent: List[int],
    ) -> None:
        color[source] = Color.GRAY
        distance[source] = 0
        queue = deque([source])
        while queue:
            vertex = queue.popleft()
            for edge in self._adjacency[vertex]:
                target = edge.destination
                if color[target] == Color.WHITE:
                    color[target] = Color.GRAY
                    distance[target] = distance[vertex] + 1
                    parent[target] = vertex
                    queue.append(target)
            color[vertex] = Color.BLACK

    def _dfs_from(
        self,
        source: int,
        color: List[Color],
        discover: List[int],
        finish: List[int],
        parent: List[int],
        time: int,
    ) -> int:
        time += 1
        color[source] = Color.GRAY
        discover[source] = time
        stack = [source]
        while stack:
            vertex = stack.pop()
            if color[vertex] == Color.GRAY:
                color[vertex] = Color.GREEN
                stack.append(vertex)
                for edge in self._adjacency[vertex]:
                    target = edge.destination
                    if color[target] == Color.WHITE:
                        color[target] = Color.GRAY
                        time += 1
                        discover[target] = time
                        stack.append(target)
                        parent[target] = vertex
            elif color[vertex] == Color.GREEN:
                color[vertex] = Color.BLACK
                time += 1
                finish[vertex] = time
        return time

    @staticmethod
    def _pick(result: Result, lists: Dict[Result, list]) -> list:
        return list(lists.get(result, []))

    def _fresh(self):
        n = self.node_count
        return [Color.WHITE] * n, [INF] * n, [INF] * n

    def bfs(self, source: int, result: Result) -> list:
        """Breadth-first search from ``source``; returns the chosen per-vertex list.

        DISTANCE, PARENT and COLOR are supported; other kinds give an empty list.
        """
        self._check(source)
        color, distance, parent = self._fresh()
        self._bfs_from(source, color, distance, parent)
        return self._pick(
            result,
            {Result.DISTANCE: distance, Result.PARENT: parent, Result.COLOR: color},
        )

    def bfs_all(self, result: Result) -> list:
        """Breadth-first search covering every vertex, in index order."""
        color, distance, parent = self._fresh()
        for source in range(self.node_count):
            if color[source] == Color.WHITE:
                self._bfs_from(source, color, distance, parent)
        return self._pick(
            result,
            {Result.DISTANCE: distance, Result.PARENT: parent, Result.COLOR: color},
        )

    def dfs(self, source: int, result: Result) -> list:
        """Depth-first search from ``source``; returns the chosen per-vertex list.

        COLOR, DISCOVER, FINISH and PARENT are supported; others give an empty list.
        """
        self._check(source)
        color, discover, parent = self._fresh()
        finish = [INF] * self.node_count
        self._dfs_from(source, color, discover, finish, parent, 0)
        return self._pick(
            result,
            {
                Result.COLOR: color,
                Result.DISCOVER: discover,
                Result.FINISH: finish,
                Result.PARENT: parent,
            },
        )

    def dfs_all(self, result: Result) -> list:
        """Depth-first search covering every vertex, in index order."""
        color, discover, parent = self._fresh()
        finish = [INF] * self.node_count
        time = 0
        for source in range(self.node_count):
            if color[source] == Color.WHITE:
                time = self._dfs_from(source, color, discover, finish, parent, time)
        return self._pick(
            result,
            {
                Result.COLOR: color,
                Result.DISCOVER: discover,
                Result.FINISH: finish,
                Result.PARENT: parent,
            },
        )

    def prim_mst(self, source: int = 0) -> List[Edge]:
        """Minimum spanning tree grown from ``source`` by Prim's algorithm."""
        self._check(source)
        n = self.node_count
        visited = [False] * n
        visited[source] = True
        keys = [math.inf] * n
        keys[source] = -1
        heap: Heap[VertexKey] = Heap()
        for edge in self._adjacency[source]:
            heap.insert(VertexKey(edge.destination, edge.weight, edge.source))
            keys[edge.destination] = edge.weight

        tree: List[Edge] = []
        while len(tree) < n - 1:
            if not len(heap):
                raise NotConnected()
            item = heap.remove()
            if visited[item.vertex]:
                continue
            tree.append(Edge(item.origin, item.vertex, item.key))
            visited[item.vertex] = True
            for edge in self._adjacency[item.vertex]:
                if edge.weight < keys[edge.destination]:
                    keys[edge.destination] = edge.weight
                    heap.insert(VertexKey(edge.destination, edge.weight, edge.source))
        return tree

    def kruskal_mst(self) -> List[Edge]:
        """Minimum spanning tree (or forest) by Kruskal's algorithm."""
        candidates = sorted(
            (edge for edges in self._adjacency for edge in edges),
            key=attrgetter("weight"),
        )
        sets = DisjointSet(self.node_count)
        tree: List[Edge] = []
        for edge in candidates:
            if len(tree) == self.node_count - 1:
                break
            if sets.find(edge.source) != sets.find(edge.destination):
                sets.union(edge.source, edge.destination)
                tree.append(edge)
        return tree

    def __str__(self) -> str:
        lines = [
            "",
            "Graph Description",
            "-----------------",
            f"Node: {self.node_count} Total Edge: {self._edge_count}",
            "",
        ]
        for vertex, edges in enumerate(self._adjacency):
            lines.append(f"Vertex: {vertex}")
            lines.append("".join(f"{e.destination}({e.weight:g}) " for e in edges))
        lines.append("")
        return "\n".join(lines) + "\n"


def random_graph(
    directed: bool,
    node_count: int,
    edge_count: int,
    path: PathLike,
    rng: Optional[random.Random] = None,
) -> Graph:
    """Build a random simple graph and write it, with random weights, to ``path``.

    The returned graph holds every edge with weight 1; the file gives each
    edge a weight between 0.01 and 1.
    """
    pairs = node_count * (node_count - 1)
    limit = pairs if directed else pairs // 2
    if edge_count > limit:
        raise ValueError(
            f"{node_count} vertices cannot hold {edge_count} distinct edges"
        )
    rng = rng or random.Random()
    graph = Graph(directed, node_count)
    with open(path, "w", encoding="utf-8") as out:
        out.write(f"{node_count} {edge_count}\n")
        while graph.edge_count < edge_count:
            source = rng.randrange(node_count)
            destination = rng.randrange(node_count)
            while source == destination:
                destination = rng.randrange(node_count)
            if not graph.has_edge(source, destination):
                graph.add_edge(source, destination, 1)
                weight = (1 + rng.randrange(100)) / 100.0
                out.write(f"{source} {destination} {weight:g}\n")
    return graph


def read_graph(path: PathLike, directed: bool = False) -> Graph:
    """Read a graph file: ``nodes edges`` then one ``source destination weight`` per edge."""
    tokens = Path(path).read_text(encoding="utf-8").split()
    try:
        node_count = int(tokens[0])
        edge_count = int(tokens[1])
        values = [float(token) for token in tokens[2 : 2 + 3 * edge_count]]
    except (IndexError, ValueError) as exc:
        raise ValueError(f"malformed graph file: {path}") from exc
    if node_count < 0 or edge_count < 0 or len(values) < 3 * edge_count:
        raise ValueError(f"malformed graph file: {path}")
    triples = zip(*[iter(values)] * 3)
    return Graph(
        directed,
        node_count,
        ((int(u), int(v), w) for u, v, w in triples),
    )


def _edge_list(edges: Iterable[Edge]) -> str:
    return ",".join(f"({e.source},{e.destination})" for e in edges)


def format_report(prim: Sequence[Edge], kruskal: Sequence[Edge]) -> str:
    """The cost of the Prim tree and the edges each algorithm chose."""
    total = sum(edge.weight for edge in prim)
    return "\n".join(
        [
            f"Cost of the minimum spanning tree : {total:g}",
            f"List of edges selected by Prim's:{{{_edge_list(prim)}}}",
            f"List of edges selected by Kruskal's:{{{_edge_list(kruskal)}}}",
        ]
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read an undirected graph file and print its minimum spanning trees."""
    parser = argparse.ArgumentParser(description="Minimum spanning trees of a graph file.")
    parser.add_argument("path", nargs="?", default="mst.txt", help="graph file")
    args = parser.parse_args(argv)
    try:
        graph = read_graph(args.path, False)
    except OSError:
        print("Unable to open file", file=sys.stderr)
        return 1
    print(format_report(graph.prim_mst(0), graph.kruskal_mst()))
    return 0


if __name__ == "__main__":
    sys.exit(main())