"""Reading graphs from edge-list files and writing random ones."""

from __future__ import annotations

import argparse
import random
import sys
from pathlib import Path
from typing import List, Optional, Sequence, Union

from dsalgo.adj_matrix import AdjacencyMatrix
from dsalgo.graph import UnweightedGraph
from dsalgo.weighted_graph import WeightedGraph

PathLike = Union[str, Path]


def random_number(low: int, high: int, rng: Optional[random.Random] = None) -> int:
    """A random integer in ``[low, high)``."""
    if high <= low:
        raise ValueError("high must be greater than low")
    return (rng or random.Random()).randrange(low, high)


def _read_rows(path: PathLike, width: int):
    tokens = Path(path).read_text(encoding="utf-8").split()
    try:
        node_count = int(tokens[0])
        edge_count = int(tokens[1])
    except (IndexError, ValueError) as exc:
        raise ValueError(f"malformed graph file: {path}") from exc
    values: List[str] = tokens[2 : 2 + width * edge_count]
    if node_count < 0 or edge_count < 0 or len(values) < width * edge_count:
        raise ValueError(f"malformed graph file: {path}")
    try:
        rows = [
            tuple(float(item) for item in row) for row in zip(*[iter(values)] * width)
        ]
    except ValueError as exc:
        raise ValueError(f"malformed graph file: {path}") from exc
    return node_count, rows


def read_weighted_graph(path: PathLike, directed: bool) -> WeightedGraph:
    """Read ``nodes edges`` then ``source destination weight`` per edge."""
    node_count, rows = _read_rows(path, 3)
    return WeightedGraph(directed, node_count, ((int(u), int(v), w) for u, v, w in rows))


def read_unweighted_as_weighted(path: PathLike, directed: bool) -> WeightedGraph:
    """Read ``nodes edges`` then ``source destination`` per edge; weights are 0."""
    node_count, rows = _read_rows(path, 2)
    return WeightedGraph(directed, node_count, ((int(u), int(v), 0.0) for u, v in rows))


def read_unweighted_graph(path: PathLike) -> UnweightedGraph:
    """Read ``nodes edges`` then ``source destination`` per edge as a directed graph."""
    node_count, rows = _read_rows(path, 2)
    return UnweightedGraph(True, node_count, ((int(u), int(v)) for u, v in rows))


def write_random_graph(
    node_count: int,
    edge_count: int,
    path: PathLike,
    rng: Optional[random.Random] = None,
) -> None:
    """Write a random simple undirected graph with weights in 0.01..1 to ``path``."""
    limit = node_count * (node_count - 1) // 2
    if edge_count > limit:
        raise ValueError(f"{node_count} vertices cannot hold {edge_count} distinct edges")
    rng = rng or random.Random()
    graph = AdjacencyMatrix(node_count, False)
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


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read a directed edge-list file and print its edges and description."""
    parser = argparse.ArgumentParser(description="Describe a graph file.")
    parser.add_argument("path", nargs="?", default="Graph_input.txt", help="graph file")
    args = parser.parse_args(argv)
    try:
        graph = read_unweighted_as_weighted(args.path, True)
    except OSError:
        print("Unable to open file", file=sys.stderr)
        return 1
    print(graph.edge_format_without_weight(), end="")
    print(graph, end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())