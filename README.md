# dsalgo

Classic data structures and algorithms, with a few small command-line
programs built on them. Pure Python, no dependencies.

## What is inside

| Module | Contents |
| --- | --- |
| `dsalgo.linked_list` | `LinkedList`, a doubly linked list, and `Cursor` for walking it in either direction |
| `dsalgo.dynamic_array` | `DynamicArray`, a growable array whose `capacity` doubles when full and halves when sparse |
| `dsalgo.stack_queue` | `Stack` (on `DynamicArray`) and `Queue` (on `LinkedList`) |
| `dsalgo.expression` | `evaluate` for infix arithmetic, `first_non_repeating` for letter streams, `ExpressionError` |
| `dsalgo.pillow` | `PillowPassingGame` and `Player`, a timed elimination game on a ring of players; `run_game` plays a scripted game |
| `dsalgo.traversal` | `Color`, `Result` (which per-vertex list a traversal returns), `Edge` and `INF` |
| `dsalgo.mst` | `Graph` with BFS, DFS, Prim's and Kruskal's minimum spanning trees; `Heap`, `DisjointSet`, `VertexKey`; `read_graph`, `random_graph`, `format_report` |
| `dsalgo.graph` | `UnweightedGraph` with BFS, BFS trees and forests, and shortest hop distance |
| `dsalgo.weighted_graph` | `WeightedGraph` (a `Graph`) adding edge weights lookup, transpose, BFS/DFS trees, bipartite sets, topological sort and strongly connected components |
| `dsalgo.adj_matrix` | `AdjacencyMatrix`, where a zero entry means no edge |
| `dsalgo.graph_io` | Reading graphs from edge-list files and writing random ones |
| `dsalgo.sorting` | `merge_sort`, `quick_sort`, and `random_values`, `ascending_values`, `descending_values` |
| `dsalgo.sort_bench` | Timing merge sort against quick sort: `ArrayKind`, `Timing`, `generate`, `time_sorts`, `build_report`, `format_report` |
| `dsalgo.varray` | `StringArray`, a growable array of strings with sorted merging |
| `dsalgo.errors` | `GraphError` and its subclasses raised by the graph classes |

## Using the library

```python
from dsalgo.linked_list import LinkedList
from dsalgo.stack_queue import Stack
from dsalgo.expression import evaluate, first_non_repeating
from dsalgo.sorting import merge_sort, quick_sort

items = LinkedList([1, 2, 3])
items.append(4)
items.remove_at(0)
print(list(items))                  # [2, 3, 4]

stack = Stack()
stack.push(10)
stack.push(20)
print(stack.pop())                  # 20

print(evaluate("2*(3+4)"))          # 14.0
print(evaluate("(-2.5)*2"))         # -5.0
print(first_non_repeating("aabc"))  # a#bb

print(merge_sort([3, 1, 2]))        # [1, 2, 3]
print(quick_sort([3, 1, 2]))        # [1, 2, 3]
```

A negative number in an expression is written in parentheses, as `(-5)`.

```python
from dsalgo.weighted_graph import WeightedGraph
from dsalgo.traversal import Result

g = WeightedGraph(True, 4, [(0, 1, 1.0), (1, 2, 1.0), (2, 0, 1.0), (2, 3, 1.0)])
print(g.bfs(0, Result.DISTANCE))            # [0, 1, 2, 3]
print(g.strongly_connected_components())    # [[0, 1, 2], [3]]
```

Traversals return a list with one entry per vertex; `INF` (-1) marks a
vertex the search never reached. Asking for a `Result` kind a traversal does
not produce gives an empty list.

## Errors

- Out-of-range indexes and vertices raise `IndexError`.
- An invalid expression raises `ExpressionError` (a `ValueError`);
  `first_non_repeating` raises `ValueError` on anything other than letters,
  spaces and newlines.
- `UnweightedGraph.bfs_distance` and `Graph.prim_mst` raise `NotConnected`
  when no path exists.
- `WeightedGraph.edge_weight` raises `EdgeNonExistent`, `transpose` on an
  undirected graph raises `InvalidTranspose`, `bipartite_sets` raises
  `InvalidBipartite` on a directed or non-bipartite graph, and
  `topological_sort` raises `TopologicalSortUnavailable` when it meets a cycle.
- `AdjacencyMatrix.add_edge` raises `ValueError` if the edge is already there.

## Graph files

The first line holds the number of vertices and the number of edges; each
following line holds one edge as `source destination weight`, or just
`source destination` for unweighted files. Vertices are numbered from 0.

```
4 5
0 1 0.5
0 2 0.2
1 2 0.9
1 3 0.4
2 3 0.7
```

`dsalgo.mst.read_graph` and `dsalgo.graph_io.read_weighted_graph` read
weighted files; `read_unweighted_as_weighted` gives every edge weight 0;
`read_unweighted_graph` builds a directed `UnweightedGraph`. Malformed files
raise `ValueError`.

## Commands

- `dsalgo-expr` reads arithmetic expressions from standard input, one per
  line, printing each value (or `Expression Invalid`) until a line reading
  `Stop`; it then reads lines of letters and prints the first non-repeating
  character after each letter, again until `Stop`.
- `dsalgo-pillow` plays the pillow-passing game from standard input: the
  player count, each player's reflex time, then commands `<time> <option>`
  where the option is `M` (eliminate the holder), `R` (reverse direction),
  `I <reflex>` (add a player), `P` (print the holder) or `F` (finish).
- `dsalgo-mst [PATH]` reads an undirected weighted graph file (default
  `mst.txt`) and prints the cost of the Prim tree and the edges chosen by
  Prim's and Kruskal's algorithms.
- `dsalgo-graph [PATH]` reads a directed `source destination` file (default
  `Graph_input.txt`) and prints it in edge-list form and as a description of
  each vertex's neighbours.
- `dsalgo-sortbench [--output FILE] [--max-power N]` reads a menu choice from
  standard input: `1` then a size and an array kind (1 random, 2 descending,
  3 ascending) sorts one array both ways and prints the timings; `2` times
  every kind at sizes 10 to 10**N (default 6) and writes the report to FILE
  (default `reportFile.txt`).
- `dsalgo-varray` runs a short demonstration of `StringArray`.

## What the package does not do

`InvalidDensity` is defined in `dsalgo.errors`, but no function in the
package generates graphs by density; random graphs are made only by edge
count (`random_graph`, `write_random_graph`).

## Running the tests

The test suite uses pytest, available through the `test` extra:

```
pip install .[test]
pytest
```