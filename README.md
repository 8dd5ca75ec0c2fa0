# algokit

A small collection of classic algorithms. Each one is a plain Python function
and also has a command-line tool.

## What is inside

| Module | Names | What it does |
| --- | --- | --- |
| `algokit.astar` | `astar_search`, `heuristic`, `format_path` | A* path finding on a grid with the Manhattan heuristic |
| `algokit.traversal` | `dfs`, `bfs`, `read_matrix` | Depth-first and breadth-first traversal of an adjacency matrix |
| `algokit.dijkstra` | `dijkstra`, `format_distances`, `INF` | Single-source shortest distances on a weighted adjacency matrix |
| `algokit.spanning_tree` | `kruskal`, `prim`, `prim_mst`, `Edge`, `SpanningTree` | Spanning trees from a cost matrix |
| `algokit.nqueens` | `solve`, `format_board`, `MAX_N` | First solution of the N-queens puzzle by backtracking |
| `algokit.selection_sort` | `selection_sort` | Selection sort of any iterable of comparable values |
| `algokit.chatbot` | `respond`, `Reply` | A keyword-driven customer-support chatbot |

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Using it from Python

```python
from algokit.astar import astar_search, format_path
from algokit.dijkstra import dijkstra
from algokit.spanning_tree import kruskal, prim
from algokit.nqueens import solve, format_board
from algokit.selection_sort import selection_sort

grid = [
    [0, 1, 0, 0, 0],
    [0, 1, 0, 1, 0],
    [0, 0, 0, 1, 0],
    [1, 1, 0, 1, 0],
    [0, 0, 0, 0, 0],
]
path = astar_search(grid, (0, 0), (4, 4))   # list of (row, col), or None
print(format_path(path))                     # "Path: (0,0) (1,0) ..."

graph = [
    [0, 10, 0, 0, 5],
    [0, 0, 1, 0, 2],
    [0, 0, 0, 4, 0],
    [7, 0, 6, 0, 0],
    [0, 3, 9, 2, 0],
]
print(dijkstra(graph, 0))                    # [0, 8, 9, 7, 5]

costs = [
    [0, 10, 6, 0],
    [10, 0, 5, 15],
    [6, 5, 0, 4],
    [0, 15, 4, 0],
]
tree = kruskal(costs)
for edge in tree:
    print(edge.u, edge.v, edge.weight)
print(tree.cost())                           # 15

print(format_board(solve(8)))
print(selection_sort([5, 3, 9, 1]))          # [1, 3, 5, 9]
```

Conventions:

- A* grid: `0` is an open cell, any other value is a wall. Moves go up,
  right, down and left. `astar_search` returns `None` when the goal cannot be
  reached and raises `ValueError` when the grid is empty or the start or goal
  lies outside it.
- `dfs` and `bfs`: an edge from `v` to `i` exists where `matrix[v][i] == 1`;
  neighbours are visited in increasing index order. Vertices are numbered
  from 0. A non-square matrix or an out-of-range start raises `ValueError`.
- `dijkstra`: `graph[u][v]` is the weight of the edge from `u` to `v`, `0`
  meaning no edge. Unreachable vertices get the distance `INF` (99999).
- `kruskal`, `prim` and `prim_mst` return a `SpanningTree`, whose `edges` are
  `Edge(u, v, weight)` values in the order they were chosen; `cost()` gives
  the total weight. `prim` and `prim_mst` grow the tree from vertex 0;
  `prim_mst` lists one edge per vertex `1 .. n-1`. All three raise
  `ValueError` for a graph that is not connected.
- `solve(n)` gives, for each row, the column of its queen, or `None` when no
  placement exists; `n` above `MAX_N` (20) raises `ValueError`.
- `respond(message)` returns a `Reply` with the answer `text`; `farewell` is
  true for "bye" and "exit".

## Command-line tools

```
algokit-astar
algokit-traversal
algokit-dijkstra
algokit-spanning-tree
algokit-nqueens
algokit-selection-sort
algokit-chatbot
```

- `algokit-astar [--start ROW COL] [--goal ROW COL]` searches the built-in
  5×5 sample grid (by default from `0 0` to `4 4`) and prints the path, or
  `No path found.`.
- `algokit-traversal [--bfs]` reads from standard input a node count, the
  adjacency matrix and a starting vertex, and prints the depth-first (or,
  with `--bfs`, breadth-first) order. Vertices are numbered from 1 on input
  and output.
- `algokit-dijkstra [--source N]` prints the distance of every vertex of the
  built-in sample graph from the source (0 by default). With `--stdin` it
  reads the vertex count, matrix and source from standard input instead.
- `algokit-spanning-tree` reads a node count, a cost matrix and a choice
  (`1` for Prim's, `2` for Kruskal's), then prints the chosen edges and the
  total cost. With `--keys` it skips the choice, runs `prim_mst` and prints an
  edge/weight table.
- `algokit-nqueens` reads N and prints the first placement of N queens, or
  reports that none exists.
- `algokit-selection-sort` reads a count followed by that many integers and
  prints them sorted.
- `algokit-chatbot` starts a support chat on standard input; type `bye` or
  `exit`, or end the input, to leave.

The input-reading tools accept whitespace-separated numbers, so data can be
piped in:

```
printf '3\n0 1 1\n1 0 0\n1 0 0\n1\n' | algokit-traversal --bfs
```

Malformed or missing input is reported on standard error with exit status 1.

## Limits

The chatbot only matches a few fixed keywords (greetings, returns, delivery,
contact/support, "ok", bye/exit); its contact details are the placeholders
`[email]` and `[phone]`. It keeps no history and talks to no outside service.