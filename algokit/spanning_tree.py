"""Minimum spanning trees of weighted adjacency matrices."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import TextIO

from algokit.traversal import read_matrix

Matrix = Sequence[Sequence[int]]


@dataclass(frozen=True)
class Edge:
    """An edge of a spanning tree from u to v."""

    u: int
    v: int
    weight: int


@dataclass(frozen=True)
class SpanningTree:
    """The edges of a spanning tree, in the order they were chosen."""

    edges: tuple[Edge, ...] = ()

    def cost(self) -> int:
        """Return the total weight of the tree."""
        return sum(edge.weight for edge in self.edges)

    def __iter__(self) -> Iterator[Edge]:
        return iter(self.edges)

    def __len__(self) -> int:
        return len(self.edges)


def _check_square(matrix: Matrix) -> int:
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("cost matrix must be square")
    return size


def kruskal(matrix: Matrix) -> SpanningTree:
    """Build a spanning tree by repeatedly taking the cheapest remaining edge.

    Ties go to the entry met first reading the matrix row by row. Taking an
    entry removes both matrix[u][v] and matrix[v][u] from consideration.
    """
    size = _check_square(matrix)
    needed = max(size - 1, 0)
    candidates = sorted(
        (weight, u, v)
        for u, row in enumerate(matrix)
        for v, weight in enumerate(row)
        if weight
    )
    parent = list(range(size))

    def find(x: int) -> int:
        while parent[x] != x:
            x = parent[x]
        return x

    removed: set[frozenset[int]] = set()
    edges: list[Edge] = []
    for weight, u, v in candidates:
        if len(edges) >= needed:
            break
        pair = frozenset((u, v))
        if pair in removed:
            continue
        removed.add(pair)
        root_u, root_v = find(u), find(v)
        if root_u != root_v:
            edges.append(Edge(u, v, weight))
            parent[root_u] = root_v

    if len(edges) < needed:
        raise ValueError("graph is not connected")
    return SpanningTree(tuple(edges))


def prim(matrix: Matrix) -> SpanningTree:
    """Grow a spanning tree from vertex 0, adding the cheapest crossing edge.

    Ties go to the edge met first scanning tree vertices, then targets, in
    increasing index order.
    """
    size = _check_square(matrix)
    if size == 0:
        return SpanningTree()
    visited = [False] * size
    visited[0] = True
    edges: list[Edge] = []
    for _ in range(size - 1):
        best = min(
            (
                (matrix[i][j], i, j)
                for i in range(size)
                if visited[i]
                for j in range(size)
                if not visited[j] and matrix[i][j]
            ),
            default=None,
        )
        if best is None:
            raise ValueError("graph is not connected")
        weight, u, v = best
        visited[v] = True
        edges.append(Edge(u, v, weight))
    return SpanningTree(tuple(edges))


def prim_mst(matrix: Matrix) -> SpanningTree:
    """Prim's algorithm with per-vertex keys, rooted at vertex 0.

    Edges are listed by vertex: (parent[i], i) for i = 1 .. n-1, weighted
    with matrix[i][parent[i]].
    """
    size = _check_square(matrix)
    if size == 0:
        return SpanningTree()
    key: list[float] = [math.inf] * size
    key[0] = 0
    parent: list[int | None] = [None] * size
    in_tree = [False] * size

    for _ in range(size - 1):
        reachable = [v for v in range(size) if not in_tree[v] and key[v] < math.inf]
        if not reachable:
            raise ValueError("graph is not connected")
        u = min(reachable, key=key.__getitem__)
        in_tree[u] = True
        for v, weight in enumerate(matrix[u]):
            if weight and not in_tree[v] and weight < key[v]:
                parent[v] = u
                key[v] = weight

    edges = []
    for vertex in range(1, size):
        origin = parent[vertex]
        if origin is None:
            raise ValueError("graph is not connected")
        edges.append(Edge(origin, vertex, matrix[vertex][origin]))
    return SpanningTree(tuple(edges))


def _format_tree(tree: SpanningTree) -> str:
    lines = [f"{edge.u} - {edge.v} : {edge.weight}" for edge in tree]
    lines.append(f"Total Cost: {tree.cost()}")
    return "\n".join(lines)


def _format_table(tree: SpanningTree) -> str:
    lines = ["Edge \tWeight"]
    lines.extend(f"{edge.u} - {edge.v}\t{edge.weight}" for edge in tree)
    return "\n".join(lines)


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _next_int(tokens: Iterator[str], what: str) -> int:
    try:
        return int(next(tokens))
    except StopIteration:
        raise ValueError(f"missing {what}") from None


def main(argv: Sequence[str] | None = None) -> int:
    """Read a cost matrix from standard input and print a spanning tree."""
    parser = argparse.ArgumentParser(description="Minimum spanning tree.")
    parser.add_argument(
        "--keys",
        action="store_true",
        help="use key-based Prim and print an edge/weight table",
    )
    args = parser.parse_args(argv)
    tokens = _tokens(sys.stdin)

    try:
        print("Enter number of nodes: ", end="", flush=True)
        size = _next_int(tokens, "number of nodes")
        print("Enter cost matrix (0 for no edge):")
        matrix = read_matrix(tokens, size)
        if args.keys:
            print(_format_table(prim_mst(matrix)))
            return 0
        print("1. Prim's\n2. Kruskal's\nEnter choice: ", end="", flush=True)
        choice = _next_int(tokens, "choice")
        if choice == 1:
            tree = prim(matrix)
        elif choice == 2:
            tree = kruskal(matrix)
        else:
            print("Wrong choice!")
            return 0
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(_format_tree(tree))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())