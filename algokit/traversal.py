"""Depth-first and breadth-first traversal of adjacency-matrix graphs."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from itertools import islice
from typing import TextIO

Matrix = Sequence[Sequence[int]]


def _check(matrix: Matrix, start: int) -> int:
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("adjacency matrix must be square")
    if not 0 <= start < size:
        raise ValueError(f"start vertex {start} is outside 0..{size - 1}")
    return size


def dfs(matrix: Matrix, start: int) -> list[int]:
    """Return vertices in depth-first order from start.

    An edge exists from v to i where matrix[v][i] == 1; neighbours are
    explored in increasing index order.
    """
    size = _check(matrix, start)
    visited = [False] * size
    visited[start] = True
    order = [start]
    stack: list[tuple[int, Iterator[int]]] = [(start, iter(range(size)))]
    while stack:
        vertex, neighbours = stack[-1]
        for nxt in neighbours:
            if matrix[vertex][nxt] == 1 and not visited[nxt]:
                visited[nxt] = True
                order.append(nxt)
                stack.append((nxt, iter(range(size))))
                break
        else:
            stack.pop()
    return order


def bfs(matrix: Matrix, start: int) -> list[int]:
    """Return vertices in breadth-first order from start."""
    size = _check(matrix, start)
    visited = [False] * size
    visited[start] = True
    queue = deque([start])
    order = []
    while queue:
        vertex = queue.popleft()
        order.append(vertex)
        for nxt, weight in enumerate(matrix[vertex]):
            if weight == 1 and not visited[nxt]:
                visited[nxt] = True
                queue.append(nxt)
    return order


def read_matrix(tokens: Iterable[str], size: int) -> list[list[int]]:
    """Read a size-by-size integer matrix, row by row, from tokens."""
    if size < 0:
        raise ValueError("matrix size must not be negative")
    values = [int(token) for token in islice(iter(tokens), size * size)]
    if len(values) < size * size:
        raise ValueError(
            f"expected {size * size} matrix entries, got {len(values)}"
        )
    return [values[row * size:(row + 1) * size] for row in range(size)]


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _next_int(tokens: Iterator[str], what: str) -> int:
    try:
        return int(next(tokens))
    except StopIteration:
        raise ValueError(f"missing {what}") from None


def main(argv: Sequence[str] | None = None) -> int:
    """Read a graph from standard input and print its traversal.

    Vertices are numbered from 1 on input and output.
    """
    parser = argparse.ArgumentParser(description="Traverse a graph.")
    parser.add_argument(
        "--bfs", action="store_true", help="breadth-first instead of depth-first"
    )
    args = parser.parse_args(argv)
    tokens = _tokens(sys.stdin)

    try:
        print("Enter no. of nodes: ", end="", flush=True)
        size = _next_int(tokens, "number of nodes")
        print("Enter the adjacency matrix:")
        matrix = read_matrix(tokens, size)
        print("Enter the Starting Vertex: ", end="", flush=True)
        start = _next_int(tokens, "starting vertex") - 1
        order = (bfs if args.bfs else dfs)(matrix, start)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    label = "BFS" if args.bfs else "DFS"
    print(f"{label} Traversal: " + " ".join(str(v + 1) for v in order))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())