"""Single-source shortest paths on a weighted adjacency matrix."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator, Sequence
from typing import TextIO

from algokit.traversal import read_matrix

Matrix = Sequence[Sequence[int]]

# Distance reported for vertices that cannot be reached from the source.
INF = 99999

SAMPLE_GRAPH: tuple[tuple[int, ...], ...] = (
    (0, 10, 0, 0, 5),
    (0, 0, 1, 0, 2),
    (0, 0, 0, 4, 0),
    (7, 0, 6, 0, 0),
    (0, 3, 9, 2, 0),
)


def dijkstra(graph: Matrix, source: int) -> list[int]:
    """Return the shortest distance from source to every vertex.

    graph[u][v] is the weight of the edge from u to v, 0 meaning no edge.
    Unreachable vertices are given the distance INF.
    """
    size = len(graph)
    if any(len(row) != size for row in graph):
        raise ValueError("adjacency matrix must be square")
    if not 0 <= source < size:
        raise ValueError(f"source vertex {source} is outside 0..{size - 1}")

    dist = [INF] * size
    dist[source] = 0
    done = [False] * size

    for _ in range(size - 1):
        # Smallest distance first; among equal distances the highest index.
        u = min(
            (v for v in range(size) if not done[v]),
            key=lambda v: (dist[v], -v),
        )
        done[u] = True
        if dist[u] == INF:
            continue
        for v, weight in enumerate(graph[u]):
            if not done[v] and weight and dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight
    return dist


def format_distances(distances: Sequence[int]) -> str:
    """Render distances as a tab-separated table with a header line."""
    lines = ["Vertex\tDistance from Source"]
    lines.extend(f"{vertex}\t{distance}" for vertex, distance in enumerate(distances))
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
    """Print shortest distances for the sample graph or one read from input."""
    parser = argparse.ArgumentParser(description="Dijkstra shortest paths.")
    parser.add_argument(
        "--source", type=int, default=0, help="source vertex of the sample graph"
    )
    parser.add_argument(
        "--stdin",
        action="store_true",
        help="read vertex count, matrix and source from standard input",
    )
    args = parser.parse_args(argv)

    try:
        if args.stdin:
            tokens = _tokens(sys.stdin)
            print("Enter number of vertices: ", end="", flush=True)
            size = _next_int(tokens, "number of vertices")
            print("Enter the adjacency matrix:")
            graph: Matrix = read_matrix(tokens, size)
            print("Enter source vertex: ", end="", flush=True)
            source = _next_int(tokens, "source vertex")
            print()
        else:
            graph, source = SAMPLE_GRAPH, args.source
        distances = dijkstra(graph, source)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(format_distances(distances))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())