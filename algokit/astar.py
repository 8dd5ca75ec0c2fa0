"""A* search over a grid of free (0) and blocked (non-zero) cells."""

from __future__ import annotations

import argparse
import heapq
import itertools
from collections.abc import Sequence

Cell = tuple[int, int]

# Up, right, down, left.
_DIRECTIONS: tuple[Cell, ...] = ((-1, 0), (0, 1), (1, 0), (0, -1))

DEFAULT_GRID: tuple[tuple[int, ...], ...] = (
    (0, 1, 0, 0, 0),
    (0, 1, 0, 1, 0),
    (0, 0, 0, 1, 0),
    (1, 1, 0, 1, 0),
    (0, 0, 0, 0, 0),
)
DEFAULT_START: Cell = (0, 0)
DEFAULT_GOAL: Cell = (4, 4)


def heuristic(a: Cell, b: Cell) -> int:
    """Return the Manhattan distance between two cells."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def _inside(cell: Cell, rows: int, cols: int) -> bool:
    return 0 <= cell[0] < rows and 0 <= cell[1] < cols


def astar_search(
    grid: Sequence[Sequence[int]], start: Cell, goal: Cell
) -> list[Cell] | None:
    """Find a shortest 4-connected path from start to goal.

    Returns the cells of the path from start to goal inclusive, or None
    when the goal cannot be reached.
    """
    if not grid or not grid[0]:
        raise ValueError("grid must have at least one row and one column")
    rows, cols = len(grid), len(grid[0])
    start, goal = tuple(start), tuple(goal)
    for name, cell in (("start", start), ("goal", goal)):
        if not _inside(cell, rows, cols):
            raise ValueError(f"{name} {cell} lies outside the grid")

    order = itertools.count()
    open_heap: list[tuple[int, int, int, Cell, Cell | None]] = [
        (heuristic(start, goal), next(order), 0, start, None)
    ]
    came_from: dict[Cell, Cell | None] = {}

    while open_heap:
        _, _, cost, cell, parent = heapq.heappop(open_heap)
        if cell in came_from:
            continue
        came_from[cell] = parent

        if cell == goal:
            path = []
            step: Cell | None = cell
            while step is not None:
                path.append(step)
                step = came_from[step]
            path.reverse()
            return path

        x, y = cell
        for dx, dy in _DIRECTIONS:
            nxt = (x + dx, y + dy)
            if (
                _inside(nxt, rows, cols)
                and grid[nxt[0]][nxt[1]] == 0
                and nxt not in came_from
            ):
                g_new = cost + 1
                heapq.heappush(
                    open_heap,
                    (g_new + heuristic(nxt, goal), next(order), g_new, nxt, cell),
                )
    return None


def format_path(path: Sequence[Cell]) -> str:
    """Render a path as 'Path: (x,y) (x,y) ...'."""
    return "Path: " + " ".join(f"({x},{y})" for x, y in path)


def main(argv: Sequence[str] | None = None) -> int:
    """Search the built-in sample grid and print the outcome."""
    parser = argparse.ArgumentParser(description="A* search on a sample grid.")
    parser.add_argument(
        "--start", nargs=2, type=int, metavar=("ROW", "COL"), default=DEFAULT_START
    )
    parser.add_argument(
        "--goal", nargs=2, type=int, metavar=("ROW", "COL"), default=DEFAULT_GOAL
    )
    args = parser.parse_args(argv)

    try:
        path = astar_search(DEFAULT_GRID, tuple(args.start), tuple(args.goal))
    except ValueError as exc:
        parser.error(str(exc))

    if path is None:
        print("No path found.")
    else:
        print("Path found!")
        print(format_path(path))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())