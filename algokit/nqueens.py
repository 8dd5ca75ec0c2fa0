"""Place N queens on an N-by-N board so that none attack each other."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

MAX_N = 20
SEPARATOR = "-" * 20


def solve(n: int) -> list[int] | None:
    """Return the first solution found by backtracking, or None.

    The solution gives the queen's column for each row; columns are tried
    in increasing order. Boards larger than MAX_N are rejected.
    """
    if n > MAX_N:
        raise ValueError(f"N is too large. Max supported value is {MAX_N}.")
    if n < 0:
        return None

    columns: list[int] = []
    used_columns: set[int] = set()
    used_diagonals: set[int] = set()
    used_antidiagonals: set[int] = set()

    def place(row: int) -> bool:
        if row == n:
            return True
        for col in range(n):
            if (
                col in used_columns
                or row - col in used_diagonals
                or row + col in used_antidiagonals
            ):
                continue
            columns.append(col)
            used_columns.add(col)
            used_diagonals.add(row - col)
            used_antidiagonals.add(row + col)
            if place(row + 1):
                return True
            columns.pop()
            used_columns.discard(col)
            used_diagonals.discard(row - col)
            used_antidiagonals.discard(row + col)
        return False

    return columns if place(0) else None


def format_board(columns: Sequence[int]) -> str:
    """Draw a solution with 'Q ' and '. ' cells, ending with a separator line."""
    size = len(columns)
    rows = [
        "".join("Q " if cell == queen else ". " for cell in range(size))
        for queen in columns
    ]
    return "\n".join([*rows, SEPARATOR])


def main(argv: Sequence[str] | None = None) -> int:
    """Read N from standard input and print the first solution."""
    argparse.ArgumentParser(description="Solve the N-queens puzzle.").parse_args(argv)
    print("Enter the value of N (number of queens): ", end="", flush=True)
    text = sys.stdin.readline().strip()
    try:
        n = int(text)
    except ValueError:
        print(f"error: not a number: {text!r}", file=sys.stderr)
        return 1
    print()
    try:
        columns = solve(n)
    except ValueError as exc:
        print(exc)
        return 1
    if columns is None:
        print(f"No solution exists for N = {n}")
    else:
        print(format_board(columns))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())