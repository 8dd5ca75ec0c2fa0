"""Selection sort."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from typing import Any


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Return the values in ascending order, picking the smallest each time."""
    remaining = list(values)
    ordered = []
    while remaining:
        smallest = min(remaining)
        remaining.remove(smallest)
        ordered.append(smallest)
    return ordered


def main(argv: Sequence[str] | None = None) -> int:
    """Read a count and that many integers from standard input; print them sorted."""
    argparse.ArgumentParser(description="Sort integers.").parse_args(argv)
    print("Enter no.of elements.", end="", flush=True)
    tokens = sys.stdin.read().split()
    try:
        if not tokens:
            raise ValueError("missing number of elements")
        count = int(tokens[0])
        if count < 0:
            raise ValueError("number of elements must not be negative")
        values = [int(token) for token in tokens[1 : count + 1]]
        if len(values) < count:
            raise ValueError(f"expected {count} elements, got {len(values)}")
    except ValueError as exc:
        print()
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print()
    print(" ".join(str(value) for value in selection_sort(values)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())