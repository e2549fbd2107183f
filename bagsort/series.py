"""The integer sequence J(n) = J(n-1) + 2*J(n-2) + 4*J(n-3)."""

from __future__ import annotations

import os
import re
import sys
from collections.abc import Sequence

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def series_recursive(n: int) -> int:
    """Return the n-th term of the sequence.

    J(0) = 0, J(1) = J(2) = 1 and J(n) = J(n-1) + 2*J(n-2) + 4*J(n-3)
    for n > 2. A negative index raises ValueError.
    """
    if n < 0:
        raise ValueError(f"index must not be negative, got {n}")
    if n == 0:
        return 0
    if n in (1, 2):
        return 1
    a, b, c = 0, 1, 1  # J(k-3), J(k-2), J(k-1)
    for _ in range(3, n + 1):
        a, b, c = b, c, c + 2 * b + 4 * a
    return c


def _atoi(text: str) -> int:
    """Parse a leading integer the lenient way; anything else reads as 0."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def main(argv: Sequence[str] | None = None) -> int:
    """Print the term whose index is given as the only argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        prog = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "series"
        print(f"Usage: {prog} <n>", file=sys.stderr)
        return 1

    n = _atoi(args[0])
    try:
        result = series_recursive(n)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(f"seriesRecursive({n}) = {result}")
    return 0


if __name__ == "__main__":
    sys.exit(main())