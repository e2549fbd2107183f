"""Fill a bag with example numbers, sort it and show it before and after."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from typing import Any

from bagsort.bag import LinkedBag, SortMethod

_DEMO_VALUES = (35, 62, 15, 24, 40, 7)


def format_bag(bag: Iterable[Any]) -> str:
    """Render each entry followed by a single space."""
    return "".join(f"{item} " for item in bag)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the example bag, sort it, and print it again."""
    parser = argparse.ArgumentParser(description="Sort an example linked bag.")
    parser.add_argument(
        "method",
        nargs="?",
        choices=("merge", "quick"),
        default="merge",
        help="sorting algorithm (default: merge)",
    )
    args = parser.parse_args(argv)

    bag = LinkedBag(_DEMO_VALUES)
    print("Original bag elements")
    print(format_bag(bag))

    bag.sort(SortMethod.MERGE if args.method == "merge" else SortMethod.QUICK)

    print("Sorted bag elements")
    print(format_bag(bag))
    return 0


if __name__ == "__main__":
    sys.exit(main())