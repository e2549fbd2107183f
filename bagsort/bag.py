"""A bag kept as a singly linked chain of nodes, with in-place sorting."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from enum import IntEnum
from typing import Any

from bagsort import chain_sort
from bagsort.interface import Bag
from bagsort.node import Node, chain_from, iter_chain


class SortMethod(IntEnum):
    """The algorithm :meth:`LinkedBag.sort` uses."""

    MERGE = 0
    QUICK = 1


class LinkedBag(Bag):
    """A bag whose entries live in a linked chain.

    New entries are put at the front of the chain, so iteration yields
    the most recently added entry first.
    """

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head: Node | None = None
        self._count = 0
        for item in items:
            self.add(item)

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Any]:
        for node in iter_chain(self._head):
            yield node.item

    def __contains__(self, entry: object) -> bool:
        return self._find(entry) is not None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_list()!r})"

    def __copy__(self) -> LinkedBag:
        duplicate = type(self)()
        duplicate._head = chain_from(self)
        duplicate._count = self._count
        return duplicate

    def copy(self) -> LinkedBag:
        """Return a new bag holding the same entries in the same order."""
        return self.__copy__()

    def is_empty(self) -> bool:
        """Return True when the bag holds no entries."""
        return self._count == 0

    def add(self, entry: Any) -> None:
        """Put entry at the front of the chain."""
        self._head = Node(entry, self._head)
        self._count += 1

    def _find(self, entry: object) -> Node | None:
        return next((node for node in iter_chain(self._head) if node.item == entry), None)

    def remove(self, entry: Any) -> None:
        """Remove one occurrence of entry.

        The first entry of the chain takes the removed entry's place and
        the first node is dropped. Raises ValueError if entry is absent.
        """
        node = self._find(entry)
        if node is None or self._head is None:
            raise ValueError(f"{entry!r} is not in the bag")
        node.item = self._head.item
        self._head = self._head.next
        self._count -= 1

    def remove_alt(self, entry: Any) -> None:
        """Remove the first node holding entry, keeping the others in order.

        Raises ValueError if entry is absent.
        """
        prev: Node | None = None
        for node in iter_chain(self._head):
            if node.item == entry:
                if prev is None:
                    self._head = node.next
                else:
                    prev.next = node.next
                node.next = None
                self._count -= 1
                return
            prev = node
        raise ValueError(f"{entry!r} is not in the bag")

    def clear(self) -> None:
        """Remove every entry from the bag."""
        self._head = None
        self._count = 0

    def frequency_of(self, entry: Any) -> int:
        """Return how many times entry occurs in the bag."""
        return sum(1 for item in self if item == entry)

    def to_list(self) -> list[Any]:
        """Return the entries as a new list, front of the chain first."""
        return list(self)

    def sort(self, method: SortMethod | int = SortMethod.MERGE) -> None:
        """Sort the entries in ascending order, in place.

        SortMethod.MERGE (0) selects merge sort; any other value quicksort.
        """
        if self._count <= 1:
            return
        if method == SortMethod.MERGE:
            self.merge_sort()
        else:
            self.quick_sort()

    def merge_sort(self) -> None:
        """Sort the chain in place by merge sort."""
        self._head = chain_sort.merge_sort(self._head)

    def quick_sort(self) -> None:
        """Sort the chain in place by quicksort."""
        self._head = chain_sort.quick_sort(self._head)