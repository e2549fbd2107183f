"""The abstract bag: an unordered collection that allows duplicates."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Any


class Bag(ABC):
    """An unordered collection of items in which duplicates are allowed."""

    @abstractmethod
    def __len__(self) -> int:
        """Return the number of entries in the bag."""

    @abstractmethod
    def __iter__(self) -> Iterator[Any]:
        """Iterate over every entry in the bag."""

    def __contains__(self, entry: object) -> bool:
        return any(item == entry for item in self)

    def is_empty(self) -> bool:
        """Return True when the bag holds no entries."""
        return len(self) == 0

    @abstractmethod
    def add(self, entry: Any) -> None:
        """Add one entry to the bag."""

    @abstractmethod
    def remove(self, entry: Any) -> None:
        """Remove one occurrence of entry; raise ValueError if it is absent."""

    @abstractmethod
    def clear(self) -> None:
        """Remove every entry from the bag."""

    def frequency_of(self, entry: Any) -> int:
        """Return how many times entry occurs in the bag."""
        return sum(1 for item in self if item == entry)

    def to_list(self) -> list[Any]:
        """Return a new list of all entries in the bag."""
        return list(self)