"""Nodes of a singly linked chain."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class Node:
    """One link of a chain: an item and the node that follows it."""

    item: Any = None
    next: Node | None = field(default=None, repr=False)


def iter_chain(head: Node | None) -> Iterator[Node]:
    """Yield each node of the chain starting at head."""
    node = head
    while node is not None:
        yield node
        node = node.next


def chain_from(items: Iterable[Any]) -> Node | None:
    """Link the items into a new chain in order and return its head."""
    head: Node | None = None
    tail: Node | None = None
    for item in items:
        node = Node(item)
        if tail is None:
            head = tail = node
        else:
            tail.next = node
            tail = node
    return head