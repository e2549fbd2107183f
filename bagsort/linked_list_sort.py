"""Merge sort and quicksort on a singly linked list of integers."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int
    next: ListNode | None = field(default=None, repr=False)


def create_list(values: Iterable[int]) -> ListNode | None:
    """Build a linked list holding the values in order; None when empty."""
    head: ListNode | None = None
    tail: ListNode | None = None
    for value in values:
        node = ListNode(value)
        if tail is None:
            head = tail = node
        else:
            tail.next = node
            tail = node
    return head


def _iter_nodes(head: ListNode | None) -> Iterator[ListNode]:
    node = head
    while node is not None:
        yield node
        node = node.next


def iter_values(head: ListNode | None) -> Iterator[int]:
    """Yield the values of the list from head to tail."""
    for node in _iter_nodes(head):
        yield node.val


def format_list(head: ListNode | None) -> str:
    """Render the list as ``a -> b -> ... -> nullptr``."""
    return "".join(f"{value} -> " for value in iter_values(head)) + "nullptr"


def merge(l1: ListNode | None, l2: ListNode | None) -> ListNode | None:
    """Splice two sorted lists into one sorted list and return its head.

    On equal values the node from the second list goes first.
    """
    dummy = ListNode(0)
    tail = dummy
    while l1 is not None and l2 is not None:
        if l1.val < l2.val:
            tail.next = l1
            l1 = l1.next
        else:
            tail.next = l2
            l2 = l2.next
        tail = tail.next
    tail.next = l1 if l1 is not None else l2
    return dummy.next


def split_middle(head: ListNode | None) -> ListNode | None:
    """Cut the list after its middle and return the head of the second half.

    The first half keeps the extra node when the length is odd. Lists of
    fewer than two nodes are left alone and None is returned.
    """
    if head is None or head.next is None:
        return None
    slow = head
    fast = head.next
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    second = slow.next
    slow.next = None
    return second


def merge_sort(head: ListNode | None) -> ListNode | None:
    """Sort the list by merge sort, reusing its nodes; return the new head."""
    if head is None or head.next is None:
        return head
    mid = split_middle(head)
    return merge(merge_sort(head), merge_sort(mid))


def get_tail(head: ListNode | None) -> ListNode | None:
    """Return the last node of the list, or None for an empty list."""
    while head is not None and head.next is not None:
        head = head.next
    return head


def partition(
    head: ListNode, end: ListNode
) -> tuple[ListNode, ListNode, ListNode]:
    """Partition the list from head to end around end as pivot.

    Nodes smaller than the pivot stay before it in their order; the others
    are moved behind it. Returns ``(pivot, new_head, new_end)``.
    """
    pivot = end
    prev: ListNode | None = None
    curr: ListNode | None = head
    tail = pivot
    new_head: ListNode | None = None

    while curr is not pivot:
        if curr.val < pivot.val:
            if new_head is None:
                new_head = curr
            prev = curr
            curr = curr.next
        else:
            if prev is not None:
                prev.next = curr.next
            following = curr.next
            curr.next = None
            tail.next = curr
            tail = curr
            curr = following

    if new_head is None:
        new_head = pivot
    return pivot, new_head, tail


def _quick_sort_range(head: ListNode | None, end: ListNode | None) -> ListNode | None:
    if head is None or head is end:
        return head

    pivot, new_head, new_end = partition(head, end)

    if new_head is not pivot:
        before = new_head
        while before.next is not pivot:
            before = before.next
        before.next = None
        new_head = _quick_sort_range(new_head, before)
        get_tail(new_head).next = pivot

    pivot.next = _quick_sort_range(pivot.next, new_end)
    return new_head


def quick_sort(head: ListNode | None) -> ListNode | None:
    """Sort the list by quicksort, reusing its nodes; return the new head."""
    return _quick_sort_range(head, get_tail(head))


_DEMO_VALUES = (4, 2, 1, 3, 5, 6)


def main(argv: Sequence[str] | None = None) -> int:
    """Sort a small example list and print it before and after."""
    parser = argparse.ArgumentParser(description="Sort an example linked list.")
    parser.add_argument(
        "method",
        nargs="?",
        choices=("merge", "quick"),
        default="merge",
        help="sorting algorithm (default: merge)",
    )
    args = parser.parse_args(argv)

    head = create_list(_DEMO_VALUES)
    print(f"Original list: {format_list(head)}")

    if args.method == "merge":
        print(f"Sorted list:   {format_list(merge_sort(head))}")
    else:
        print(f"Sorted list: {format_list(quick_sort(head))}")
    return 0


if __name__ == "__main__":
    sys.exit(main())