"""Merge sort and quicksort over chains of bag nodes.

Every function relinks the nodes it is given instead of copying them,
and returns the head of the resulting chain.
"""

from __future__ import annotations

from bagsort.node import Node


def merge(l1: Node | None, l2: Node | None) -> Node | None:
    """Splice two sorted chains into one sorted chain and return its head.

    On equal items the node from the second chain goes first.
    """
    dummy = Node()
    tail = dummy
    while l1 is not None and l2 is not None:
        if l1.item < l2.item:
            tail.next = l1
            l1 = l1.next
        else:
            tail.next = l2
            l2 = l2.next
        tail = tail.next
    tail.next = l1 if l1 is not None else l2
    return dummy.next


def split_middle(head: Node | None) -> Node | None:
    """Cut the chain after its middle and return the head of the second half.

    The first half keeps the extra node when the length is odd. Chains of
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


def merge_sort(head: Node | None) -> Node | None:
    """Sort the chain by merge sort and return the new head."""
    if head is None or head.next is None:
        return head
    mid = split_middle(head)
    return merge(merge_sort(head), merge_sort(mid))


def get_tail(head: Node | None) -> Node | None:
    """Return the last node of the chain, or None for an empty chain."""
    while head is not None and head.next is not None:
        head = head.next
    return head


def partition(head: Node, end: Node) -> tuple[Node, Node, Node]:
    """Partition the chain from head to end around end as pivot.

    Nodes whose item is smaller than the pivot's stay before it in their
    order; the others are moved behind it. Returns
    ``(pivot, new_head, new_end)``.
    """
    pivot = end
    prev: Node | None = None
    curr: Node | None = head
    tail = pivot
    new_head: Node | None = None

    while curr is not pivot:
        if curr.item < pivot.item:
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


def _quick_sort_range(head: Node | None, end: Node | None) -> Node | None:
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


def quick_sort(head: Node | None) -> Node | None:
    """Sort the chain by quicksort and return the new head."""
    return _quick_sort_range(head, get_tail(head))