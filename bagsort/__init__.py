"""Linked bag container, linked-list merge sort and quicksort, and an integer sequence."""

__version__ = "0.1.0"
__all__ = ["bag", "chain_sort", "demo", "interface", "linked_list_sort", "node", "series"]