# bagsort

A small collection of linked data structures and sorting routines:

- `bagsort.bag.LinkedBag` – a bag (an unordered collection that allows
  duplicates) kept as a singly linked chain of `bagsort.node.Node` objects.
  It can sort itself in place with merge sort or quicksort.
- `bagsort.interface.Bag` – the abstract base class that `LinkedBag`
  implements.
- `bagsort.chain_sort` – merge sort and quicksort over chains of `Node`,
  relinking the nodes rather than copying them.
- `bagsort.linked_list_sort` – the same two algorithms over plain singly
  linked lists of `ListNode` integers.
- `bagsort.series` – the integer sequence
  `J(0) = 0`, `J(1) = J(2) = 1`, `J(n) = J(n-1) + 2·J(n-2) + 4·J(n-3)`.

The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Using the bag

```python
from bagsort.bag import LinkedBag, SortMethod

bag = LinkedBag([35, 62, 15, 24, 40, 7])
len(bag)              # 6
40 in bag             # True
bag.frequency_of(15)  # 1
bag.to_list()         # [7, 40, 24, 15, 62, 35]

bag.sort(SortMethod.MERGE)
bag.to_list()         # [7, 15, 24, 35, 40, 62]
```

New entries go to the front of the chain, so an unsorted bag lists its
entries most recent first.

- `sort(method)` sorts in ascending order: `SortMethod.MERGE` (0, the
  default) uses merge sort, any other value quicksort. `merge_sort()` and
  `quick_sort()` call an algorithm directly.
- `remove(entry)` removes one occurrence: the entry at the front of the
  chain takes its place. `remove_alt(entry)` unlinks the first node holding
  the entry and keeps the rest in order. Both raise `ValueError` when the
  entry is absent.
- `clear()`, `is_empty()`, `copy()` (also `copy.copy(bag)`) and iteration
  work as expected.

## Sorting chains and plain linked lists

```python
from bagsort.node import chain_from, iter_chain
from bagsort.chain_sort import merge_sort

head = merge_sort(chain_from([3, 1, 2]))
[node.item for node in iter_chain(head)]   # [1, 2, 3]
```

```python
from bagsort.linked_list_sort import create_list, format_list, iter_values, quick_sort

head = quick_sort(create_list([4, 2, 1, 3, 5, 6]))
list(iter_values(head))   # [1, 2, 3, 4, 5, 6]
format_list(head)         # '1 -> 2 -> 3 -> 4 -> 5 -> 6 -> nullptr'
```

Both modules also expose the building blocks: `merge`, `split_middle`,
`get_tail` and `partition`.

## The series

```python
from bagsort.series import series_recursive

[series_recursive(n) for n in range(6)]   # [0, 1, 1, 3, 9, 19]
```

A negative index raises `ValueError`.

## Commands

```
bagsort-series 5          # prints: seriesRecursive(5) = 19
bagsort-listsort [merge|quick]
bagsort-demo [merge|quick]
```

`bagsort-series` takes exactly one argument; text that does not start with
an integer is read as 0, and a negative index is reported as an error with
exit status 1. `bagsort-listsort` sorts the list `4 2 1 3 5 6` and
`bagsort-demo` sorts a bag of `35 62 15 24 40 7`; each prints the data
before and after sorting with the chosen algorithm (merge sort by default).