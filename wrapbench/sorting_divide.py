"""In-place heap sort, merge sort and quick sort.

Each sorting function reorders the given mutable sequence in place into
ascending order and returns that same sequence.
"""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any, TypeVar

S = TypeVar("S", bound=MutableSequence[Any])


def heapify(items: MutableSequence[Any], n: int, i: int) -> None:
    """Sift items[i] down so the subtree rooted at i in items[:n] is a max-heap.

    The children of i are assumed to be heaps already.
    """
    if not 0 <= n <= len(items):
        raise ValueError(f"heap size {n} does not fit a sequence of {len(items)}")
    if i < 0:
        raise ValueError("the root index must not be negative")
    while True:
        largest = i
        left = 2 * i + 1
        right = 2 * i + 2
        if left < n and items[left] > items[largest]:
            largest = left
        if right < n and items[right] > items[largest]:
            largest = right
        if largest == i:
            return
        items[i], items[largest] = items[largest], items[i]
        i = largest


def heap_sort(items: S) -> S:
    """Sort by building a max-heap and moving its top to the end repeatedly."""
    n = len(items)
    for i in range(n // 2 - 1, -1, -1):
        heapify(items, n, i)
    for end in range(n - 1, -1, -1):
        items[0], items[end] = items[end], items[0]
        heapify(items, end, 0)
    return items


def merge(items: MutableSequence[Any], left: int, middle: int, right: int) -> None:
    """Merge the sorted runs items[left..middle] and items[middle+1..right].

    Both bounds are inclusive.  On ties the element of the left run comes
    first, so the merge is stable.
    """
    if not 0 <= left <= middle + 1 or not middle <= right < len(items):
        raise ValueError(
            f"runs {left}..{middle} and {middle + 1}..{right} "
            f"do not fit a sequence of {len(items)}"
        )
    first = list(items[left : middle + 1])
    second = list(items[middle + 1 : right + 1])
    i = j = 0
    k = left
    while i < len(first) and j < len(second):
        if first[i] > second[j]:
            items[k] = second[j]
            j += 1
        else:
            items[k] = first[i]
            i += 1
        k += 1
    rest = first[i:] + second[j:]
    items[k : k + len(rest)] = rest


def _merge_sort(items: MutableSequence[Any], left: int, right: int) -> None:
    if left < right:
        middle = left + (right - left) // 2
        _merge_sort(items, left, middle)
        _merge_sort(items, middle + 1, right)
        merge(items, left, middle, right)


def merge_sort(items: S) -> S:
    """Sort by splitting in halves, sorting each and merging them; stable."""
    _merge_sort(items, 0, len(items) - 1)
    return items


def partition(items: MutableSequence[Any], low: int, high: int) -> int:
    """Partition items[low..high] around the pivot items[high].

    Elements not greater than the pivot end up before it, the others after.
    Returns the pivot's final index.
    """
    if not 0 <= low <= high < len(items):
        raise ValueError(f"range {low}..{high} does not fit a sequence of {len(items)}")
    pivot = items[high]
    i = low - 1
    for j in range(low, high):
        if items[j] <= pivot:
            i += 1
            items[i], items[j] = items[j], items[i]
    items[i + 1], items[high] = items[high], items[i + 1]
    return i + 1


def quick_sort(items: S) -> S:
    """Sort by partitioning around the last element of each range."""
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pi = partition(items, low, high)
            pending.append((pi + 1, high))
            pending.append((low, pi - 1))
    return items


__all__ = ["heapify", "heap_sort", "merge", "merge_sort", "partition", "quick_sort"]