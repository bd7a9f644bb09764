"""Quadratic in-place sorts: bubble, insertion and selection sort.

Each function reorders the given mutable sequence in place into
ascending order and returns that same sequence.
"""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any, TypeVar

S = TypeVar("S", bound=MutableSequence[Any])


def bubble_sort(items: S) -> S:
    """Sort by swapping adjacent elements that are out of order.

    Stops early after a pass that makes no swap.  Equal elements keep
    their relative order.
    """
    n = len(items)
    for done in range(n - 1):
        swapped = False
        for j in range(n - done - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items


def insertion_sort(items: S) -> S:
    """Sort by shifting each element left past every larger one.

    Equal elements keep their relative order.
    """
    for i in range(1, len(items)):
        key = items[i]
        j = i
        while j > 0 and items[j - 1] > key:
            items[j] = items[j - 1]
            j -= 1
        items[j] = key
    return items


def selection_sort(items: S) -> S:
    """Sort by swapping the first smallest remaining element into place.

    The swap can move equal elements past one another, so the order of
    equal elements is not preserved.
    """
    n = len(items)
    for i in range(n - 1):
        min_idx = i
        for j in range(i + 1, n):
            if items[j] < items[min_idx]:
                min_idx = j
        if min_idx != i:
            items[min_idx], items[i] = items[i], items[min_idx]
    return items


__all__ = ["bubble_sort", "insertion_sort", "selection_sort"]