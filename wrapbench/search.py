"""Linear and binary search, element counting and permutation checks."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import islice
from typing import Any


def bsearch(key: Any, items: Sequence[Any]) -> int | None:
    """Binary search for key in the ascending sequence items.

    Returns the index of a matching element, or None when the search
    does not meet one.
    """
    base = 0
    num = len(items)
    while num:
        pivot = base + num // 2
        value = items[pivot]
        if key == value:
            return pivot
        if key > value:
            base = pivot + 1
            num -= 1
        num //= 2
    return None


def lfind(key: Any, items: Sequence[Any]) -> int | None:
    """Return the index of the first element equal to key, or None."""
    return next((index for index, value in enumerate(items) if value == key), None)


def count(
    items: Sequence[Any], value: Any, start: int = 0, end: int | None = None
) -> int:
    """Count the elements equal to value among items[start:end]."""
    return sum(1 for item in islice(items, start, end) if item == value)


def is_permutation(first: Sequence[Any], second: Sequence[Any]) -> bool:
    """Tell whether second holds exactly the elements of first, in any order."""
    if len(first) != len(second):
        return False
    return all(count(first, value) == count(second, value) for value in first)


def smallest(items: Sequence[Any]) -> Any:
    """Return the smallest element; an empty sequence is an error."""
    if not items:
        raise ValueError("smallest() needs at least one element")
    return min(items)


def largest(items: Sequence[Any]) -> Any:
    """Return the largest element; an empty sequence is an error."""
    if not items:
        raise ValueError("largest() needs at least one element")
    return max(items)