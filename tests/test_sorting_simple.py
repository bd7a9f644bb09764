from collections import Counter
from dataclasses import dataclass

import pytest
from hypothesis import given
from hypothesis import strategies as st

from wrapbench.sorting_simple import bubble_sort, insertion_sort, selection_sort


@dataclass(eq=False)
class Keyed:
    key: int
    label: str

    def __lt__(self, other):
        return self.key < other.key

    def __gt__(self, other):
        return self.key > other.key


def _nondecreasing(values):
    return all(a <= b for a, b in zip(values, values[1:]))


def _sorted_one(count):
    values = list(range(count))
    values[count // 2] = 2 * count
    return values


def _sorted_three(count):
    values = list(range(count))
    for index in (count // 2, count // 4, count // 8):
        values[index] = 0
    return values


def _unsorted_one(count):
    values = [count - v for v in range(count)]
    values[count // 2] = 2 * count
    return values


def _unsorted_three(count):
    values = [count - v for v in range(count)]
    values[count // 2] = 2 * count
    values[count // 4] = 0
    values[count // 8] = count
    return values


@pytest.mark.parametrize(
    "values",
    [
        _sorted_one(300),
        _sorted_three(40),
        _unsorted_one(300),
        _unsorted_three(40),
        [v % 33 for v in range(16)],
    ],
)
def test_benchmark_arrays(values):
    expected = sorted(values)
    by_bubble = bubble_sort(list(values))
    by_insertion = insertion_sort(list(values))
    by_selection = selection_sort(list(values))
    assert by_bubble == expected
    assert by_insertion == expected
    assert by_selection == expected
    assert Counter(by_bubble) == Counter(values)


def test_sorts_in_place_and_returns_same_object():
    first = [5, 3, 9, 1]
    assert bubble_sort(first) is first
    assert first == [1, 3, 5, 9]

    second = [5, 3, 9, 1]
    assert insertion_sort(second) is second
    assert second == [1, 3, 5, 9]

    third = [5, 3, 9, 1]
    assert selection_sort(third) is third
    assert third == [1, 3, 5, 9]


def test_empty_and_single():
    assert bubble_sort([]) == []
    assert bubble_sort([7]) == [7]
    assert insertion_sort([]) == []
    assert insertion_sort([7]) == [7]
    assert selection_sort([]) == []
    assert selection_sort([7]) == [7]


def test_reverse_range():
    expected = list(range(1, 41))
    assert bubble_sort(list(range(40, 0, -1))) == expected
    assert insertion_sort(list(range(40, 0, -1))) == expected
    assert selection_sort(list(range(40, 0, -1))) == expected


def test_large_unsigned_words():
    top = 2**64 - 1
    expected = [0, 1, 2**63, top]
    assert bubble_sort([top, 0, 2**63, 1]) == expected
    assert insertion_sort([top, 0, 2**63, 1]) == expected
    assert selection_sort([top, 0, 2**63, 1]) == expected


def test_incomparable_elements_raise():
    with pytest.raises(TypeError):
        bubble_sort([1, "a"])
    with pytest.raises(TypeError):
        insertion_sort([1, "a"])
    with pytest.raises(TypeError):
        selection_sort([1, "a"])


def test_stable_sorts_keep_equal_order():
    items = [Keyed(2, "a"), Keyed(1, "b"), Keyed(2, "c"), Keyed(1, "d")]
    result = bubble_sort(list(items))
    assert [item.label for item in result] == ["b", "d", "a", "c"]
    result = insertion_sort(list(items))
    assert [item.label for item in result] == ["b", "d", "a", "c"]


def test_selection_sort_moves_equal_elements():
    items = [Keyed(2, "a"), Keyed(2, "b"), Keyed(1, "c")]
    result = selection_sort(items)
    assert [item.key for item in result] == [1, 2, 2]
    assert [item.label for item in result] == ["c", "b", "a"]


@given(values=st.lists(st.integers(min_value=0, max_value=2**64 - 1), max_size=60))
def test_matches_builtin_sort(values):
    expected = sorted(values)
    for result in (
        bubble_sort(list(values)),
        insertion_sort(list(values)),
        selection_sort(list(values)),
    ):
        assert _nondecreasing(result)
        assert Counter(result) == Counter(values)
        assert result == expected


@given(values=st.lists(st.integers(min_value=-50, max_value=50), max_size=40))
def test_idempotent(values):
    once = list(bubble_sort(list(values)))
    assert bubble_sort(list(once)) == once
    once = list(insertion_sort(list(values)))
    assert insertion_sort(list(once)) == once
    once = list(selection_sort(list(values)))
    assert selection_sort(list(once)) == once