"""
Tests for binary_search / lower_bound / upper_bound.

The standard library's `bisect` module serves as the oracle for insertion
points on integer lists.

Note:
- This file inserts the project `src/` onto sys.path so tests run without installing the package.
"""

from __future__ import annotations

import bisect
import pathlib
import sys
from typing import List

import pytest
from hypothesis import given, settings, strategies as st

_REPO_ROOT = pathlib.Path(__file__).resolve().parents[1]
_SRC = _REPO_ROOT / "src"
if str(_SRC) not in sys.path:
    sys.path.insert(0, str(_SRC))

from cmpsort.algorithms import SearchResult, binary_search, lower_bound, upper_bound
from cmpsort.ordering import by_key, compare, reverse


def test_found() -> None:
    assert binary_search([2, 4, 7], 4, compare) == SearchResult(index=1, found=True)


def test_insertion_point() -> None:
    result = binary_search([2, 4, 7], 5, compare)
    assert result == SearchResult(index=2, found=False)
    index, found = result
    assert (index, found) == (2, False)


@pytest.mark.parametrize(
    "target, expected",
    [(1, (0, False)), (2, (0, True)), (7, (2, True)), (8, (3, False))],
)
def test_edges(target: int, expected) -> None:
    assert tuple(binary_search([2, 4, 7], target, compare)) == expected


def test_empty_sequence() -> None:
    assert binary_search([], 3, compare) == SearchResult(0, False)
    assert lower_bound([], 3, compare) == 0
    assert upper_bound([], 3, compare) == 0


def test_duplicates_return_leftmost_match() -> None:
    seq = [1, 2, 2, 2, 3]
    assert binary_search(seq, 2, compare) == SearchResult(1, True)
    assert lower_bound(seq, 2, compare) == 1
    assert upper_bound(seq, 2, compare) == 4


def test_descending_sequence_with_reversed_comparator() -> None:
    seq = [9, 7, 7, 4, 1]
    desc = reverse(compare)
    assert binary_search(seq, 7, desc) == SearchResult(1, True)
    assert binary_search(seq, 5, desc) == SearchResult(3, False)


def test_search_by_key() -> None:
    students = [("Alice", 85), ("Charlie", 85), ("Bob", 90)]
    grade = by_key(lambda s: s[1])
    # Target only needs to be comparable through the comparator
    assert binary_search(students, ("?", 90), grade) == SearchResult(2, True)
    assert binary_search(students, ("?", 88), grade) == SearchResult(2, False)


def test_unsorted_input_does_not_raise() -> None:
    result = binary_search([5, 1, 4, 2], 3, compare)
    assert 0 <= result.index <= 4


@settings(deadline=None, max_examples=150)
@given(
    st.lists(st.integers(min_value=-50, max_value=50), max_size=100).map(sorted),
    st.integers(min_value=-60, max_value=60),
)
def test_property_matches_bisect(seq: List[int], target: int) -> None:
    index, found = binary_search(seq, target, compare)
    assert index == bisect.bisect_left(seq, target)
    assert found == (target in seq)
    assert upper_bound(seq, target, compare) == bisect.bisect_right(seq, target)

    if found:
        assert seq[index] == target
    else:
        if index > 0:
            assert seq[index - 1] < target
        if index < len(seq):
            assert target < seq[index]
