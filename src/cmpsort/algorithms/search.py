"""
Binary search over a sequence already sorted ascending under `cmp`.

Searching an unsorted sequence is a caller error; the result is then some
index in [0, len(seq)] with no further meaning, never an exception.

Public API (stable):
    SearchResult(index, found)
    binary_search(seq, target, cmp) -> SearchResult
    lower_bound(seq, target, cmp) -> int
    upper_bound(seq, target, cmp) -> int
"""

from __future__ import annotations

from typing import Any, NamedTuple, Sequence

from cmpsort.ordering import Comparator, Ordering, as_ordering

__all__ = ["SearchResult", "binary_search", "lower_bound", "upper_bound"]


class SearchResult(NamedTuple):
    """
    `index` is the leftmost position of a match when `found` is True,
    otherwise the insertion point that keeps `seq` sorted.
    """

    index: int
    found: bool


def lower_bound(seq: Sequence[Any], target: Any, cmp: Comparator) -> int:
    """First index p with cmp(seq[p], target) != LESS (len(seq) if none)."""
    lo, hi = 0, len(seq)
    while lo < hi:
        mid = (lo + hi) // 2
        if as_ordering(cmp(seq[mid], target)) is Ordering.LESS:
            lo = mid + 1
        else:
            hi = mid
    return lo


def upper_bound(seq: Sequence[Any], target: Any, cmp: Comparator) -> int:
    """First index p with cmp(seq[p], target) == GREATER (len(seq) if none)."""
    lo, hi = 0, len(seq)
    while lo < hi:
        mid = (lo + hi) // 2
        if as_ordering(cmp(seq[mid], target)) is Ordering.GREATER:
            hi = mid
        else:
            lo = mid + 1
    return lo


def binary_search(seq: Sequence[Any], target: Any, cmp: Comparator) -> SearchResult:
    """
    Locate `target` in sorted `seq`.

    Returns
    -------
    SearchResult
        (index, True) with the leftmost index whose element compares EQUAL
        to `target`, or (insertion_point, False) when there is none.
        O(log n) comparisons.

    Examples
    --------
    >>> from cmpsort.ordering import compare
    >>> binary_search([2, 4, 7], 4, compare)
    SearchResult(index=1, found=True)
    >>> binary_search([2, 4, 7], 5, compare)
    SearchResult(index=2, found=False)
    """
    p = lower_bound(seq, target, cmp)
    found = p < len(seq) and as_ordering(cmp(seq[p], target)) is Ordering.EQUAL
    return SearchResult(p, found)
