"""
Unstable in-place sort: introsort.

Strategy
--------
- Quicksort with a median-of-three pivot for the common case.
- After each partition we recurse into the *smaller* side and loop on the
  larger one, so the call stack is O(log n) deep.
- A depth budget of 2 * bit_length(n) partitions; once a range exhausts it
  the range is finished with heapsort, bounding the worst case at
  O(n log n) comparisons even on adversarial inputs.
- Ranges of at most INSERTION_THRESHOLD elements are finished with
  insertion sort.

Termination does not depend on the comparator being well behaved: every
scan is bounded by explicit index checks and every partition removes the
pivot from further work.

Public API (stable):
    sort(seq, cmp) -> None
"""

from __future__ import annotations

from typing import Any, MutableSequence

from cmpsort.algorithms._common import (
    INSERTION_THRESHOLD,
    LessThan,
    insertion_sort,
    less_than,
)
from cmpsort.ordering import Comparator

__all__ = ["sort"]


def sort(seq: MutableSequence[Any], cmp: Comparator) -> None:
    """
    Sort `seq` in place so that cmp(seq[i], seq[i+1]) is never GREATER.

    Parameters
    ----------
    seq : MutableSequence
        Caller-owned sequence; reordered in place.
    cmp : Comparator
        Three-way comparator; must be a strict weak ordering.

    Notes
    -----
    Elements that compare EQUAL may end up in any relative order. Use
    `sort_stable` when that matters.
    """
    n = len(seq)
    if n < 2:
        return
    _introsort(seq, 0, n, 2 * n.bit_length(), less_than(cmp))


def _introsort(seq: MutableSequence[Any], lo: int, hi: int, depth: int, less: LessThan) -> None:
    while hi - lo > INSERTION_THRESHOLD:
        if depth == 0:
            _heapsort(seq, lo, hi, less)
            return
        depth -= 1
        p = _partition(seq, lo, hi, less)
        # Pivot is final at p; sort [lo, p) and [p + 1, hi).
        if p - lo < hi - (p + 1):
            _introsort(seq, lo, p, depth, less)
            lo = p + 1
        else:
            _introsort(seq, p + 1, hi, depth, less)
            hi = p
    insertion_sort(seq, lo, hi, less)


def _median_of_three(seq: MutableSequence[Any], a: int, b: int, c: int, less: LessThan) -> None:
    """Order seq[a], seq[b], seq[c] so the median sits at b."""
    if less(seq[b], seq[a]):
        seq[a], seq[b] = seq[b], seq[a]
    if less(seq[c], seq[b]):
        seq[b], seq[c] = seq[c], seq[b]
        if less(seq[b], seq[a]):
            seq[a], seq[b] = seq[b], seq[a]


def _partition(seq: MutableSequence[Any], lo: int, hi: int, less: LessThan) -> int:
    """
    Partition seq[lo:hi] around a median-of-three pivot and return the
    pivot's final index p: nothing in [lo, p) is after the pivot and nothing
    in (p, hi) is before it.

    Both scans stop on elements equal to the pivot, which spreads runs of
    duplicates across the two sides instead of producing a lopsided split.
    """
    mid = lo + (hi - lo) // 2
    _median_of_three(seq, lo, mid, hi - 1, less)
    seq[lo], seq[mid] = seq[mid], seq[lo]
    pivot = seq[lo]

    i, j = lo + 1, hi - 1
    while True:
        while i <= j and less(seq[i], pivot):
            i += 1
        while i <= j and less(pivot, seq[j]):
            j -= 1
        if i >= j:
            break
        seq[i], seq[j] = seq[j], seq[i]
        i += 1
        j -= 1

    seq[lo], seq[j] = seq[j], seq[lo]
    return j


def _heapsort(seq: MutableSequence[Any], lo: int, hi: int, less: LessThan) -> None:
    n = hi - lo
    for root in range(n // 2 - 1, -1, -1):
        _sift_down(seq, lo, root, n, less)
    for end in range(n - 1, 0, -1):
        seq[lo], seq[lo + end] = seq[lo + end], seq[lo]
        _sift_down(seq, lo, 0, end, less)


def _sift_down(seq: MutableSequence[Any], base: int, root: int, size: int, less: LessThan) -> None:
    # Max-heap over seq[base:base + size], heap indices relative to base.
    while True:
        child = 2 * root + 1
        if child >= size:
            return
        if child + 1 < size and less(seq[base + child], seq[base + child + 1]):
            child += 1
        if not less(seq[base + root], seq[base + child]):
            return
        seq[base + root], seq[base + child] = seq[base + child], seq[base + root]
        root = child
