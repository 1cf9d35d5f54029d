"""
Stable in-place sort: bottom-up merge sort.

- Split the sequence into runs of INSERTION_THRESHOLD elements and
  insertion-sort each run (insertion sort is stable).
- Merge neighbouring runs pairwise, doubling the run width each pass.
- Each merge copies only the left run into an auxiliary buffer owned by
  this call (O(n) extra space) and writes the merged output back into
  `seq`; the right run is consumed where it lies.
- On ties the left run wins, so equal elements keep their input order.
- Neighbouring runs that are already in order are skipped, so already
  sorted input costs one comparison per merge past the run phase.

Public API (stable):
    sort_stable(seq, cmp) -> None
"""

from __future__ import annotations

from typing import Any, List, MutableSequence

from cmpsort.algorithms._common import (
    INSERTION_THRESHOLD,
    LessThan,
    insertion_sort,
    less_than,
)
from cmpsort.ordering import Comparator

__all__ = ["sort_stable"]


def sort_stable(seq: MutableSequence[Any], cmp: Comparator) -> None:
    """
    Stable in-place sort of `seq` under `cmp`.

    Equal elements (cmp reports EQUAL) keep their original relative
    positions. O(n log n) comparisons worst case, O(n) auxiliary space.
    """
    n = len(seq)
    if n < 2:
        return
    less = less_than(cmp)

    for lo in range(0, n, INSERTION_THRESHOLD):
        insertion_sort(seq, lo, min(lo + INSERTION_THRESHOLD, n), less)
    if n <= INSERTION_THRESHOLD:
        return

    buf: List[Any] = [None] * n
    width = INSERTION_THRESHOLD
    while width < n:
        for lo in range(0, n - width, 2 * width):
            _merge(seq, buf, lo, lo + width, min(lo + 2 * width, n), less)
        width *= 2


def _merge(
    seq: MutableSequence[Any],
    buf: List[Any],
    lo: int,
    mid: int,
    hi: int,
    less: LessThan,
) -> None:
    """Merge sorted seq[lo:mid] and seq[mid:hi] into seq[lo:hi]."""
    if not less(seq[mid], seq[mid - 1]):
        return

    for t in range(lo, mid):
        buf[t] = seq[t]

    i, j, k = lo, mid, lo
    while i < mid and j < hi:
        # Take from the right only when strictly smaller: ties keep left first.
        if less(seq[j], buf[i]):
            seq[k] = seq[j]
            j += 1
        else:
            seq[k] = buf[i]
            i += 1
        k += 1

    # Whatever is left of the right run is already in place.
    while i < mid:
        seq[k] = buf[i]
        i += 1
        k += 1
