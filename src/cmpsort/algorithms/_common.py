"""
Helpers shared by the in-place sorts.

Every algorithm here asks a single question of the comparator: "is `a`
strictly before `b`?". `less_than` builds that predicate once per call so
the hot loops deal in plain booleans.
"""

from __future__ import annotations

from typing import Any, Callable, MutableSequence

from cmpsort.ordering import Comparator, Ordering, as_ordering

# Ranges at or below this size are finished with insertion sort.
INSERTION_THRESHOLD = 12

LessThan = Callable[[Any, Any], bool]


def less_than(cmp: Comparator) -> LessThan:
    _less = Ordering.LESS

    def _lt(a: Any, b: Any) -> bool:
        return as_ordering(cmp(a, b)) is _less

    return _lt


def insertion_sort(seq: MutableSequence[Any], lo: int, hi: int, less: LessThan) -> None:
    """Stable insertion sort of seq[lo:hi] in place."""
    for i in range(lo + 1, hi):
        item = seq[i]
        j = i
        # Strict `less` keeps equal items behind their predecessors (stable).
        while j > lo and less(item, seq[j - 1]):
            seq[j] = seq[j - 1]
            j -= 1
        seq[j] = item
