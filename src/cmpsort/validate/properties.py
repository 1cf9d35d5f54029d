"""
Property helpers for validating sorting results.

These functions provide lightweight checks used by the tests and by the
benchmark runner, which validates every timed output.

Public API (stable):
    is_sorted(xs, cmp) -> bool
    first_order_violation_index(xs, cmp) -> int | None
    is_permutation(a, b) -> bool
    permutation_counter_diff(a, b) -> dict
    is_stable(tagged, cmp) -> bool
    assert_no_mutation(before, after) -> None

Notes
-----
- Ordering checks go through the comparator, so they work for any element
  type the sorts accept.
- The permutation checks count elements with `collections.Counter`, so they
  need hashable elements.
- Stability cannot be read off values alone when equal keys are
  indistinguishable. `is_stable` therefore expects `(value, original_index)`
  pairs and checks that tied values appear with increasing indices.
"""

from __future__ import annotations

from collections import Counter
from typing import Any, Dict, Hashable, Sequence, Tuple

from cmpsort.ordering import Comparator, Ordering, as_ordering

__all__ = [
    "is_sorted",
    "first_order_violation_index",
    "is_permutation",
    "permutation_counter_diff",
    "is_stable",
    "assert_no_mutation",
]


def is_sorted(xs: Sequence[Any], cmp: Comparator) -> bool:
    """Return True iff cmp(xs[i], xs[i+1]) is never GREATER."""
    return first_order_violation_index(xs, cmp) is None


def first_order_violation_index(xs: Sequence[Any], cmp: Comparator) -> int | None:
    """
    Return the first index i where cmp(xs[i], xs[i+1]) is GREATER, or None.

    Useful for precise error messages:
        i = first_order_violation_index(out, compare)
        assert i is None, f"out of order at i={i}: {out[i]} > {out[i+1]}"
    """
    for i in range(len(xs) - 1):
        if as_ordering(cmp(xs[i], xs[i + 1])) is Ordering.GREATER:
            return i
    return None


def is_permutation(a: Sequence[Hashable], b: Sequence[Hashable]) -> bool:
    """Return True iff `a` and `b` contain exactly the same multiset of values."""
    if len(a) != len(b):
        return False
    return Counter(a) == Counter(b)


def permutation_counter_diff(a: Sequence[Hashable], b: Sequence[Hashable]) -> Dict[Hashable, int]:
    """
    Return a dict of value -> count difference (count_a - count_b).

    Empty dict means `a` and `b` have identical multiplicities.
    """
    diff = Counter(a)
    diff.subtract(Counter(b))
    return {k: d for k, d in diff.items() if d != 0}


def is_stable(tagged: Sequence[Tuple[Any, int]], cmp: Comparator) -> bool:
    """
    Check tie order in a sorted list of `(value, original_index)` pairs.

    `cmp` compares the values only. Returns True iff every adjacent pair whose
    values compare EQUAL keeps its original indices increasing. Adjacent
    checks suffice because EQUAL elements are contiguous in sorted output.
    """
    for (x, ix), (y, iy) in zip(tagged, tagged[1:]):
        if as_ordering(cmp(x, y)) is Ordering.EQUAL and ix > iy:
            return False
    return True


def assert_no_mutation(before: Sequence[Any], after: Sequence[Any]) -> None:
    """
    Assert that two sequences are element-wise equal, e.g. that the oracle
    left its input alone.

    Raises AssertionError naming the first differing index.
    """
    if len(before) != len(after):
        raise AssertionError(
            f"Input mutated: length changed from {len(before)} to {len(after)}"
        )
    for i, (x, y) in enumerate(zip(before, after)):
        if x != y:
            raise AssertionError(f"Input mutated at index {i}: before={x!r}, after={y!r}")
