"""
Oracle for sorting correctness.

We use Python's built-in `sorted()` driven through `functools.cmp_to_key` as
the ground truth:
- Deterministic and portable
- Stable, so for a valid comparator its output is exactly what
  `sort_stable` must produce (ties in input order)

Public API (stable):
    oracle_sort(a: Sequence[T], cmp) -> list[T]
    equals_oracle(a: Sequence[T], out: Sequence[T], cmp) -> bool

Conventions:
- The oracle never mutates its input and always returns a **new** list.
- `equals_oracle` is the right check for stable sorts. Unstable sorts only
  have to agree with it up to the order of EQUAL elements; compare them
  with `is_sorted` + `is_permutation` instead.
"""

from __future__ import annotations

import functools
from typing import List, Sequence, TypeVar

from cmpsort.ordering import Comparator, as_ordering

ORACLE_NAME: str = "python_sorted_cmp_to_key"

__all__ = ["ORACLE_NAME", "oracle_sort", "equals_oracle"]

T = TypeVar("T")


def oracle_sort(a: Sequence[T], cmp: Comparator) -> List[T]:
    """
    Return the ground-truth stable ordering of `a` under `cmp`.

    Parameters
    ----------
    a : sequence
        Input items. The oracle does not mutate `a`.
    cmp : Comparator
        Three-way comparator (Ordering or numeric result).

    Returns
    -------
    list
        A new list with the same elements as `a`, stably sorted.
    """
    return sorted(a, key=functools.cmp_to_key(lambda x, y: as_ordering(cmp(x, y)).to_int()))


def equals_oracle(a: Sequence[T], out: Sequence[T], cmp: Comparator) -> bool:
    """True iff `out` is exactly `oracle_sort(a, cmp)`, tie order included."""
    return list(out) == oracle_sort(a, cmp)
