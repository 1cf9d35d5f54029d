"""
Algorithms package public API.

Re-exports the sorts and the search so callers can write:
    from cmpsort.algorithms import sort, sort_stable, binary_search

`ALGORITHMS` maps the names used in benchmark configs to in-place sort
callables with the signature `fn(seq, cmp) -> None`. "builtin" is the
interpreter's own stable sort driven through `functools.cmp_to_key`, kept
as a baseline.
"""

from __future__ import annotations

import functools
from typing import Any, Callable, Dict, List

from cmpsort.ordering import Comparator, as_ordering

from ._common import INSERTION_THRESHOLD
from .introsort import sort
from .mergesort import sort_stable
from .search import SearchResult, binary_search, lower_bound, upper_bound


def builtin_sort(seq: List[Any], cmp: Comparator) -> None:
    seq.sort(key=functools.cmp_to_key(lambda a, b: as_ordering(cmp(a, b)).to_int()))


ALGORITHMS: Dict[str, Callable[[Any, Comparator], None]] = {
    "introsort": sort,
    "mergesort": sort_stable,
    "builtin": builtin_sort,
}

# Algorithms that keep EQUAL elements in input order.
STABLE_ALGORITHMS = frozenset({"mergesort", "builtin"})

__all__ = [
    "INSERTION_THRESHOLD",
    "sort",
    "sort_stable",
    "builtin_sort",
    "SearchResult",
    "binary_search",
    "lower_bound",
    "upper_bound",
    "ALGORITHMS",
    "STABLE_ALGORITHMS",
]
