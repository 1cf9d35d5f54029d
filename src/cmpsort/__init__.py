"""
cmpsort: comparator-driven sorting and searching.

    from cmpsort import Ordering, compare, reverse, sort, sort_stable, binary_search

    scores = [7, 2, 4]
    sort(scores, reverse(compare))      # scores == [7, 4, 2]
"""

from .algorithms import (
    SearchResult,
    binary_search,
    lower_bound,
    sort,
    sort_stable,
    upper_bound,
)
from .ordering import Comparator, Ordering, as_ordering, by_key, chain, compare, reverse

__version__ = "0.1.0"

__all__ = [
    "Ordering",
    "Comparator",
    "compare",
    "as_ordering",
    "reverse",
    "by_key",
    "chain",
    "sort",
    "sort_stable",
    "SearchResult",
    "binary_search",
    "lower_bound",
    "upper_bound",
]
