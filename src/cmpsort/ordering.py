"""
Three-way ordering primitives.

A comparator is any callable `cmp(a, b)` answering "how does `a` order
relative to `b`?" with an `Ordering`. Comparators must be strict weak
orderings; if they are not, the sorts in this package still terminate but
the resulting order is unspecified.

Public API (stable):
    Ordering                      # LESS / EQUAL / GREATER
    compare(x, y) -> Ordering     # for primitively ordered values
    as_ordering(result) -> Ordering
    reverse(cmp) -> Comparator
    by_key(key, cmp=compare) -> Comparator
    chain(*cmps) -> Comparator

Composition idioms:
- Descending order: `reverse(compare)` swaps the operands.
- Multi-field order: `chain(by_key(lambda s: s.grade), by_key(lambda s: s.name))`
  evaluates the primary key and only falls through to the next comparator
  when the previous one reports EQUAL.

Interop:
- `Ordering.to_int()` / `Ordering.from_int(n)` convert to and from the
  -1 / 0 / +1 encoding used by `cmp`-style functions elsewhere.
- Comparators may return plain numbers; `as_ordering` takes their sign.
"""

from __future__ import annotations

import enum
import math
import numbers
from typing import Any, Callable, Protocol, TypeVar, Union

__all__ = [
    "Ordering",
    "Comparator",
    "SupportsOrdering",
    "compare",
    "as_ordering",
    "reverse",
    "by_key",
    "chain",
]

T = TypeVar("T")
K = TypeVar("K")


class SupportsOrdering(Protocol):
    def __lt__(self, other: Any) -> bool: ...

    def __gt__(self, other: Any) -> bool: ...


CT = TypeVar("CT", bound=SupportsOrdering)


class Ordering(enum.Enum):
    LESS = -1
    EQUAL = 0
    GREATER = 1

    def to_int(self) -> int:
        return self.value

    @classmethod
    def from_int(cls, n: int) -> "Ordering":
        """Map any integer onto an Ordering by its sign."""
        if n < 0:
            return cls.LESS
        if n > 0:
            return cls.GREATER
        return cls.EQUAL

    def reversed(self) -> "Ordering":
        return Ordering(-self.value)


Comparator = Callable[[T, T], Union[Ordering, int, float]]


def compare(x: CT, y: CT) -> Ordering:
    """
    Three-way comparison of two values of the same ordered type.

    Returns LESS if x < y, GREATER if x > y, otherwise EQUAL.

    Floating point NaN is unordered: both `<` and `>` are False, so any
    comparison involving NaN reports EQUAL. That is not a total order and a
    sort over data containing NaN has no meaningful result; filter NaN out
    first if you need one.
    """
    if x < y:
        return Ordering.LESS
    if x > y:
        return Ordering.GREATER
    return Ordering.EQUAL


def as_ordering(result: Any) -> Ordering:
    """
    Normalise a comparator's return value.

    Accepts an Ordering, or a real number (Python or NumPy) whose sign is
    used. NaN maps to EQUAL. Anything else raises TypeError.
    """
    if isinstance(result, Ordering):
        return result
    # bool is an Integral, but a comparator answering True/False is almost
    # certainly a `<` predicate passed by mistake.
    if isinstance(result, bool) or not isinstance(result, numbers.Real):
        raise TypeError(
            f"comparator must return an Ordering or a number; got {type(result).__name__}"
        )
    if isinstance(result, numbers.Integral):
        return Ordering.from_int(int(result))
    if math.isnan(result):
        return Ordering.EQUAL
    if result < 0:
        return Ordering.LESS
    if result > 0:
        return Ordering.GREATER
    return Ordering.EQUAL


def reverse(cmp: Comparator) -> Callable[[Any, Any], Ordering]:
    """Comparator for the opposite order (operands swapped)."""

    def _reversed(a: Any, b: Any) -> Ordering:
        return as_ordering(cmp(b, a))

    return _reversed


def by_key(
    key: Callable[[T], K], cmp: Comparator = compare
) -> Callable[[T, T], Ordering]:
    """Comparator that orders elements by `cmp(key(a), key(b))`."""

    def _by_key(a: T, b: T) -> Ordering:
        return as_ordering(cmp(key(a), key(b)))

    return _by_key


def chain(*cmps: Comparator) -> Callable[[Any, Any], Ordering]:
    """
    Lexicographic composition: the first comparator that does not report
    EQUAL decides. With no comparators every pair is EQUAL.
    """

    def _chained(a: Any, b: Any) -> Ordering:
        for cmp in cmps:
            result = as_ordering(cmp(a, b))
            if result is not Ordering.EQUAL:
                return result
        return Ordering.EQUAL

    return _chained
