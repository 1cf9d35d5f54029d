"""
Tests for the three-way ordering primitives and comparator composition.

Note:
- This file inserts the project `src/` onto sys.path so tests run without installing the package.
"""

from __future__ import annotations

import pathlib
import sys
from fractions import Fraction

import pytest

_REPO_ROOT = pathlib.Path(__file__).resolve().parents[1]
_SRC = _REPO_ROOT / "src"
if str(_SRC) not in sys.path:
    sys.path.insert(0, str(_SRC))

import numpy as np

from cmpsort import sort, sort_stable
from cmpsort.ordering import Ordering, as_ordering, by_key, chain, compare, reverse


@pytest.mark.parametrize(
    "x, y, expected",
    [
        (1, 2, Ordering.LESS),
        (2, 2, Ordering.EQUAL),
        (3, 2, Ordering.GREATER),
        (-1.5, 0.0, Ordering.LESS),
        ("apple", "banana", Ordering.LESS),
        ("b", "a", Ordering.GREATER),
        (b"ab", b"ab", Ordering.EQUAL),
        ((1, "z"), (1, "a"), Ordering.GREATER),
    ],
)
def test_compare(x, y, expected: Ordering) -> None:
    assert compare(x, y) is expected


def test_compare_nan_reports_equal() -> None:
    nan = float("nan")
    assert compare(nan, 1.0) is Ordering.EQUAL
    assert compare(1.0, nan) is Ordering.EQUAL
    assert compare(nan, nan) is Ordering.EQUAL


def test_ordering_int_boundary() -> None:
    assert [o.to_int() for o in Ordering] == [-1, 0, 1]
    assert Ordering.from_int(-42) is Ordering.LESS
    assert Ordering.from_int(0) is Ordering.EQUAL
    assert Ordering.from_int(7) is Ordering.GREATER
    assert Ordering.LESS.reversed() is Ordering.GREATER
    assert Ordering.EQUAL.reversed() is Ordering.EQUAL


@pytest.mark.parametrize(
    "raw, expected",
    [
        (Ordering.GREATER, Ordering.GREATER),
        (-5, Ordering.LESS),
        (0, Ordering.EQUAL),
        (0.0, Ordering.EQUAL),
        (2.5, Ordering.GREATER),
        (float("nan"), Ordering.EQUAL),
        (np.int64(3), Ordering.GREATER),
        (np.float64(-0.5), Ordering.LESS),
        (Fraction(-1, 3), Ordering.LESS),
    ],
)
def test_as_ordering(raw, expected: Ordering) -> None:
    assert as_ordering(raw) is expected


@pytest.mark.parametrize("raw", [True, False, None, "1", [0]])
def test_as_ordering_rejects_non_numbers(raw) -> None:
    with pytest.raises(TypeError):
        as_ordering(raw)


def test_reverse_swaps_operands() -> None:
    desc = reverse(compare)
    assert desc(1, 2) is Ordering.GREATER
    assert desc(2, 1) is Ordering.LESS
    assert desc(2, 2) is Ordering.EQUAL
    # Numeric comparators are normalised too
    assert reverse(lambda a, b: a - b)(10, 3) is Ordering.LESS


def test_by_key() -> None:
    by_len = by_key(len)
    assert by_len("kiwi", "peach") is Ordering.LESS
    assert by_key(len, reverse(compare))("kiwi", "peach") is Ordering.GREATER


def test_chain_first_non_equal_wins() -> None:
    students = [("Bob", 90), ("alice", 85), ("Charlie", 85), ("David", 90)]
    by_grade_desc_then_name = chain(
        by_key(lambda s: s[1], reverse(compare)),
        by_key(lambda s: s[0].lower()),
    )
    for sort_fn in (sort, sort_stable):
        seq = list(students)
        sort_fn(seq, by_grade_desc_then_name)
        assert seq == [("Bob", 90), ("David", 90), ("alice", 85), ("Charlie", 85)]


def test_empty_chain_is_all_equal() -> None:
    assert chain()(1, 2) is Ordering.EQUAL
