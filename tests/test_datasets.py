"""
Tests for the dataset generators.

Note:
- This file inserts the project `src/` onto sys.path so tests run without installing the package.
"""

from __future__ import annotations

import pathlib
import sys

import pytest

_REPO_ROOT = pathlib.Path(__file__).resolve().parents[1]
_SRC = _REPO_ROOT / "src"
if str(_SRC) not in sys.path:
    sys.path.insert(0, str(_SRC))

import numpy as np

from cmpsort.datasets import SUPPORTED_DISTS, make_dataset

SPECS = {
    "random": {"dist": "random", "params": {"range": [-5, 5]}},
    "sorted": {"dist": "sorted"},
    "reversed": {"dist": "reversed", "params": {}},
    "nearly_sorted": {"dist": "nearly_sorted", "params": {"swap_frac": 0.1}},
    "few_uniques": {"dist": "few_uniques", "params": {"k": 4, "range": [0, 1000]}},
    "organ_pipe": {"dist": "organ_pipe"},
    "sawtooth": {"dist": "sawtooth", "params": {"period": 5}},
}


def test_every_dist_has_a_spec() -> None:
    assert set(SPECS) == set(SUPPORTED_DISTS)


@pytest.mark.parametrize("name", sorted(SPECS))
@pytest.mark.parametrize("n", [0, 1, 2, 17, 500])
def test_length_and_type(name: str, n: int) -> None:
    out = make_dataset(n, SPECS[name], np.random.default_rng(0))
    assert len(out) == n
    assert all(type(x) is int for x in out)


@pytest.mark.parametrize("name", sorted(SPECS))
def test_same_seed_same_data(name: str) -> None:
    a = make_dataset(300, SPECS[name], np.random.default_rng(42))
    b = make_dataset(300, SPECS[name], np.random.default_rng(42))
    assert a == b


def test_random_range_is_inclusive() -> None:
    out = make_dataset(2000, SPECS["random"], np.random.default_rng(1))
    assert min(out) == -5
    assert max(out) == 5


def test_deterministic_shapes() -> None:
    rng = np.random.default_rng(0)
    assert make_dataset(5, SPECS["sorted"], rng) == [0, 1, 2, 3, 4]
    assert make_dataset(5, SPECS["reversed"], rng) == [4, 3, 2, 1, 0]
    assert make_dataset(5, SPECS["organ_pipe"], rng) == [0, 1, 2, 1, 0]
    assert make_dataset(6, SPECS["organ_pipe"], rng) == [0, 1, 2, 2, 1, 0]
    assert make_dataset(7, SPECS["sawtooth"], rng) == [0, 1, 2, 3, 4, 0, 1]


def test_nearly_sorted_is_a_permutation() -> None:
    out = make_dataset(1000, SPECS["nearly_sorted"], np.random.default_rng(3))
    assert sorted(out) == list(range(1000))
    assert out != list(range(1000))


def test_nearly_sorted_zero_swaps() -> None:
    spec = {"dist": "nearly_sorted", "params": {"swap_frac": 0.0}}
    assert make_dataset(50, spec, np.random.default_rng(3)) == list(range(50))


def test_few_uniques_caps_distinct_values() -> None:
    out = make_dataset(1000, SPECS["few_uniques"], np.random.default_rng(7))
    assert len(set(out)) <= 4
    assert all(0 <= x <= 1000 for x in out)


@pytest.mark.parametrize(
    "n, spec",
    [
        (-1, {"dist": "sorted"}),
        (1.5, {"dist": "sorted"}),
        (10, "random"),
        (10, {"dist": "bogus"}),
        (10, {"dist": "random"}),
        (10, {"dist": "random", "params": {"range": [5, 1]}}),
        (10, {"dist": "random", "params": {"range": [0, "9"]}}),
        (10, {"dist": "random", "params": {"range": [0]}}),
        (10, {"dist": "nearly_sorted", "params": {"swap_frac": 1.5}}),
        (10, {"dist": "nearly_sorted", "params": {"swap_frac": "lots"}}),
        (10, {"dist": "few_uniques", "params": {}}),
        (10, {"dist": "few_uniques", "params": {"k": 0}}),
        (10, {"dist": "sawtooth", "params": {"period": 0}}),
        (10, {"dist": "sorted", "params": [1, 2]}),
    ],
)
def test_invalid_inputs_raise(n, spec) -> None:
    with pytest.raises(ValueError):
        make_dataset(n, spec, np.random.default_rng(0))
