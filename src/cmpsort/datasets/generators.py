"""
Dataset generators for the comparator sort benchmarks and tests.

Distributions:
- "random":        uniform integers from params["range"] (inclusive, required).
- "sorted":        [0, 1, ..., n-1].
- "reversed":      [n-1, ..., 0].
- "nearly_sorted": sorted, then ceil(swap_frac * n) random index swaps
                   (params["swap_frac"] in [0.0, 1.0], default 0.05).
- "few_uniques":   values drawn from at most k distinct integers
                   (params["k"] >= 1, required; optional inclusive
                   params["range"], default [0, 4294967295]).
- "organ_pipe":    ascending to the middle, then descending. A classic
                   stress input for naive quicksort pivots.
- "sawtooth":      repeating ramps [0, 1, ..., period-1, 0, 1, ...]
                   (params["period"] >= 1, default 16). Lots of ties.

Public API (stable):
    make_dataset(n: int, spec: dict, rng: numpy.random.Generator) -> list[int]

Conventions:
- Returns a plain Python `list[int]`; the sorts never see NumPy types.
- The caller owns and seeds the RNG. Deterministic shapes ignore it.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Tuple

import numpy as np

__all__ = ["SUPPORTED_DISTS", "make_dataset"]

_DEFAULT_FEW_UNIQUES_RANGE = (0, 4294967295)


def make_dataset(n: int, spec: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    """
    Generate an integer dataset according to `spec`, using the provided RNG.

    Parameters
    ----------
    n : int
        Number of elements to generate. Must be >= 0.
    spec : dict
        {"dist": <one of SUPPORTED_DISTS>, "params": {...}}; see module docs.
    rng : numpy.random.Generator
        Random number generator owned by the caller (seeded upstream).

    Returns
    -------
    list[int]
        A list of length `n`.

    Raises
    ------
    ValueError
        If `n`, `spec` or the distribution's params are invalid.
    """
    if not isinstance(n, (int, np.integer)) or isinstance(n, bool):
        raise ValueError("n must be an int")
    if n < 0:
        raise ValueError("n must be nonnegative")
    if not isinstance(spec, dict):
        raise ValueError("spec must be a dict")

    dist = spec.get("dist")
    if dist not in _GENERATORS:
        raise ValueError(
            f"Unsupported dataset dist: {dist!r}. Supported: {sorted(SUPPORTED_DISTS)}"
        )
    params = spec.get("params") or {}
    if not isinstance(params, dict):
        raise ValueError(f"{dist}.params must be a dict")

    return _GENERATORS[dist](int(n), params, rng)


# ------------------------- generators ------------------------- #


def _random(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    if "range" not in params:
        raise ValueError("random.params.range must be provided as [min, max] (inclusive)")
    lo, hi = _parse_range("random", params["range"])
    # Generator.integers is half-open; +1 makes `hi` inclusive.
    return rng.integers(lo, hi + 1, size=n, dtype=np.int64).tolist()


def _sorted(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    return list(range(n))


def _reversed(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    return list(range(n - 1, -1, -1))


def _nearly_sorted(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    raw = params.get("swap_frac", 0.05)
    try:
        swap_frac = float(raw)
    except (TypeError, ValueError) as e:
        raise ValueError(
            f"nearly_sorted.params.swap_frac must be a float in [0.0, 1.0]; got {raw!r}"
        ) from e
    if not 0.0 <= swap_frac <= 1.0:
        raise ValueError(f"nearly_sorted.params.swap_frac must be in [0.0, 1.0]; got {swap_frac}")

    out = list(range(n))
    swaps = int(np.ceil(swap_frac * n))
    if n == 0 or swaps == 0:
        return out
    pairs = rng.integers(0, n, size=(swaps, 2))
    for i, j in pairs.tolist():
        out[i], out[j] = out[j], out[i]
    return out


def _few_uniques(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    k = params.get("k")
    if not isinstance(k, int) or isinstance(k, bool) or k < 1:
        raise ValueError(f"few_uniques.params.k must be an integer >= 1; got {k!r}")
    lo, hi = _DEFAULT_FEW_UNIQUES_RANGE
    if "range" in params:
        lo, hi = _parse_range("few_uniques", params["range"])
    if n == 0:
        return []

    k = min(k, n, hi - lo + 1)
    # Draw the distinct values with the caller's RNG to keep runs reproducible.
    values: List[int] = []
    seen = set()
    while len(values) < k:
        for v in rng.integers(lo, hi + 1, size=2 * (k - len(values)), dtype=np.int64).tolist():
            if v not in seen:
                seen.add(v)
                values.append(v)
                if len(values) == k:
                    break
    return [values[i] for i in rng.integers(0, k, size=n).tolist()]


def _organ_pipe(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    half = (n + 1) // 2
    return list(range(half)) + list(range(n - half - 1, -1, -1))


def _sawtooth(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    period = params.get("period", 16)
    if not isinstance(period, int) or isinstance(period, bool) or period < 1:
        raise ValueError(f"sawtooth.params.period must be an integer >= 1; got {period!r}")
    return [i % period for i in range(n)]


_GENERATORS: Dict[str, Callable[[int, Dict[str, Any], np.random.Generator], List[int]]] = {
    "random": _random,
    "sorted": _sorted,
    "reversed": _reversed,
    "nearly_sorted": _nearly_sorted,
    "few_uniques": _few_uniques,
    "organ_pipe": _organ_pipe,
    "sawtooth": _sawtooth,
}

SUPPORTED_DISTS = frozenset(_GENERATORS)


# ------------------------- helpers ------------------------- #


def _parse_range(dist: str, spec: Any) -> Tuple[int, int]:
    """Validate an inclusive [min, max] integer pair."""
    if not isinstance(spec, (list, tuple)) or len(spec) != 2:
        raise ValueError(f"{dist}.params.range must be a 2-element list/tuple [min, max]")
    lo_raw, hi_raw = spec
    if not _is_int_like(lo_raw) or not _is_int_like(hi_raw):
        raise ValueError(f"{dist}.params.range values must be integers")
    lo, hi = int(lo_raw), int(hi_raw)
    if lo > hi:
        raise ValueError(f"{dist}.params.range invalid: min > max ({lo} > {hi})")
    return lo, hi


def _is_int_like(x: Any) -> bool:
    # Accept Python ints and NumPy integer types, not bools
    return isinstance(x, (int, np.integer)) and not isinstance(x, bool)
