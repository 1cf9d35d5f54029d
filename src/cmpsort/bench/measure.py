"""
Timing harness for the in-place comparator sorts.

We measure exactly one call to `fn(seq, cmp)` per sample, using a monotonic
high-resolution clock. Copying the input, GC control and warmup happen
outside the timed block. Every sample runs on a fresh copy of the input and
its output is checked against the adjacency invariant, so a broken
algorithm shows up as status="error" rather than as a fast time.

Public API (stable):
    CountingComparator(cmp)
    time_sort_call(...) -> dict

Returned dict schema:
    {
        "algo": str,
        "repeats": int,
        "samples_ns": list[int],            # elapsed ns for each successful sample
        "comparisons": list[int],           # comparator calls for each sample
        "status": "ok" | "timeout" | "error",
        "error": str | None,                # populated if status == "error"
        "timed_out_on_repeat": int | None,  # 0-based repeat index if timeout occurred
    }
"""

from __future__ import annotations

import gc
import time
from typing import Any, Callable, Dict, List

from cmpsort.ordering import Comparator, Ordering, as_ordering
from cmpsort.validate import first_order_violation_index

__all__ = ["CountingComparator", "time_sort_call"]


class CountingComparator:
    """Comparator wrapper that counts how many times it is called."""

    def __init__(self, cmp: Comparator) -> None:
        self.cmp = cmp
        self.calls = 0

    def __call__(self, a: Any, b: Any) -> Ordering:
        self.calls += 1
        return as_ordering(self.cmp(a, b))

    def reset(self) -> None:
        self.calls = 0


def time_sort_call(
    *,
    algo_name: str,
    algo_fn: Callable[[Any, Comparator], None],
    a: List[Any],
    cmp: Comparator,
    repeats: int,
    warmup: bool,
    disable_gc: bool,
    timeout_seconds: float,
) -> Dict[str, Any]:
    """
    Time repeated calls to `algo_fn(copy_of_a, cmp)`.

    Parameters
    ----------
    algo_name : str
        Logical name of the algorithm (for records).
    algo_fn : Callable[[seq, cmp], None]
        In-place sort.
    a : list
        Input data; never handed to the algorithm directly.
    cmp : Comparator
        Comparator to sort with. It is wrapped in a CountingComparator.
    repeats : int
        Number of timed samples to collect.
    warmup : bool
        If True, make one untimed call first.
    disable_gc : bool
        If True, collect and disable Python GC during the timed loop; restore afterward.
    timeout_seconds : float
        Per-sample threshold. A sample above it sets status="timeout" and
        stops further sampling.

    Returns
    -------
    dict
        See module docstring for exact schema.
    """
    if repeats < 0:
        raise ValueError("repeats must be nonnegative")
    if timeout_seconds <= 0:
        raise ValueError("timeout_seconds must be positive")

    result: Dict[str, Any] = {
        "algo": algo_name,
        "repeats": repeats,
        "samples_ns": [],
        "comparisons": [],
        "status": "ok",
        "error": None,
        "timed_out_on_repeat": None,
    }
    counter = CountingComparator(cmp)

    if warmup and repeats > 0:
        try:
            algo_fn(list(a), counter)
        except Exception as e:
            result["status"] = "error"
            result["error"] = f"warmup failed: {e!r}"
            return result

    prev_gc_enabled = gc.isenabled()
    try:
        if disable_gc:
            gc.collect()
            gc.disable()

        threshold_ns = int(timeout_seconds * 1e9)
        for r in range(repeats):
            seq = list(a)
            counter.reset()
            try:
                t0 = time.perf_counter_ns()
                algo_fn(seq, counter)
                t1 = time.perf_counter_ns()
            except Exception as e:
                result["status"] = "error"
                result["error"] = f"run failed at repeat {r}: {e!r}"
                break

            bad = first_order_violation_index(seq, cmp)
            if bad is not None:
                result["status"] = "error"
                result["error"] = (
                    f"output out of order at repeat {r}, index {bad}: "
                    f"{seq[bad]!r} before {seq[bad + 1]!r}"
                )
                break

            elapsed = t1 - t0
            result["samples_ns"].append(int(elapsed))
            result["comparisons"].append(counter.calls)

            if elapsed > threshold_ns:
                result["status"] = "timeout"
                result["timed_out_on_repeat"] = r
                break

    finally:
        # Leave GC disabled if the caller had it disabled.
        if disable_gc and prev_gc_enabled:
            gc.enable()

    return result
