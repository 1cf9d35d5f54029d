"""
Experiment configuration.

A benchmark experiment is described by a YAML file:

    experiment_name: random_scaling
    output_dir: results
    seed: 5311
    repeats: 5
    warmup: true
    disable_gc: true
    timeout_seconds: 10
    comparator: ascending          # optional: ascending | descending
    dataset:
      dist: random
      params: {range: [0, 1000000]}
    sizes: [1000, 10000, 100000]
    algorithms:
      - name: introsort
      - name: mergesort
      - name: builtin

`load_config` validates the file and resolves algorithm and comparator
names into callables.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Tuple

import numpy as np
import yaml

from cmpsort.algorithms import ALGORITHMS
from cmpsort.datasets import SUPPORTED_DISTS, make_dataset
from cmpsort.ordering import Comparator, compare, reverse

__all__ = ["COMPARATORS", "REQUIRED_KEYS", "AlgoSpec", "ExperimentConfig", "load_config", "parse_config"]

REQUIRED_KEYS = (
    "experiment_name",
    "output_dir",
    "seed",
    "repeats",
    "warmup",
    "disable_gc",
    "timeout_seconds",
    "dataset",
    "sizes",
    "algorithms",
)

COMPARATORS: Dict[str, Comparator] = {
    "ascending": compare,
    "descending": reverse(compare),
}


@dataclass(frozen=True)
class AlgoSpec:
    name: str
    sort_fn: Callable[[Any, Comparator], None]


@dataclass(frozen=True)
class ExperimentConfig:
    experiment_name: str
    output_dir: Path
    seed: int
    repeats: int
    warmup: bool
    disable_gc: bool
    timeout_seconds: float
    dataset: Dict[str, Any]
    sizes: Tuple[int, ...]
    algorithms: Tuple[AlgoSpec, ...]
    comparator_name: str = "ascending"
    raw: Dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @property
    def comparator(self) -> Comparator:
        return COMPARATORS[self.comparator_name]


def load_config(path: Path) -> ExperimentConfig:
    with Path(path).open("r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f)
    return parse_config(cfg)


def parse_config(cfg: Any) -> ExperimentConfig:
    """
    Validate a decoded config mapping.

    Raises
    ------
    ValueError
        On missing keys or malformed values.
    KeyError
        On an algorithm name that is not registered.
    """
    if not isinstance(cfg, dict):
        raise ValueError("Experiment config must be a mapping")
    missing = [k for k in REQUIRED_KEYS if k not in cfg]
    if missing:
        raise ValueError(f"Missing required config keys: {missing}")

    try:
        repeats = int(cfg["repeats"])
        seed = int(cfg["seed"])
        timeout_seconds = float(cfg["timeout_seconds"])
    except (TypeError, ValueError) as e:
        raise ValueError(f"seed/repeats/timeout_seconds must be numeric: {e}") from e
    if repeats < 1:
        raise ValueError("Config 'repeats' must be >= 1")
    if timeout_seconds <= 0:
        raise ValueError("Config 'timeout_seconds' must be positive")

    sizes = cfg["sizes"]
    if not isinstance(sizes, list) or not sizes:
        raise ValueError("Config 'sizes' must be a non-empty list of positive integers")
    if any(not isinstance(n, int) or isinstance(n, bool) or n <= 0 for n in sizes):
        raise ValueError(f"Config 'sizes' must contain positive integers; got {sizes!r}")

    dataset = cfg["dataset"]
    if not isinstance(dataset, dict) or dataset.get("dist") not in SUPPORTED_DISTS:
        raise ValueError(
            f"Config 'dataset.dist' must be one of {sorted(SUPPORTED_DISTS)}; got {dataset!r}"
        )
    # Empty draw: rejects bad params before the runner creates any files.
    make_dataset(0, dataset, np.random.default_rng(0))

    comparator_name = cfg.get("comparator", "ascending")
    if comparator_name not in COMPARATORS:
        raise ValueError(
            f"Config 'comparator' must be one of {sorted(COMPARATORS)}; got {comparator_name!r}"
        )

    return ExperimentConfig(
        experiment_name=str(cfg["experiment_name"]),
        output_dir=Path(cfg["output_dir"]),
        seed=seed,
        repeats=repeats,
        warmup=bool(cfg["warmup"]),
        disable_gc=bool(cfg["disable_gc"]),
        timeout_seconds=timeout_seconds,
        dataset=dict(dataset),
        sizes=tuple(sizes),
        algorithms=_resolve_algorithms(cfg["algorithms"]),
        comparator_name=comparator_name,
        raw=cfg,
    )


def _resolve_algorithms(entries: Any) -> Tuple[AlgoSpec, ...]:
    if not isinstance(entries, list) or not entries:
        raise ValueError("Config 'algorithms' must be a non-empty list")
    specs: List[AlgoSpec] = []
    seen = set()
    for entry in entries:
        name = entry.get("name") if isinstance(entry, dict) else None
        if not name or not isinstance(name, str):
            raise ValueError("Each algorithm must have a string 'name' field")
        if name in seen:
            raise ValueError(f"Duplicate algorithm name in config: {name}")
        seen.add(name)
        if name not in ALGORITHMS:
            raise KeyError(f"Unknown algorithm {name!r}. Registered: {sorted(ALGORITHMS)}")
        specs.append(AlgoSpec(name=name, sort_fn=ALGORITHMS[name]))
    return tuple(specs)
