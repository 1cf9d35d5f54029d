"""
Benchmark harness public API.

    from cmpsort.bench import CountingComparator, time_sort_call, load_config
"""

from .config import AlgoSpec, ExperimentConfig, load_config, parse_config
from .measure import CountingComparator, time_sort_call

__all__ = [
    "AlgoSpec",
    "ExperimentConfig",
    "load_config",
    "parse_config",
    "CountingComparator",
    "time_sort_call",
]
