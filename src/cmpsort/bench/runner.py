"""
Experiment runner: orchestrates a full benchmarking sweep from a YAML config.

Usage (from repo root):
    cmpsort-bench experiments/configs/01_random_scaling.yaml
    python -m cmpsort.bench.runner experiments/configs/01_random_scaling.yaml

Outputs in a new run directory:
    - config_resolved.yaml    # the config we actually used
    - meta.json               # environment info (python, numpy, cpu/ram, git commit)
    - results.jsonl           # one JSON line per timing sample or failure
    - summary.csv             # median + IQR time and median comparisons per (algo, n)
    - (console) rich/tqdm summaries

Design notes:
- For each size n, we generate ONE dataset and give the same input to every algorithm.
- The harness copies inputs, handles warmup/GC and validates each output.
- On timeout/error for an algorithm at size n, we skip larger sizes for that algo.
"""

from __future__ import annotations

import argparse
import datetime as _dt
import json
import os
import platform
import subprocess
from pathlib import Path
from typing import Any, Dict, List, Optional

import numpy as np
import pandas as pd
import psutil
import yaml
from rich.console import Console
from rich.table import Table
from tqdm import tqdm

from cmpsort import __version__
from cmpsort.bench.config import ExperimentConfig, load_config
from cmpsort.bench.measure import time_sort_call
from cmpsort.datasets import make_dataset
from cmpsort.validate import ORACLE_NAME

__all__ = ["run_experiment", "main"]

_console = Console()

_SUMMARY_COLUMNS = [
    "algo",
    "n",
    "samples_ok",
    "median_ns",
    "iqr_ns",
    "min_ns",
    "max_ns",
    "median_comparisons",
]


# ------------------------- helpers: IO & meta ------------------------- #

def _write_yaml(obj: Dict[str, Any], path: Path) -> None:
    with path.open("w", encoding="utf-8") as f:
        yaml.safe_dump(obj, f, sort_keys=False)


def _append_jsonl(obj: Dict[str, Any], path: Path) -> None:
    with path.open("a", encoding="utf-8") as f:
        f.write(json.dumps(obj, separators=(",", ":"), ensure_ascii=False))
        f.write("\n")


def _ensure_run_dir(base_dir: Path, experiment_name: str) -> Path:
    base_dir.mkdir(parents=True, exist_ok=True)
    stamp = _dt.datetime.now().strftime("%Y%m%d_%H%M%S_%f")
    run_dir = base_dir / f"{stamp}_{experiment_name}"
    run_dir.mkdir(parents=False, exist_ok=False)
    return run_dir


def _git_commit_short() -> Optional[str]:
    try:
        out = subprocess.check_output(
            ["git", "rev-parse", "--short", "HEAD"], stderr=subprocess.DEVNULL
        )
    except (OSError, subprocess.CalledProcessError):
        return None
    return out.decode("utf-8").strip()


def _gather_meta() -> Dict[str, Any]:
    return {
        "cmpsort": __version__,
        "oracle": ORACLE_NAME,
        "python": platform.python_version(),
        "numpy": np.__version__,
        "pandas": pd.__version__,
        "psutil": psutil.__version__,
        "git_commit": _git_commit_short(),
        "machine": {
            "cpu": platform.processor() or platform.machine(),
            "cores_logical": psutil.cpu_count(logical=True),
            "cores_physical": psutil.cpu_count(logical=False),
            "ram_gb": round(psutil.virtual_memory().total / (1024**3), 2),
            "platform": platform.platform(),
        },
        "start_time": _dt.datetime.now().isoformat(timespec="seconds"),
        "pid": os.getpid(),
        "cwd": str(Path.cwd()),
    }


# ------------------------- aggregation & display ------------------------- #

def _aggregate_summary(jsonl_path: Path) -> pd.DataFrame:
    if not jsonl_path.exists():
        return pd.DataFrame(columns=_SUMMARY_COLUMNS)
    df = pd.read_json(jsonl_path, lines=True)
    if "time_ns" not in df.columns:
        return pd.DataFrame(columns=_SUMMARY_COLUMNS)
    # Failure records carry no time_ns
    df = df[df["time_ns"].notna()]
    if df.empty:
        return pd.DataFrame(columns=_SUMMARY_COLUMNS)

    grouped = df.groupby(["algo", "n"])
    out = grouped.agg(
        samples_ok=("time_ns", "count"),
        median_ns=("time_ns", "median"),
        min_ns=("time_ns", "min"),
        max_ns=("time_ns", "max"),
        median_comparisons=("comparisons", "median"),
    )
    out["iqr_ns"] = grouped["time_ns"].quantile(0.75) - grouped["time_ns"].quantile(0.25)
    out = out.reset_index()
    int_cols = ["median_ns", "iqr_ns", "min_ns", "max_ns", "median_comparisons"]
    out[int_cols] = out[int_cols].astype("int64")
    return out[_SUMMARY_COLUMNS].sort_values(["algo", "n"], ignore_index=True)


def _format_cell(median_ns: int, iqr_ns: int, comparisons: int) -> str:
    return f"{median_ns / 1e6:.2f} ± {iqr_ns / 1e6:.2f} ms\n{comparisons:,} cmp"


def _print_rich_summary(summary: pd.DataFrame, sizes: List[int]) -> None:
    table = Table(title="Benchmark Summary (median ± IQR, median comparisons)")
    table.add_column("Algorithm", style="bold")
    # first / middle / last size
    picks = sorted({sizes[0], sizes[len(sizes) // 2], sizes[-1]})
    for n in picks:
        table.add_column(f"n={n}", justify="right")

    for algo in summary["algo"].unique():
        row = [f"[bold]{algo}[/]"]
        for n in picks:
            s = summary[(summary["algo"] == algo) & (summary["n"] == n)]
            if s.empty:
                row.append("—")
            else:
                rec = s.iloc[0]
                row.append(
                    _format_cell(int(rec["median_ns"]), int(rec["iqr_ns"]), int(rec["median_comparisons"]))
                )
        table.add_row(*row)
    _console.print()
    _console.print(table)
    _console.print()


# ------------------------- core runner ------------------------- #

def run_experiment(config_path: Path, *, progress: bool = True) -> Path:
    cfg: ExperimentConfig = load_config(config_path)

    run_dir = _ensure_run_dir(cfg.output_dir, cfg.experiment_name)
    results_path = run_dir / "results.jsonl"
    summary_path = run_dir / "summary.csv"
    meta_path = run_dir / "meta.json"
    cfg_resolved_path = run_dir / "config_resolved.yaml"

    resolved = dict(cfg.raw)
    resolved.setdefault("comparator", cfg.comparator_name)
    _write_yaml(resolved, cfg_resolved_path)
    with meta_path.open("w", encoding="utf-8") as f:
        json.dump(_gather_meta(), f, indent=2)

    rng = np.random.default_rng(cfg.seed)
    cmp = cfg.comparator
    skipped = {a.name: False for a in cfg.algorithms}

    _console.print(f"[bold green]Run directory:[/bold green] {run_dir}")
    _console.print(f"[bold]Experiment:[/bold] {cfg.experiment_name}")
    _console.print(f"[bold]Algorithms:[/bold] {', '.join(a.name for a in cfg.algorithms)}")
    _console.print(f"[bold]Comparator:[/bold] {cfg.comparator_name}")

    for n in tqdm(cfg.sizes, desc="Sizes", unit="n", disable=not progress):
        base_a = make_dataset(n, cfg.dataset, rng)

        for algo in cfg.algorithms:
            if skipped[algo.name]:
                continue

            res = time_sort_call(
                algo_name=algo.name,
                algo_fn=algo.sort_fn,
                a=base_a,
                cmp=cmp,
                repeats=cfg.repeats,
                warmup=cfg.warmup,
                disable_gc=cfg.disable_gc,
                timeout_seconds=cfg.timeout_seconds,
            )

            for trial, (t_ns, comparisons) in enumerate(zip(res["samples_ns"], res["comparisons"])):
                _append_jsonl(
                    {
                        "algo": algo.name,
                        "n": n,
                        "dataset": cfg.dataset,
                        "comparator": cfg.comparator_name,
                        "trial": trial,
                        "time_ns": t_ns,
                        "comparisons": comparisons,
                    },
                    results_path,
                )

            status = res["status"]
            if status == "ok":
                continue
            skipped[algo.name] = True
            record: Dict[str, Any] = {"algo": algo.name, "n": n, "status": status}
            if status == "timeout":
                record["timed_out_on_repeat"] = res["timed_out_on_repeat"]
            else:
                record["error"] = res["error"]
            _append_jsonl(record, results_path)
            _console.print(f"[yellow]{algo.name}[/yellow] {status} at n={n}; skipping larger sizes")

    summary_df = _aggregate_summary(results_path)
    summary_df.to_csv(summary_path, index=False)
    _print_rich_summary(summary_df, list(cfg.sizes))

    _console.print("[bold green]Done.[/bold green] Wrote:")
    for path in (results_path, summary_path, meta_path, cfg_resolved_path):
        _console.print(f" - {path}")

    return run_dir


# ------------------------- CLI ------------------------- #

def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Run a comparator sort benchmark from a YAML config.")
    p.add_argument("config", type=str, help="Path to YAML experiment config")
    p.add_argument("--no-progress", action="store_true", help="Disable the tqdm progress bar")
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    config_path = Path(args.config).resolve()
    if not config_path.exists():
        raise SystemExit(f"Config file not found: {config_path}")
    try:
        run_experiment(config_path, progress=not args.no_progress)
    except Exception as e:
        _console.print(f"[bold red]Runner failed:[/bold red] {e!r}")
        raise


if __name__ == "__main__":
    main()
