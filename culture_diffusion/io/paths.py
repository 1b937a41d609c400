"""Path construction helpers for flushed time-series logs.

Output names are derived from the run parameters so that repeated runs
with identical settings overwrite the same file.
"""

from __future__ import annotations

from pathlib import Path

from culture_diffusion.config.types import SimulationConfig


def run_name(interactions: int, width: int, coverage: float) -> str:
    """Return the parameter-derived run name, e.g. ``n100-w20-c1.0``."""
    return f"n{interactions}-w{width}-c{coverage:.1f}"


def config_run_name(config: SimulationConfig) -> str:
    """Return the run name for ``config``."""
    return run_name(config.interactions, config.width, config.coverage)


def series_log_path(out_dir: Path, config: SimulationConfig) -> Path:
    """Return path to the CSV time-series log."""
    return Path(out_dir) / f"log-{config_run_name(config)}.csv"


def tick_metrics_path(out_dir: Path, config: SimulationConfig) -> Path:
    """Return path to the long-format Parquet metrics log."""
    return Path(out_dir) / f"log-{config_run_name(config)}.parquet"
