"""Matplotlib rendering of recorded time-series logs."""

from __future__ import annotations

import csv
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np

from culture_diffusion.io.schemas import SERIES_LABELS

METRIC_LABELS: dict[str, str] = {
    "distance": "Average feature distance",
    "change": "Exchanges per width",
    "unique": "Unique cultures",
}
METRIC_COLORS: dict[str, str] = {
    "distance": "tab:blue",
    "change": "tab:orange",
    "unique": "tab:green",
}


def load_series_log(csv_path: Path) -> dict[str, np.ndarray]:
    """Read a three-row CSV log into label -> values arrays.

    Raises ``ValueError`` when a row label is unknown or a series is missing.
    """
    series: dict[str, np.ndarray] = {}
    with Path(csv_path).open(newline="") as handle:
        for row in csv.reader(handle):
            if not row:
                continue
            label, *values = row
            if label not in SERIES_LABELS:
                raise ValueError(f"Unknown series label in {csv_path}: {label!r}")
            series[label] = np.array([int(v) for v in values], dtype=np.int64)
    missing = [label for label in SERIES_LABELS if label not in series]
    if missing:
        raise ValueError(f"Missing series in {csv_path}: {', '.join(missing)}")
    return series


def render_series_log(csv_path: Path, output_path: Path, title: str | None = None) -> Path:
    """Plot the three recorded series as stacked panels sharing the tick axis."""
    series = load_series_log(csv_path)
    fig, axes = plt.subplots(len(SERIES_LABELS), 1, figsize=(7, 8), sharex=True, squeeze=False)

    for idx, label in enumerate(SERIES_LABELS):
        ax = axes[idx, 0]
        values = series[label]
        ticks = np.arange(1, len(values) + 1)
        ax.plot(ticks, values, color=METRIC_COLORS[label], linewidth=1.8)
        ax.set_ylabel(METRIC_LABELS[label])
        ax.grid(True, alpha=0.3)
    axes[-1, 0].set_xlabel("Tick")

    fig.suptitle(title or Path(csv_path).stem, fontsize=14)
    fig.tight_layout()
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=150)
    plt.close(fig)
    return output_path
