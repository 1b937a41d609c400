"""Time-series recorder: three per-tick metric series flushed at shutdown.

The CSV contract is three rows, one per series, each starting with its
label followed by one value per tick. A long-format Parquet copy can be
written alongside it for analysis tooling.
"""

from __future__ import annotations

import csv
from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from culture_diffusion.io.schemas import (
    SERIES_LABELS,
    TICK_METRICS_SCHEMA,
    TICK_METRICS_SCHEMA_VERSION,
)


class RecorderFlushError(OSError):
    """Raised when a time-series log cannot be created or written."""


class TimeSeriesRecorder:
    """Accumulates average distance, exchange count and unique count per tick."""

    def __init__(self) -> None:
        self._series: dict[str, list[int]] = {}
        self.reset()

    def reset(self) -> None:
        """Clear all series."""
        self._series = {label: [] for label in SERIES_LABELS}

    def append(self, distance: int, change: int, unique: int) -> None:
        for label, value in zip(SERIES_LABELS, (distance, change, unique), strict=True):
            self._series[label].append(value)

    def __len__(self) -> int:
        return len(self._series[SERIES_LABELS[0]])

    def series(self, label: str) -> list[int]:
        """Return a copy of one series by label."""
        return list(self._series[label])

    def rows(self) -> list[list[str]]:
        """Return the CSV rows: label first, then one value per tick."""
        return [[label, *(str(v) for v in self._series[label])] for label in SERIES_LABELS]

    def flush(self, path: Path) -> Path:
        """Write the three series to ``path`` as CSV, overwriting any existing file."""
        path = Path(path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with path.open("w", newline="") as handle:
                csv.writer(handle).writerows(self.rows())
        except OSError as exc:
            raise RecorderFlushError(f"failed creating file: {path}: {exc}") from exc
        return path

    def write_parquet(self, path: Path) -> Path:
        """Write one row per tick to ``path`` as Parquet."""
        path = Path(path)
        distance, change, unique = (self._series[label] for label in SERIES_LABELS)
        n = len(distance)
        table = pa.Table.from_pydict(
            {
                "schema_version": [TICK_METRICS_SCHEMA_VERSION] * n,
                "tick": list(range(1, n + 1)),
                "avg_feature_distance": distance,
                "exchanges_per_width": change,
                "unique_cultures": unique,
            },
            schema=TICK_METRICS_SCHEMA,
        )
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            pq.write_table(table, path)
        except OSError as exc:
            raise RecorderFlushError(f"failed creating file: {path}: {exc}") from exc
        return path
