"""Series labels and the Arrow schema for persisted tick metrics."""

from __future__ import annotations

import pyarrow as pa

TICK_METRICS_SCHEMA_VERSION = 1

DISTANCE_LABEL = "distance"
CHANGE_LABEL = "change"
UNIQUE_LABEL = "unique"

SERIES_LABELS: tuple[str, ...] = (DISTANCE_LABEL, CHANGE_LABEL, UNIQUE_LABEL)
"""Row labels of the CSV log, in file order."""

TICK_METRICS_SCHEMA = pa.schema(
    [
        ("schema_version", pa.int64()),
        ("tick", pa.int64()),
        ("avg_feature_distance", pa.int64()),
        ("exchanges_per_width", pa.int64()),
        ("unique_cultures", pa.int64()),
    ]
)
