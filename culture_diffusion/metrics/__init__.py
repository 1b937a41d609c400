"""Culture distance and grid diversity metrics."""

from culture_diffusion.metrics.distance import (
    culture_diff,
    exchange_probability,
    feature_distance,
    trait_distance,
)
from culture_diffusion.metrics.diversity import (
    grid_average_feature_distance,
    unique_culture_count,
)

__all__ = [
    "culture_diff",
    "exchange_probability",
    "feature_distance",
    "grid_average_feature_distance",
    "trait_distance",
    "unique_culture_count",
]
