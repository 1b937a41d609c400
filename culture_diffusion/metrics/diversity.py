"""Grid-wide diversity metrics recorded once per tick."""

from __future__ import annotations

from typing import Callable, Iterable, Sequence

from culture_diffusion.config.constants import EMPTY_CULTURE
from culture_diffusion.metrics.distance import feature_distance


def grid_average_feature_distance(
    cultures: Sequence[int],
    neighbors_of: Callable[[int], Iterable[int]],
    width: int,
    coverage: float,
) -> int:
    """Summed neighbor feature distance, scaled by grid width and coverage.

    Every cell contributes, but only non-empty neighbors are compared. The
    sum is floor-divided by ``width``, multiplied by ``coverage`` (negative values
    count as 0), and truncated to an int.
    """
    total = 0
    for index, culture in enumerate(cultures):
        for neighbor in neighbors_of(index):
            neighbor_culture = cultures[neighbor]
            if neighbor_culture == EMPTY_CULTURE:
                continue
            total += feature_distance(culture, neighbor_culture)
    scale = max(coverage, 0.0)
    return int((total // width) * scale)


def unique_culture_count(cultures: Iterable[int]) -> int:
    """Number of distinct culture values, the empty sentinel included."""
    return len(set(cultures))
