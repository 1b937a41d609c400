"""Pairwise culture distances.

``culture_diff`` and ``feature_distance`` are intentionally different:
the former sums trait magnitudes over the first ``DIFF_FEATURES`` slots and
drives the exchange probability, the latter counts mismatching slots over
all ``NUM_FEATURES`` and feeds the grid-wide average.
"""

from __future__ import annotations

from culture_diffusion.config.constants import DIFF_FEATURES, MAX_CULTURE_DIFF, NUM_FEATURES
from culture_diffusion.domain.traits import extract


def trait_distance(c1: int, c2: int, slot: int) -> int:
    """Absolute difference of the two traits at ``slot``."""
    return abs(extract(c1, slot) - extract(c2, slot))


def culture_diff(c1: int, c2: int) -> int:
    """Sum of trait distances over slots ``0 .. DIFF_FEATURES - 1``."""
    return sum(trait_distance(c1, c2, slot) for slot in range(DIFF_FEATURES))


def exchange_probability(diff: int) -> float:
    """Probability that a pair with the given ``culture_diff`` interacts."""
    return 1.0 - diff / MAX_CULTURE_DIFF


def feature_distance(c1: int, c2: int) -> int:
    """Number of slots (out of ``NUM_FEATURES``) where the cultures differ."""
    matching = sum(1 for slot in range(NUM_FEATURES) if extract(c1, slot) == extract(c2, slot))
    return NUM_FEATURES - matching
