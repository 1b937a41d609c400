"""Diffusion step: one sampled interaction of the Axelrod-style exchange rule.

Each interaction picks a random cell; if it is populated, every populated
neighbor is compared against it and may copy (or donate) one trait with
probability ``1 - culture_diff / 96``. Pairs identical on the compared slots
never change.
"""

from __future__ import annotations

from random import Random

from culture_diffusion.config.constants import EMPTY_CULTURE, NUM_FEATURES
from culture_diffusion.config.types import DirectionMode
from culture_diffusion.domain.grid import CultureGrid
from culture_diffusion.domain.traits import extract, replace
from culture_diffusion.metrics.distance import culture_diff, exchange_probability


def interact(
    grid: CultureGrid,
    source: int,
    neighbor: int,
    rng: Random,
    direction_mode: DirectionMode = DirectionMode.COIN_FLIP,
) -> bool:
    """Attempt one trait exchange between ``source`` and ``neighbor``.

    Returns True when a culture value was overwritten.
    """
    source_culture = grid.get(source)
    neighbor_culture = grid.get(neighbor)
    diff = culture_diff(source_culture, neighbor_culture)
    if rng.random() >= exchange_probability(diff):
        return False

    slot = rng.randrange(NUM_FEATURES)
    if diff == 0:
        return False

    if direction_mode == DirectionMode.NEIGHBOR_ADOPTS or rng.randrange(2) == 0:
        grid.set(neighbor, replace(neighbor_culture, extract(source_culture, slot), slot))
    else:
        grid.set(source, replace(source_culture, extract(neighbor_culture, slot), slot))
    return True


def diffusion_step(
    grid: CultureGrid,
    rng: Random,
    direction_mode: DirectionMode = DirectionMode.COIN_FLIP,
) -> int:
    """Run one sampled interaction and return the number of exchanges."""
    source = rng.randrange(len(grid))
    if grid.get(source) == EMPTY_CULTURE:
        return 0

    exchanges = 0
    for neighbor in grid.neighbors(source):
        if grid.get(neighbor) == EMPTY_CULTURE:
            continue
        if interact(grid, source, neighbor, rng, direction_mode):
            exchanges += 1
    return exchanges
