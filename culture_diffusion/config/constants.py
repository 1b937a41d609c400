"""Centralized domain constants for cultural diffusion runs.

The trait layout, the empty-cell sentinel, and the run defaults live here.
Consuming modules should import from this module rather than defining
their own inline literals.
"""

from __future__ import annotations

NUM_FEATURES = 6
"""Number of trait slots packed into one culture value."""

TRAIT_BITS = 4
"""Bits per trait slot."""

TRAIT_MASK = 0xF
"""Mask selecting one trait after shifting it to the low bits."""

MAX_TRAIT = TRAIT_MASK
"""Largest trait value a slot can hold."""

EMPTY_CULTURE = 0xFFFFFF
"""Sentinel culture marking an unpopulated cell (every slot set to 0xF)."""

DIFF_FEATURES = NUM_FEATURES - 1
"""Slots summed by ``culture_diff``; the last slot is left out on purpose."""

MAX_CULTURE_DIFF = 96
"""Normaliser turning a culture diff into an exchange probability."""

INTERACTIONS = 100
"""Default number of sampled interactions per tick."""

COVERAGE = 1.0
"""Default fraction of grid cells populated at initialization."""

DURATION = 200
"""Default simulation duration in ticks."""

GRID_WIDTH = 20
"""Default grid width in cells (the grid is square)."""

OUTPUT_DIR = "data"
"""Default directory for flushed time-series logs."""
