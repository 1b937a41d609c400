"""Configuration layer: constants and typed config dataclasses."""

from culture_diffusion.config.constants import (
    COVERAGE,
    DIFF_FEATURES,
    DURATION,
    EMPTY_CULTURE,
    GRID_WIDTH,
    INTERACTIONS,
    MAX_CULTURE_DIFF,
    MAX_TRAIT,
    NUM_FEATURES,
    OUTPUT_DIR,
    TRAIT_BITS,
    TRAIT_MASK,
)
from culture_diffusion.config.types import (
    DirectionMode,
    MetricCadence,
    Neighborhood,
    SimulationConfig,
    SimulationResult,
    TerminationReason,
)

__all__ = [
    "COVERAGE",
    "DIFF_FEATURES",
    "DURATION",
    "DirectionMode",
    "EMPTY_CULTURE",
    "GRID_WIDTH",
    "INTERACTIONS",
    "MAX_CULTURE_DIFF",
    "MAX_TRAIT",
    "MetricCadence",
    "NUM_FEATURES",
    "Neighborhood",
    "OUTPUT_DIR",
    "SimulationConfig",
    "SimulationResult",
    "TRAIT_BITS",
    "TRAIT_MASK",
    "TerminationReason",
]
