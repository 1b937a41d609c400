"""Configuration dataclasses and enums for cultural diffusion runs.

All frozen dataclasses that parameterise a run, plus the result container
returned when a run terminates, live here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from culture_diffusion.config.constants import (
    COVERAGE,
    DURATION,
    GRID_WIDTH,
    INTERACTIONS,
    OUTPUT_DIR,
)

__all__ = [
    "DirectionMode",
    "MetricCadence",
    "Neighborhood",
    "SimulationConfig",
    "SimulationResult",
    "TerminationReason",
]

# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class DirectionMode(Enum):
    """Which side of an accepted pair receives the copied trait."""

    COIN_FLIP = "coin_flip"
    NEIGHBOR_ADOPTS = "neighbor_adopts"


class MetricCadence(Enum):
    """How often grid-wide metrics are recomputed within a tick."""

    PER_TICK = "per_tick"
    PER_INTERACTION = "per_interaction"


class Neighborhood(Enum):
    """Neighbor set used by the reference lattice adapter."""

    MOORE = "moore"
    VON_NEUMANN = "von_neumann"


class TerminationReason(Enum):
    """Why a run left the running state."""

    DURATION = "duration"
    INTERRUPTED = "interrupted"


# ---------------------------------------------------------------------------
# Result container
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SimulationResult:
    """Outcome of one run, handed back to the caller instead of exiting."""

    ticks_completed: int
    termination_reason: TerminationReason
    output_path: Path
    parquet_path: Path | None = None


# ---------------------------------------------------------------------------
# Config dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SimulationConfig:
    """Run parameters; immutable once a simulation starts.

    ``coverage`` is not range-checked: values above 1 populate
    every cell and values below 0 populate none.
    """

    interactions: int = INTERACTIONS
    coverage: float = COVERAGE
    duration: int = DURATION
    width: int = GRID_WIDTH
    seed: int | None = None
    out_dir: Path = field(default_factory=lambda: Path(OUTPUT_DIR))
    direction_mode: DirectionMode = DirectionMode.COIN_FLIP
    metric_cadence: MetricCadence = MetricCadence.PER_TICK
    neighborhood: Neighborhood = Neighborhood.MOORE
    wrap: bool = False
    write_parquet: bool = False

    def __post_init__(self) -> None:
        if self.interactions < 0:
            raise ValueError("interactions must be >= 0")
        if self.duration < 0:
            raise ValueError("duration must be >= 0")
        if self.width < 1:
            raise ValueError("width must be >= 1")

    @property
    def cell_count(self) -> int:
        return self.width * self.width
