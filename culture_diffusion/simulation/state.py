"""Mutable run state owned by the simulation controller."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from culture_diffusion.config.types import TerminationReason
from culture_diffusion.simulation.recorder import TimeSeriesRecorder


class SimulationPhase(Enum):
    """Lifecycle of a run: uninitialized -> running -> terminated."""

    UNINITIALIZED = "uninitialized"
    RUNNING = "running"
    TERMINATED = "terminated"


@dataclass
class SimulationState:
    """Tick counter, lifecycle phase, recorded series and the stop request flag."""

    tick: int = 0
    phase: SimulationPhase = SimulationPhase.UNINITIALIZED
    recorder: TimeSeriesRecorder = field(default_factory=TimeSeriesRecorder)
    stop_requested: bool = False
    termination_reason: TerminationReason | None = None

    def reset(self) -> None:
        self.tick = 0
        self.recorder.reset()
        self.stop_requested = False
        self.termination_reason = None
        self.phase = SimulationPhase.RUNNING
