"""Simulation engine: controller, recorder, tick driver and run entrypoint."""

from culture_diffusion.simulation.driver import drive, interrupt_guard
from culture_diffusion.simulation.engine import CultureSimulation, TickMetrics, format_status
from culture_diffusion.simulation.recorder import RecorderFlushError, TimeSeriesRecorder
from culture_diffusion.simulation.runner import run_simulation
from culture_diffusion.simulation.state import SimulationPhase, SimulationState

__all__ = [
    "CultureSimulation",
    "RecorderFlushError",
    "SimulationPhase",
    "SimulationState",
    "TickMetrics",
    "TimeSeriesRecorder",
    "drive",
    "format_status",
    "interrupt_guard",
    "run_simulation",
]
