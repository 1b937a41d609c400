"""Run one simulation end to end with SIGINT routed to a cooperative stop."""

from __future__ import annotations

import random
from typing import Callable

from culture_diffusion.config.types import SimulationConfig, SimulationResult
from culture_diffusion.domain.grid import CultureGrid
from culture_diffusion.simulation.driver import interrupt_guard
from culture_diffusion.simulation.engine import CultureSimulation, TickMetrics


def run_simulation(
    config: SimulationConfig,
    grid: CultureGrid | None = None,
    rng: random.Random | None = None,
    on_tick: Callable[[TickMetrics], None] | None = None,
    handle_signals: bool = True,
) -> SimulationResult:
    """Initialize, run until ``tick > duration`` or Ctrl-C, flush, and report.

    With ``handle_signals`` the SIGINT handler only sets the stop flag, so an
    interrupted run still finishes its current tick and flushes every
    recorded row before returning.
    """
    simulation = CultureSimulation(config, grid=grid, rng=rng)
    simulation.initialize()
    if not handle_signals:
        return simulation.run(on_tick=on_tick)
    with interrupt_guard(simulation.request_stop):
        return simulation.run(on_tick=on_tick)
