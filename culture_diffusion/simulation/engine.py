"""Simulation controller: grid initialization, per-tick update, termination.

A run moves through ``UNINITIALIZED -> RUNNING -> TERMINATED``. Each call
to ``process`` either executes one full tick (all sampled interactions,
metric recomputation, recording) or, once ``tick > duration`` or a stop was
requested, moves the run to ``TERMINATED``. ``exit`` flushes the recorded
series exactly once.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from culture_diffusion.config.constants import EMPTY_CULTURE
from culture_diffusion.config.types import (
    MetricCadence,
    SimulationConfig,
    SimulationResult,
    TerminationReason,
)
from culture_diffusion.domain.diffusion import diffusion_step
from culture_diffusion.domain.grid import CultureGrid, LatticeGrid
from culture_diffusion.io.paths import series_log_path, tick_metrics_path
from culture_diffusion.metrics.diversity import (
    grid_average_feature_distance,
    unique_culture_count,
)
from culture_diffusion.simulation.driver import drive
from culture_diffusion.simulation.state import SimulationPhase, SimulationState


@dataclass(frozen=True)
class TickMetrics:
    """Values observed at the end of one tick."""

    tick: int
    avg_distance: int
    exchanges: int
    exchanges_per_width: int
    unique_cultures: int


def format_status(config: SimulationConfig, metrics: TickMetrics) -> str:
    """Human-readable progress block for one tick."""
    return "\n".join(
        [
            f"Number of cultural interactions: {config.interactions}",
            f"Simulation coverage: {config.coverage * 100:.0f}%",
            f"Simulation tick: {metrics.tick}/{config.duration}",
            f"average distance between cultures: {metrics.avg_distance}",
            f"number of unique cultures        : {metrics.unique_cultures}",
            f"number of cultural exchanges     : {metrics.exchanges}",
            "Ctrl-c to quit simulation and save data.",
        ]
    )


class CultureSimulation:
    """Owns the grid, the random source and the run state for one simulation."""

    def __init__(
        self,
        config: SimulationConfig,
        grid: CultureGrid | None = None,
        rng: random.Random | None = None,
    ) -> None:
        if grid is not None and grid.width != config.width:
            raise ValueError("grid width conflicts with config.width")
        self.config = config
        self.grid: CultureGrid = grid if grid is not None else LatticeGrid(
            width=config.width,
            neighborhood=config.neighborhood,
            wrap=config.wrap,
        )
        self.rng = rng or random.Random(config.seed)
        self.state = SimulationState()
        self.output_path: Path | None = None
        self.parquet_path: Path | None = None

    @property
    def phase(self) -> SimulationPhase:
        return self.state.phase

    def initialize(self) -> None:
        """Populate the grid and reset the tick counter and series."""
        for index in range(len(self.grid)):
            if self.rng.random() < self.config.coverage:
                self.grid.set(index, self.rng.randrange(EMPTY_CULTURE))
            else:
                self.grid.set(index, EMPTY_CULTURE)
        self.output_path = None
        self.parquet_path = None
        self.state.reset()

    def request_stop(self) -> None:
        """Ask the run to terminate at the next tick boundary."""
        self.state.stop_requested = True

    def _measure(self) -> tuple[int, int]:
        cultures = self.grid.cultures()
        distance = grid_average_feature_distance(
            cultures, self.grid.neighbors, self.config.width, self.config.coverage
        )
        return distance, unique_culture_count(cultures)

    def process(self) -> TickMetrics | None:
        """Run one tick, or terminate and return None when the run is over."""
        if self.state.phase != SimulationPhase.RUNNING:
            raise RuntimeError(f"cannot process a tick in phase {self.state.phase.value}")

        if self.state.stop_requested:
            self._terminate(TerminationReason.INTERRUPTED)
            return None
        if self.state.tick > self.config.duration:
            self._terminate(TerminationReason.DURATION)
            return None
        self.state.tick += 1

        exchanges = 0
        measured: tuple[int, int] | None = None
        per_interaction = self.config.metric_cadence == MetricCadence.PER_INTERACTION
        for _ in range(self.config.interactions):
            exchanges += diffusion_step(self.grid, self.rng, self.config.direction_mode)
            if per_interaction:
                measured = self._measure()
        if measured is None:
            measured = self._measure()
        distance, unique = measured

        metrics = TickMetrics(
            tick=self.state.tick,
            avg_distance=distance,
            exchanges=exchanges,
            exchanges_per_width=exchanges // self.config.width,
            unique_cultures=unique,
        )
        self.state.recorder.append(distance, metrics.exchanges_per_width, unique)
        return metrics

    def _terminate(self, reason: TerminationReason) -> None:
        self.state.phase = SimulationPhase.TERMINATED
        self.state.termination_reason = reason

    def exit(self) -> Path:
        """Terminate if still running and flush the series (once)."""
        if self.state.phase == SimulationPhase.UNINITIALIZED:
            raise RuntimeError("cannot exit a simulation that was never initialized")
        if self.state.phase == SimulationPhase.RUNNING:
            self._terminate(TerminationReason.INTERRUPTED)
        if self.output_path is not None:
            return self.output_path

        out_dir = Path(self.config.out_dir)
        self.output_path = self.state.recorder.flush(series_log_path(out_dir, self.config))
        if self.config.write_parquet:
            self.parquet_path = self.state.recorder.write_parquet(
                tick_metrics_path(out_dir, self.config)
            )
        return self.output_path

    def result(self) -> SimulationResult:
        if self.output_path is None or self.state.termination_reason is None:
            raise RuntimeError("simulation has not been flushed yet")
        return SimulationResult(
            ticks_completed=len(self.state.recorder),
            termination_reason=self.state.termination_reason,
            output_path=self.output_path,
            parquet_path=self.parquet_path,
        )

    def run(self, on_tick: Callable[[TickMetrics], None] | None = None) -> SimulationResult:
        """Initialize if needed, tick until termination, flush, and report."""
        if self.state.phase == SimulationPhase.UNINITIALIZED:
            self.initialize()

        def _tick_hook() -> bool:
            metrics = self.process()
            if metrics is None:
                return False
            if on_tick is not None:
                on_tick(metrics)
            return True

        drive(_tick_hook, self.exit)
        return self.result()
