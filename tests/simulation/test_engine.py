"""Tests for culture_diffusion.simulation.engine."""

from __future__ import annotations

import csv
from pathlib import Path

import pyarrow.parquet as pq
import pytest

from culture_diffusion.config.constants import EMPTY_CULTURE
from culture_diffusion.config.types import (
    MetricCadence,
    SimulationConfig,
    TerminationReason,
)
from culture_diffusion.domain.grid import LatticeGrid
from culture_diffusion.simulation.engine import CultureSimulation, TickMetrics, format_status
from culture_diffusion.simulation.state import SimulationPhase


def _config(tmp_path: Path, **kwargs: object) -> SimulationConfig:
    params: dict[str, object] = {"width": 3, "duration": 5, "interactions": 10, "seed": 0}
    params.update(kwargs)
    return SimulationConfig(out_dir=tmp_path, **params)  # type: ignore[arg-type]


def _read_rows(path: Path) -> list[list[str]]:
    with path.open(newline="") as handle:
        return list(csv.reader(handle))


class TestInitialize:
    def test_full_coverage_populates_every_cell(self, tmp_path: Path) -> None:
        sim = CultureSimulation(_config(tmp_path, coverage=1.0))
        sim.initialize()
        assert sim.phase == SimulationPhase.RUNNING
        assert all(0 <= c < EMPTY_CULTURE for c in sim.grid.cultures())

    def test_zero_coverage_leaves_grid_empty(self, tmp_path: Path) -> None:
        sim = CultureSimulation(_config(tmp_path, coverage=0.0))
        sim.initialize()
        assert set(sim.grid.cultures()) == {EMPTY_CULTURE}

    def test_coverage_above_one_behaves_like_one(self, tmp_path: Path) -> None:
        sim = CultureSimulation(_config(tmp_path, coverage=1.7))
        sim.initialize()
        assert EMPTY_CULTURE not in sim.grid.cultures()

    def test_negative_coverage_behaves_like_zero(self, tmp_path: Path) -> None:
        sim = CultureSimulation(_config(tmp_path, coverage=-0.3))
        sim.initialize()
        assert set(sim.grid.cultures()) == {EMPTY_CULTURE}

    def test_reinitialize_resets_tick_and_series(self, tmp_path: Path) -> None:
        sim = CultureSimulation(_config(tmp_path))
        sim.initialize()
        sim.process()
        sim.process()
        sim.initialize()
        assert sim.state.tick == 0
        assert len(sim.state.recorder) == 0

    def test_grid_width_conflict_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError, match="width"):
            CultureSimulation(_config(tmp_path, width=3), grid=LatticeGrid(width=4))


class TestProcess:
    def test_process_before_initialize_raises(self, tmp_path: Path) -> None:
        sim = CultureSimulation(_config(tmp_path))
        with pytest.raises(RuntimeError, match="uninitialized"):
            sim.process()

    def test_zero_interactions_records_one_unchanged_tick(self, tmp_path: Path) -> None:
        sim = CultureSimulation(_config(tmp_path, width=3, coverage=1.0, interactions=0, duration=1))
        sim.initialize()
        before = list(sim.grid.cultures())
        assert len(before) == 9
        assert EMPTY_CULTURE not in before

        metrics = sim.process()

        assert metrics is not None
        assert metrics.tick == 1
        assert metrics.exchanges == 0
        assert list(sim.grid.cultures()) == before
        assert sim.state.recorder.series("change") == [0]
        assert len(sim.state.recorder) == 1

    def test_identical_cultures_produce_no_exchanges(self, tmp_path: Path) -> None:
        sim = CultureSimulation(_config(tmp_path, interactions=200))
        sim.initialize()
        for index in range(len(sim.grid)):
            sim.grid.set(index, 0x123456)

        metrics = sim.process()

        assert metrics is not None
        assert metrics.exchanges == 0
        assert metrics.unique_cultures == 1
        assert metrics.avg_distance == 0
        assert set(sim.grid.cultures()) == {0x123456}

    def test_exchanges_are_recorded_per_width(self, tmp_path: Path) -> None:
        sim = CultureSimulation(_config(tmp_path, width=4, interactions=300))
        sim.initialize()
        metrics = sim.process()
        assert metrics is not None
        assert metrics.exchanges > 0
        assert metrics.exchanges_per_width == metrics.exchanges // 4
        assert sim.state.recorder.series("change") == [metrics.exchanges_per_width]

    def test_unique_count_within_bounds(self, tmp_path: Path) -> None:
        sim = CultureSimulation(_config(tmp_path, width=5, interactions=50))
        sim.initialize()
        for _ in range(3):
            metrics = sim.process()
            assert metrics is not None
            assert 1 <= metrics.unique_cultures <= 25
            assert metrics.avg_distance >= 0

    def test_terminates_after_tick_exceeds_duration(self, tmp_path: Path) -> None:
        sim = CultureSimulation(_config(tmp_path, duration=2))
        sim.initialize()
        ticks = []
        while (metrics := sim.process()) is not None:
            ticks.append(metrics.tick)
        assert ticks == [1, 2, 3]
        assert sim.phase == SimulationPhase.TERMINATED
        assert sim.state.termination_reason == TerminationReason.DURATION

    def test_process_after_termination_raises(self, tmp_path: Path) -> None:
        sim = CultureSimulation(_config(tmp_path, duration=0))
        sim.initialize()
        sim.process()
        assert sim.process() is None
        with pytest.raises(RuntimeError, match="terminated"):
            sim.process()

    def test_cadences_record_identical_values(self, tmp_path: Path) -> None:
        rows = []
        for cadence in MetricCadence:
            sim = CultureSimulation(
                _config(tmp_path / cadence.value, width=4, interactions=20, metric_cadence=cadence)
            )
            result = sim.run()
            rows.append(_read_rows(result.output_path))
        assert rows[0] == rows[1]


class TestRun:
    def test_duration_zero_records_exactly_one_row(self, tmp_path: Path) -> None:
        sim = CultureSimulation(_config(tmp_path, duration=0))
        result = sim.run()
        assert result.ticks_completed == 1
        assert result.termination_reason == TerminationReason.DURATION
        rows = _read_rows(result.output_path)
        assert [row[0] for row in rows] == ["distance", "change", "unique"]
        assert all(len(row) == 2 for row in rows)

    def test_output_named_from_parameters(self, tmp_path: Path) -> None:
        result = CultureSimulation(
            _config(tmp_path, interactions=7, width=3, coverage=0.3, duration=0)
        ).run()
        assert result.output_path == tmp_path / "log-n7-w3-c0.3.csv"

    def test_on_tick_sees_every_tick(self, tmp_path: Path) -> None:
        seen: list[TickMetrics] = []
        result = CultureSimulation(_config(tmp_path, duration=3)).run(on_tick=seen.append)
        assert [m.tick for m in seen] == [1, 2, 3, 4]
        assert result.ticks_completed == 4

    def test_stop_request_flushes_recorded_rows(self, tmp_path: Path) -> None:
        sim = CultureSimulation(_config(tmp_path, duration=100))

        def _stop_at_two(metrics: TickMetrics) -> None:
            if metrics.tick == 2:
                sim.request_stop()

        result = sim.run(on_tick=_stop_at_two)
        assert result.termination_reason == TerminationReason.INTERRUPTED
        assert result.ticks_completed == 2
        assert all(len(row) == 3 for row in _read_rows(result.output_path))

    def test_exception_in_tick_still_flushes(self, tmp_path: Path) -> None:
        sim = CultureSimulation(_config(tmp_path, duration=100))

        def _explode(metrics: TickMetrics) -> None:
            if metrics.tick == 3:
                raise KeyboardInterrupt

        with pytest.raises(KeyboardInterrupt):
            sim.run(on_tick=_explode)
        assert sim.output_path is not None
        assert all(len(row) == 4 for row in _read_rows(sim.output_path))
        assert sim.state.termination_reason == TerminationReason.INTERRUPTED

    def test_same_seed_reproduces_output(self, tmp_path: Path) -> None:
        first = CultureSimulation(_config(tmp_path / "a", seed=42)).run()
        second = CultureSimulation(_config(tmp_path / "b", seed=42)).run()
        assert _read_rows(first.output_path) == _read_rows(second.output_path)

    def test_exit_flushes_only_once(self, tmp_path: Path) -> None:
        sim = CultureSimulation(_config(tmp_path, duration=0))
        result = sim.run()
        result.output_path.write_text("sentinel")
        assert sim.exit() == result.output_path
        assert result.output_path.read_text() == "sentinel"

    def test_exit_before_initialize_raises(self, tmp_path: Path) -> None:
        with pytest.raises(RuntimeError):
            CultureSimulation(_config(tmp_path)).exit()

    def test_parquet_written_when_enabled(self, tmp_path: Path) -> None:
        result = CultureSimulation(_config(tmp_path, duration=2, write_parquet=True)).run()
        assert result.parquet_path == tmp_path / "log-n10-w3-c1.0.parquet"
        assert pq.read_table(result.parquet_path).num_rows == 3


def test_format_status_reports_progress(tmp_path: Path) -> None:
    config = _config(tmp_path, interactions=100, coverage=0.5, duration=200)
    text = format_status(
        config,
        TickMetrics(tick=7, avg_distance=3, exchanges=41, exchanges_per_width=13, unique_cultures=9),
    )
    assert "Number of cultural interactions: 100" in text
    assert "Simulation coverage: 50%" in text
    assert "Simulation tick: 7/200" in text
    assert "average distance between cultures: 3" in text
    assert "number of unique cultures        : 9" in text
    assert "number of cultural exchanges     : 41" in text
