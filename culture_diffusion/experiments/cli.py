"""CLI entrypoint for a cultural diffusion run.

This module owns CLI argument parsing and exit-status mapping. All domain
logic lives in the extracted modules:

- ``culture_diffusion.config``            – configuration dataclasses
- ``culture_diffusion.simulation.runner`` – ``run_simulation`` entrypoint
- ``culture_diffusion.simulation.engine`` – tick controller and status text
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from culture_diffusion.config.constants import (
    COVERAGE,
    DURATION,
    GRID_WIDTH,
    INTERACTIONS,
    OUTPUT_DIR,
)
from culture_diffusion.config.types import (
    DirectionMode,
    MetricCadence,
    Neighborhood,
    SimulationConfig,
    TerminationReason,
)
from culture_diffusion.simulation.engine import TickMetrics, format_status
from culture_diffusion.simulation.recorder import RecorderFlushError
from culture_diffusion.simulation.runner import run_simulation

# ---------------------------------------------------------------------------
# Module-level constants
# ---------------------------------------------------------------------------

EXIT_COMPLETED = 0
EXIT_FLUSH_FAILED = 1
EXIT_INTERRUPTED = 130
"""Exit status after Ctrl-C, following the 128 + SIGINT shell convention."""

_CLEAR_SCREEN = "\033[H\033[2J"

# ---------------------------------------------------------------------------
# CLI parsing helpers
# ---------------------------------------------------------------------------


def _parse_direction_mode(raw: str) -> DirectionMode:
    """Parse direction mode from CLI/config."""
    try:
        return DirectionMode(raw)
    except ValueError as exc:
        valid = ", ".join(mode.value for mode in DirectionMode)
        raise ValueError(f"direction-mode must be one of {valid}") from exc


def _parse_metric_cadence(raw: str) -> MetricCadence:
    """Parse metric cadence from CLI/config."""
    try:
        return MetricCadence(raw)
    except ValueError as exc:
        valid = ", ".join(mode.value for mode in MetricCadence)
        raise ValueError(f"metric-cadence must be one of {valid}") from exc


def _parse_neighborhood(raw: str) -> Neighborhood:
    """Parse neighborhood from CLI/config."""
    try:
        return Neighborhood(raw)
    except ValueError as exc:
        valid = ", ".join(mode.value for mode in Neighborhood)
        raise ValueError(f"neighborhood must be one of {valid}") from exc


def _coerce_bool(raw: object, key: str) -> bool:
    """Coerce raw value to bool with strict string-check."""
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        normalized = raw.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
    raise ValueError(f"{key} must be a boolean value")


def _coerce_int(raw: object, key: str) -> int:
    """Coerce raw value to int; rejects booleans and non-integer floats."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be an integer value")
    if isinstance(raw, float):
        if raw != int(raw):
            raise ValueError(f"{key} must be an integer value, got {raw!r}")
        return int(raw)
    if isinstance(raw, (int, str)):
        try:
            return int(raw)
        except ValueError as exc:
            raise ValueError(f"{key} must be an integer value, got {raw!r}") from exc
    raise ValueError(f"{key} must be an integer value")


def _coerce_float(raw: object, key: str) -> float:
    """Coerce raw value to float; rejects booleans."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be a float value")
    if isinstance(raw, (int, float, str)):
        try:
            return float(raw)
        except ValueError as exc:
            raise ValueError(f"{key} must be a float value, got {raw!r}") from exc
    raise ValueError(f"{key} must be a float value")


def _coerce_str(raw: object, key: str) -> str:
    """Coerce raw value to str; rejects booleans."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be a string-coercible value")
    if isinstance(raw, (str, Path, int, float)):
        return str(raw)
    raise ValueError(f"{key} must be a string-coercible value")


def _get_val(cli_val: object, key: str, file_cfg: dict[str, object], default: object) -> object:
    """CLI > file > default resolution."""
    if cli_val is not None:
        return cli_val
    return file_cfg.get(key, default)


def _get_bool(cli_val: bool | None, key: str, file_cfg: dict[str, object], default: bool) -> bool:
    return _coerce_bool(_get_val(cli_val, key, file_cfg, default), key)


def _get_int(cli_val: int | None, key: str, file_cfg: dict[str, object], default: int) -> int:
    return _coerce_int(_get_val(cli_val, key, file_cfg, default), key)


def _get_float(
    cli_val: float | None, key: str, file_cfg: dict[str, object], default: float
) -> float:
    return _coerce_float(_get_val(cli_val, key, file_cfg, default), key)


def _get_str(cli_val: str | None, key: str, file_cfg: dict[str, object], default: str) -> str:
    return _coerce_str(_get_val(cli_val, key, file_cfg, default), key)


def _get_optional_int(
    cli_val: int | None, key: str, file_cfg: dict[str, object]
) -> int | None:
    raw = _get_val(cli_val, key, file_cfg, None)
    return None if raw is None else _coerce_int(raw, key)


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(description="Run an Axelrod-style cultural diffusion simulation")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    parser.add_argument(
        "-n",
        "--interactions",
        type=int,
        default=None,
        help="number of interactions between cultures per simulation tick",
    )
    parser.add_argument(
        "-c",
        "--coverage",
        type=float,
        default=None,
        help="fraction of the simulation grid that is populated with cultures",
    )
    parser.add_argument(
        "-d", "--duration", type=int, default=None, help="the duration of the simulation"
    )
    parser.add_argument("-w", "--width", type=int, default=None, help="grid width in cells")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--out-dir", type=Path, default=None)
    parser.add_argument(
        "--direction-mode",
        type=str,
        choices=[mode.value for mode in DirectionMode],
        default=None,
    )
    parser.add_argument(
        "--metric-cadence",
        type=str,
        choices=[mode.value for mode in MetricCadence],
        default=None,
    )
    parser.add_argument(
        "--neighborhood",
        type=str,
        choices=[mode.value for mode in Neighborhood],
        default=None,
    )
    parser.add_argument("--wrap", action=argparse.BooleanOptionalAction, default=None)
    parser.add_argument(
        "--parquet",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Also write a long-format Parquet metrics log",
    )
    parser.add_argument(
        "--quiet",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Suppress the per-tick status display",
    )
    return parser


def build_config(args: argparse.Namespace, file_cfg: dict[str, object]) -> SimulationConfig:
    """Resolve a ``SimulationConfig`` from parsed CLI args and a file config."""
    return SimulationConfig(
        interactions=_get_int(args.interactions, "interactions", file_cfg, INTERACTIONS),
        coverage=_get_float(args.coverage, "coverage", file_cfg, COVERAGE),
        duration=_get_int(args.duration, "duration", file_cfg, DURATION),
        width=_get_int(args.width, "width", file_cfg, GRID_WIDTH),
        seed=_get_optional_int(args.seed, "seed", file_cfg),
        out_dir=Path(_get_str(args.out_dir, "out_dir", file_cfg, OUTPUT_DIR)),
        direction_mode=_parse_direction_mode(
            _get_str(
                args.direction_mode, "direction_mode", file_cfg, DirectionMode.COIN_FLIP.value
            )
        ),
        metric_cadence=_parse_metric_cadence(
            _get_str(
                args.metric_cadence, "metric_cadence", file_cfg, MetricCadence.PER_TICK.value
            )
        ),
        neighborhood=_parse_neighborhood(
            _get_str(args.neighborhood, "neighborhood", file_cfg, Neighborhood.MOORE.value)
        ),
        wrap=_get_bool(args.wrap, "wrap", file_cfg, False),
        write_parquet=_get_bool(args.parquet, "parquet", file_cfg, False),
    )


# ---------------------------------------------------------------------------
# Main CLI
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint for a single run.

    Returns the process exit status: 0 after the full duration, 130 after
    Ctrl-C (the data is flushed either way), 1 when the log cannot be written.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    file_cfg: dict[str, object] = {}
    if args.config is not None:
        try:
            file_cfg = json.loads(Path(args.config).read_text())
        except FileNotFoundError:
            parser.error(f"Config file not found: {args.config}")
        except json.JSONDecodeError as exc:
            parser.error(f"Config file is not valid JSON: {args.config}: {exc}")
        if not isinstance(file_cfg, dict):
            parser.error(f"Config file must contain a JSON object: {args.config}")

    try:
        config = build_config(args, file_cfg)
    except ValueError as exc:
        parser.error(str(exc))
    quiet = _get_bool(args.quiet, "quiet", file_cfg, False)

    def _show_status(metrics: TickMetrics) -> None:
        print(_CLEAR_SCREEN + format_status(config, metrics), flush=True)

    try:
        result = run_simulation(config, on_tick=None if quiet else _show_status)
    except RecorderFlushError as exc:
        print(str(exc), file=sys.stderr)
        return EXIT_FLUSH_FAILED

    summary = {
        "ticks_completed": result.ticks_completed,
        "termination_reason": result.termination_reason.value,
        "output_path": str(result.output_path),
        "parquet_path": None if result.parquet_path is None else str(result.parquet_path),
    }
    print(json.dumps(summary, ensure_ascii=False, indent=2))
    if result.termination_reason == TerminationReason.INTERRUPTED:
        return EXIT_INTERRUPTED
    return EXIT_COMPLETED


def entrypoint() -> None:
    sys.exit(main())


if __name__ == "__main__":
    entrypoint()
