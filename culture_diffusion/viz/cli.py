"""CLI for plotting recorded time-series logs."""

from __future__ import annotations

import argparse
from pathlib import Path

import matplotlib


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Plot a cultural diffusion time-series log")
    parser.add_argument("csv_path", type=Path, help="CSV log written by a simulation run")
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Image path (defaults to the log path with a .png suffix)",
    )
    parser.add_argument("--title", type=str, default=None)
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if not args.csv_path.exists():
        parser.error(f"Log file not found: {args.csv_path}")

    matplotlib.use("Agg")
    from culture_diffusion.viz.render import render_series_log

    output = args.output or args.csv_path.with_suffix(".png")
    try:
        render_series_log(args.csv_path, output, title=args.title)
    except ValueError as exc:
        parser.error(str(exc))
    print(f"Saved plot to {output}")


if __name__ == "__main__":
    main()
