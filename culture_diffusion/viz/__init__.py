"""Visualization layer: time-series plots of recorded logs."""

from culture_diffusion.viz.render import load_series_log, render_series_log

__all__ = [
    "load_series_log",
    "render_series_log",
]
