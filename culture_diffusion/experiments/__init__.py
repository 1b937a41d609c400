"""Experiments layer: command-line entrypoint for single runs."""

from culture_diffusion.experiments.cli import build_config, main

__all__ = [
    "build_config",
    "main",
]
