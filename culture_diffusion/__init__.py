"""Axelrod-style cultural diffusion on a square grid of packed trait vectors."""

__version__ = "0.1.0"
