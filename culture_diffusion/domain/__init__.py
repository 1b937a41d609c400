"""Domain layer: trait codec and the grid collaborator interface.

The diffusion rule lives in ``culture_diffusion.domain.diffusion`` and is
imported from there directly, since it depends on the metrics package.
"""

from culture_diffusion.domain.grid import CultureGrid, LatticeGrid
from culture_diffusion.domain.traits import SLOT_CLEAR_MASKS, decode, encode, extract, replace

__all__ = [
    "CultureGrid",
    "LatticeGrid",
    "SLOT_CLEAR_MASKS",
    "decode",
    "encode",
    "extract",
    "replace",
]
