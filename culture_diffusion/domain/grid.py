"""Grid collaborator interface and a square-lattice adapter.

The diffusion core only needs indexed read/write access to culture values
and a neighbor lookup. ``LatticeGrid`` provides both for a ``width x width``
lattice stored row-major.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, Sequence

from culture_diffusion.config.constants import EMPTY_CULTURE
from culture_diffusion.config.types import Neighborhood

_MOORE_OFFSETS = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)
_VON_NEUMANN_OFFSETS = ((-1, 0), (0, -1), (0, 1), (1, 0))


class CultureGrid(Protocol):
    """Capabilities the simulation controller consumes from a grid."""

    width: int

    def __len__(self) -> int: ...

    def get(self, index: int) -> int: ...

    def set(self, index: int, value: int) -> None: ...

    def neighbors(self, index: int) -> Sequence[int]: ...

    def cultures(self) -> Sequence[int]: ...


@dataclass
class LatticeGrid:
    """Square lattice of culture values with Moore or von Neumann neighbors."""

    width: int
    neighborhood: Neighborhood = Neighborhood.MOORE
    wrap: bool = False
    values: list[int] = field(default_factory=list)
    _neighbor_cache: dict[int, tuple[int, ...]] = field(
        default_factory=dict, init=False, repr=False
    )

    def __post_init__(self) -> None:
        if self.width < 1:
            raise ValueError("width must be >= 1")
        if not self.values:
            self.values = [EMPTY_CULTURE] * (self.width * self.width)
        elif len(self.values) != self.width * self.width:
            raise ValueError("values must hold exactly width * width cultures")

    def __len__(self) -> int:
        return len(self.values)

    def get(self, index: int) -> int:
        return self.values[index]

    def set(self, index: int, value: int) -> None:
        self.values[index] = value

    def cultures(self) -> Sequence[int]:
        return self.values

    def neighbors(self, index: int) -> tuple[int, ...]:
        """Return neighbor indices of ``index``, excluding the cell itself."""
        cached = self._neighbor_cache.get(index)
        if cached is not None:
            return cached
        if not 0 <= index < len(self.values):
            raise IndexError(f"grid index out of range: {index}")

        row, col = divmod(index, self.width)
        offsets = (
            _MOORE_OFFSETS if self.neighborhood == Neighborhood.MOORE else _VON_NEUMANN_OFFSETS
        )
        seen: set[int] = set()
        result: list[int] = []
        for d_row, d_col in offsets:
            n_row, n_col = row + d_row, col + d_col
            if self.wrap:
                n_row %= self.width
                n_col %= self.width
            elif not (0 <= n_row < self.width and 0 <= n_col < self.width):
                continue
            neighbor = n_row * self.width + n_col
            # Small toroidal grids fold offsets back onto the same cells.
            if neighbor == index or neighbor in seen:
                continue
            seen.add(neighbor)
            result.append(neighbor)

        neighbors = tuple(result)
        self._neighbor_cache[index] = neighbors
        return neighbors
