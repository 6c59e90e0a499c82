"""Grid engine: the cell array and the synchronous update step."""

import logging
from typing import Iterator, Sequence

import numpy as np

from .cell import CellType
from .errors import InvalidConfiguration, OutOfBounds
from .params import SimParams
from .rules import RandomSource, bearing, next_state

logger = logging.getLogger(__name__)

_CELL_TYPES = tuple(CellType)

# Moore neighbourhood in enumeration order (dx outer, dy inner) with the
# bearing from the centre cell to each neighbour
_NEIGHBOR_OFFSETS = tuple(
    (dx, dy, bearing(0, 0, dx, dy))
    for dx in (-1, 0, 1)
    for dy in (-1, 0, 1)
    if not (dx == 0 and dy == 0)
)


class Grid:
    """Square grid of cells with double-buffered updates.

    Cells are stored in numpy arrays indexed ``[y, x]``. ``update`` reads
    the current buffer, writes the back buffer and then swaps the two, so a
    tick only ever observes the previous tick's states.
    """

    def __init__(self, size: int, fill: CellType = CellType.NormalForest):
        """
        Initialize a grid filled with a single cell type.

        Args:
            size: Number of cells along each side
            fill: Initial state of every cell

        Raises:
            InvalidConfiguration: If size is not positive
        """
        if size <= 0:
            raise InvalidConfiguration(f"Grid size must be positive, got {size}")
        self.size = size
        self._cells = np.full((size, size), int(fill), dtype=np.int8)
        self._back = np.empty_like(self._cells)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[CellType]]) -> "Grid":
        """Build a grid from rows of cells, ``rows[y][x]``."""
        size = len(rows)
        if any(len(row) != size for row in rows):
            raise InvalidConfiguration("Grid rows must form a square")
        grid = cls(size)
        grid._cells[:, :] = np.array(rows, dtype=np.int8)
        return grid

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self.size and 0 <= y < self.size):
            raise OutOfBounds(x, y, self.size)

    def get_cell(self, x: int, y: int) -> CellType:
        """Get the state of cell (x, y)."""
        self._check_bounds(x, y)
        return _CELL_TYPES[self._cells[y, x]]

    def set_cell(self, x: int, y: int, cell: CellType) -> None:
        """Set the state of cell (x, y)."""
        self._check_bounds(x, y)
        self._cells[y, x] = int(cell)

    def neighbors(self, x: int, y: int) -> list[tuple[int, int]]:
        """
        Get the positions of the Moore neighbours of (x, y).

        Positions outside the grid are skipped; the grid does not wrap.
        """
        self._check_bounds(x, y)
        return [(nx, ny) for nx, ny, _ in self._moore(x, y)]

    def _moore(self, x: int, y: int) -> Iterator[tuple[int, int, float]]:
        """Yield (nx, ny, bearing) for each in-grid neighbour, in enumeration order."""
        for dx, dy, angle in _NEIGHBOR_OFFSETS:
            nx, ny = x + dx, y + dy
            if 0 <= nx < self.size and 0 <= ny < self.size:
                yield nx, ny, angle

    def update(self, params: SimParams, rng: RandomSource) -> None:
        """
        Advance every cell by one tick.

        Cells are visited row by row (y outer, x inner) so that a given
        random sequence always produces the same grid.

        Args:
            params: Simulation parameters
            rng: Source of uniform random values
        """
        prev = self._cells.tolist()
        burning = int(CellType.Burning)

        def burning_bearings(x: int, y: int) -> Iterator[float]:
            for nx, ny, angle in self._moore(x, y):
                if prev[ny][nx] == burning:
                    yield angle

        for y, row in enumerate(prev):
            self._back[y, :] = [
                next_state(_CELL_TYPES[value], burning_bearings(x, y), params, rng)
                for x, value in enumerate(row)
            ]

        self._cells, self._back = self._back, self._cells

    def snapshot(self) -> np.ndarray:
        """Get a read-only copy of the current cell states, indexed ``[y, x]``."""
        snap = self._cells.copy()
        snap.flags.writeable = False
        return snap

    def counts(self) -> dict[CellType, int]:
        """Count the cells in each state."""
        totals = np.bincount(self._cells.ravel(), minlength=len(_CELL_TYPES))
        return {cell: int(totals[cell]) for cell in _CELL_TYPES}

    @property
    def burning_count(self) -> int:
        return int(np.count_nonzero(self._cells == int(CellType.Burning)))

    def any_burning(self) -> bool:
        return self.burning_count > 0

    def __repr__(self) -> str:
        return f"Grid(size={self.size})"
