"""Scenario initializer: seeds the starting state of the forest."""

import logging

from .cell import CellType
from .errors import InvalidConfiguration
from .grid import Grid
from .rules import RandomSource

logger = logging.getLogger(__name__)


def _random_index(rng: RandomSource, size: int) -> int:
    return min(int(rng.random() * size), size - 1)


def initialize(size: int, water_ratio: float, rng: RandomSource) -> Grid:
    """
    Create the starting grid of a simulation.

    The grid is filled with normal forest. The centre cell is set on fire,
    the cell a quarter of the way along each axis becomes dry grass and the
    cell three quarters along becomes dense trees. Water is then scattered
    by drawing ``round(size * size * water_ratio)`` random positions with
    replacement, so repeated draws may leave fewer water cells than asked
    for, and water may land on any of the three fixed cells.

    Args:
        size: Number of cells along each side
        water_ratio: Target fraction of water cells (0-1)
        rng: Source of uniform random values

    Returns:
        The initialized grid

    Raises:
        InvalidConfiguration: If size is not positive or water_ratio is
            outside [0, 1]
    """
    if not 0.0 <= water_ratio <= 1.0:
        raise InvalidConfiguration(f"water_ratio must be within [0, 1], got {water_ratio}")

    grid = Grid(size, CellType.NormalForest)

    grid.set_cell(size // 2, size // 2, CellType.Burning)
    grid.set_cell(size // 4, size // 4, CellType.DryGrass)
    grid.set_cell(3 * size // 4, 3 * size // 4, CellType.DenseTrees)

    num_water_cells = int(round(size * size * water_ratio))
    for _ in range(num_water_cells):
        x = _random_index(rng, size)
        y = _random_index(rng, size)
        grid.set_cell(x, y, CellType.Water)

    water = grid.counts()[CellType.Water]
    logger.debug(
        "Initialized %dx%d grid: %d water draws, %d water cells (%.3f of grid)",
        size, size, num_water_cells, water, water / (size * size),
    )
    return grid
