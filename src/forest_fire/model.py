"""Fire spread model implementation."""

import logging

from mesa import Model
from mesa.datacollection import DataCollector

from .cell import CellType, is_flammable
from .grid import Grid
from .initializer import initialize
from .params import DEFAULT_GRID_SIZE, SimParams

logger = logging.getLogger(__name__)


def _state_reporter(cell: CellType):
    return lambda model: model.grid.counts()[cell]


class FireModel(Model):
    """Drives the grid engine one tick per step.

    The model owns the grid, the parameters and the seeded random
    generator (``self.random``), and records how many cells are in each
    state after every step.
    """

    def __init__(
        self,
        size: int = DEFAULT_GRID_SIZE,
        params: SimParams | None = None,
        seed: int | None = None,
    ):
        """
        Initialize the fire spread model.

        Args:
            size: Number of cells along each side of the grid
            params: Simulation parameters, defaults if omitted
            seed: Seed for the random generator, for reproducible runs
        """
        super().__init__(seed=seed)
        self.size = size
        self.params = params if params is not None else SimParams()
        self._build_grid()

    def _build_grid(self) -> None:
        self.grid: Grid = initialize(self.size, self.params.water_ratio, self.random)
        self.datacollector = DataCollector(
            model_reporters={cell.name: _state_reporter(cell) for cell in CellType}
        )
        self.running = True
        self.tick = 0
        self.datacollector.collect(self)
        logger.info("Created %dx%d forest with %s", self.size, self.size, self.params)

    def reset(self) -> None:
        """Rebuild the starting scenario with the same parameters."""
        self._build_grid()

    def step(self):
        """Execute one synchronous update of the whole grid."""
        self.grid.update(self.params, self.random)
        self.tick += 1
        self.datacollector.collect(self)
        self.running = self._can_change()
        if not self.running:
            logger.info("Fire extinguished after %d steps", self.tick)

    def _can_change(self) -> bool:
        """Whether any further step could change the grid."""
        if self.grid.any_burning():
            return True
        if self.params.pstart <= 0:
            return False
        counts = self.grid.counts()
        return any(counts[cell] > 0 for cell in CellType if is_flammable(cell))
