"""
Forest Fire Simulation using Cellular Automata.

A probabilistic cellular automaton which spreads fire across a square grid
of vegetation, weighted by wind direction and vegetation type.
"""

from .cell import CellType, VEGETATION_FACTOR
from .errors import InvalidConfiguration, OutOfBounds
from .grid import Grid
from .initializer import initialize
from .model import FireModel
from .params import DEFAULT_GRID_SIZE, SimParams
from .rules import RandomSource

__version__ = "0.1.0"

__all__ = [
    "CellType",
    "VEGETATION_FACTOR",
    "InvalidConfiguration",
    "OutOfBounds",
    "Grid",
    "initialize",
    "FireModel",
    "DEFAULT_GRID_SIZE",
    "SimParams",
    "RandomSource",
]
