"""Color definitions and constants for the forest fire visualization.

This module contains the RGB palette for every cell state and the default
display configuration used by the Pygame viewer.
"""

from typing import Tuple

import numpy as np

from forest_fire.cell import CellType

# Type alias for RGB color tuples
Color = Tuple[int, int, int]

# ============================================================================
# CELL STATE COLORS
# ============================================================================

NORMAL_FOREST_COLOR: Color = (0, 255, 0)            # green
DRY_GRASS_COLOR: Color = (255, 255, 0)              # yellow
DENSE_TREES_COLOR: Color = (0, 100, 0)              # darkgreen
WATER_COLOR: Color = (0, 0, 255)                    # blue
BURNING_COLOR: Color = (255, 0, 0)                  # red (on fire)
BURNED_COLOR: Color = (0, 0, 0)                     # black (burned out)

CELL_COLORS: dict[CellType, Color] = {
    CellType.NormalForest: NORMAL_FOREST_COLOR,
    CellType.DryGrass: DRY_GRASS_COLOR,
    CellType.DenseTrees: DENSE_TREES_COLOR,
    CellType.Water: WATER_COLOR,
    CellType.Burning: BURNING_COLOR,
    CellType.Burned: BURNED_COLOR,
}

# Lookup table indexed by CellType value
PALETTE = np.array([CELL_COLORS[cell] for cell in CellType], dtype=np.uint8)

# ============================================================================
# UI COLORS
# ============================================================================

BLACK: Color = (0, 0, 0)                            # Text
WHITE: Color = (255, 255, 255)                      # Background
PANEL_COLOR: Color = (80, 0, 0)                     # Info panel background

# ============================================================================
# DEFAULT DISPLAY PARAMETERS
# ============================================================================

DEFAULT_WINDOW_SIZE: Tuple[int, int] = (800, 600)   # Window size in pixels
DEFAULT_CELL_SIZE: float = 5.0                      # Cell size in pixels
DEFAULT_FPS: int = 30                               # Frames per second
ZOOM_STEP: float = 1.1                              # Zoom factor per wheel notch
PANEL_HEIGHT: int = 40                              # Info panel height in pixels


def to_rgb(cells: np.ndarray) -> np.ndarray:
    """Map a ``[y, x]`` array of cell values to a ``[y, x, 3]`` RGB array."""
    return PALETTE[np.asarray(cells, dtype=np.intp)]
