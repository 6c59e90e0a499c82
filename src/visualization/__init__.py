"""Visualization package for the forest fire simulation using Pygame."""

from .colors import *
from .renderer import GridRenderer
from .ui import InfoPanel
from .viewer import SimulationViewer

__all__ = [
    # Renderer and UI components
    'GridRenderer',
    'InfoPanel',
    'SimulationViewer',

    # Cell state colors
    'NORMAL_FOREST_COLOR',
    'DRY_GRASS_COLOR',
    'DENSE_TREES_COLOR',
    'WATER_COLOR',
    'BURNING_COLOR',
    'BURNED_COLOR',
    'CELL_COLORS',
    'PALETTE',
    'to_rgb',

    # UI colors
    'BLACK',
    'WHITE',
    'PANEL_COLOR',

    # Default parameters
    'DEFAULT_WINDOW_SIZE',
    'DEFAULT_CELL_SIZE',
    'DEFAULT_FPS',
    'ZOOM_STEP',
    'PANEL_HEIGHT',
]
