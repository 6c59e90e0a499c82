"""Grid rendering functionality for the forest fire simulation.

This module provides the GridRenderer class which draws the cellular
automaton grid with a color per cell state, panned and zoomed by the viewer.
"""

from typing import TYPE_CHECKING

import numpy as np
import pygame

from .colors import DEFAULT_CELL_SIZE, WHITE, to_rgb

if TYPE_CHECKING:
    from forest_fire.grid import Grid


class GridRenderer:
    """Renders the forest grid onto a Pygame surface.

    The grid is converted to an RGB image in one pass and scaled to the
    current zoom, rather than drawing one rectangle per cell.

    Attributes:
        cell_size: Size of each cell in pixels at zoom 1.0.
        offset: Pan offset of the grid's top-left corner in pixels.
        zoom: Current zoom level.
    """

    def __init__(self, cell_size: float = DEFAULT_CELL_SIZE) -> None:
        """Initialize the grid renderer.

        Args:
            cell_size: Size of each cell in pixels at zoom 1.0.
        """
        self.cell_size = cell_size
        self.offset = pygame.Vector2(0, 0)
        self.zoom = 1.0

    def pan(self, delta: pygame.Vector2) -> None:
        """Move the grid by ``delta`` screen pixels."""
        self.offset += delta

    def zoom_at(self, factor: float, anchor: tuple[int, int]) -> None:
        """Zoom by ``factor`` keeping the grid point under ``anchor`` fixed."""
        anchor_vec = pygame.Vector2(anchor)
        self.offset = anchor_vec + (self.offset - anchor_vec) * factor
        self.zoom *= factor

    def grid_surface(self, grid: "Grid") -> pygame.Surface:
        """Build an unscaled surface with one pixel per cell."""
        rgb = to_rgb(grid.snapshot())
        # surfarray expects [x, y, 3]
        return pygame.surfarray.make_surface(np.ascontiguousarray(rgb.transpose(1, 0, 2)))

    def draw(self, screen: pygame.Surface, grid: "Grid") -> None:
        """Draw the grid at the current pan offset and zoom."""
        screen.fill(WHITE)
        side = max(1, int(grid.size * self.cell_size * self.zoom))
        image = pygame.transform.scale(self.grid_surface(grid), (side, side))
        screen.blit(image, (int(self.offset.x), int(self.offset.y)))
