"""UI components for the forest fire visualization.

The info panel shows the step number, pause status, a census of burning
and burned cells, and the keyboard shortcuts.
"""

from typing import TYPE_CHECKING

import pygame

from forest_fire.cell import CellType
from .colors import PANEL_COLOR, PANEL_HEIGHT, WHITE

if TYPE_CHECKING:
    from forest_fire.model import FireModel


class InfoPanel:
    """Displays simulation information at the bottom of the screen.

    Attributes:
        font: Main font for primary information.
        small_font: Smaller font for the shortcuts.
    """

    def __init__(self) -> None:
        """Initialize the info panel with fonts."""
        self.font = pygame.font.Font(None, 26)
        self.small_font = pygame.font.Font(None, 20)

    def draw(self, screen: pygame.Surface, model: "FireModel", paused: bool) -> None:
        """Draw the panel along the bottom edge of ``screen``."""
        width, height = screen.get_size()
        panel_y = height - PANEL_HEIGHT

        panel_surface = pygame.Surface((width, PANEL_HEIGHT), pygame.SRCALPHA)
        panel_surface.fill((*PANEL_COLOR, 180))
        screen.blit(panel_surface, (0, panel_y))

        counts = model.grid.counts()
        status = "PAUSED" if paused else "RUNNING"
        summary = (
            f"Step: {model.tick}   {status}   "
            f"Burning: {counts[CellType.Burning]}   Burned: {counts[CellType.Burned]}"
        )
        text = self.font.render(summary, True, WHITE)
        screen.blit(text, (10, panel_y + (PANEL_HEIGHT - text.get_height()) // 2))

        help_text = self.small_font.render(
            "Drag = Pan  Wheel = Zoom  SPACE = Pause  R = Reset  ESC = Quit", True, WHITE
        )
        screen.blit(
            help_text,
            (width - help_text.get_width() - 10, panel_y + (PANEL_HEIGHT - help_text.get_height()) // 2),
        )
