"""Interactive Pygame viewer for the forest fire simulation.

The viewer advances the model one step per frame and draws the grid.
Dragging with the left mouse button pans the view and the mouse wheel
zooms it.
"""

import logging

import pygame

from forest_fire.model import FireModel
from .colors import DEFAULT_CELL_SIZE, DEFAULT_FPS, DEFAULT_WINDOW_SIZE, ZOOM_STEP
from .renderer import GridRenderer
from .ui import InfoPanel

logger = logging.getLogger(__name__)


class SimulationViewer:
    """Main viewer loop with Pygame visualization.

    Handles event processing and coordination between the fire spread
    model and visualization components.

    Attributes:
        model: The fire spread simulation model.
        screen: Pygame display surface.
        clock: Pygame clock for FPS control.
        renderer: Grid renderer for drawing cells.
        info_panel: UI panel for displaying simulation info.
        paused: Whether the simulation is paused.
        fps: Frames (and steps) per second.
    """

    def __init__(
        self,
        model: FireModel,
        window_size: tuple[int, int] = DEFAULT_WINDOW_SIZE,
        cell_size: float = DEFAULT_CELL_SIZE,
        fps: int = DEFAULT_FPS,
    ) -> None:
        """Initialize the viewer.

        Args:
            model: Model to display and advance.
            window_size: Window size in pixels.
            cell_size: Size of each cell in pixels at zoom 1.0.
            fps: Frames (and steps) per second.
        """
        pygame.init()
        self.screen = pygame.display.set_mode(window_size)
        pygame.display.set_caption("Forest Fire Simulation")
        self.clock = pygame.time.Clock()

        self.model = model
        self.renderer = GridRenderer(cell_size)
        self.info_panel = InfoPanel()
        self.fps = fps
        self.paused = False
        self.dragging = False
        self.last_mouse_pos = pygame.Vector2(0, 0)

    def _handle_keyboard_events(self, event: pygame.event.Event) -> bool:
        """Handle keyboard input events.

        Returns:
            False if the viewer should quit, True otherwise.
        """
        if event.key == pygame.K_ESCAPE:
            return False

        elif event.key == pygame.K_SPACE:
            self.paused = not self.paused

        elif event.key == pygame.K_r:
            logger.info("Resetting simulation")
            self.model.reset()
            self.paused = False

        return True

    def _handle_mouse_events(self, event: pygame.event.Event) -> None:
        """Pan on left-button drag, zoom on wheel."""
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.dragging = True
            self.last_mouse_pos = pygame.Vector2(event.pos)

        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self.dragging = False

        elif event.type == pygame.MOUSEMOTION and self.dragging:
            mouse_pos = pygame.Vector2(event.pos)
            self.renderer.pan(mouse_pos - self.last_mouse_pos)
            self.last_mouse_pos = mouse_pos

        elif event.type == pygame.MOUSEWHEEL:
            if event.y > 0:
                self.renderer.zoom_at(ZOOM_STEP, pygame.mouse.get_pos())
            elif event.y < 0:
                self.renderer.zoom_at(1 / ZOOM_STEP, pygame.mouse.get_pos())

    def _update_simulation(self) -> None:
        """Advance the model by one step if not paused."""
        if self.paused or not self.model.running:
            return
        self.model.step()

    def _render(self) -> None:
        """Render all visual components to the screen."""
        self.renderer.draw(self.screen, self.model.grid)
        self.info_panel.draw(self.screen, self.model, self.paused)
        pygame.display.flip()

    def run(self) -> None:
        """Run the main loop until the user quits."""
        running = True

        while running:
            self._render()

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False

                elif event.type == pygame.KEYDOWN:
                    if not self._handle_keyboard_events(event):
                        running = False

                else:
                    self._handle_mouse_events(event)

            self._update_simulation()
            self.clock.tick(self.fps)

        pygame.quit()
