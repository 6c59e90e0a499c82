"""Exceptions raised by the forest fire core."""


class InvalidConfiguration(ValueError):
    """Raised when a grid or scenario is constructed with bad parameters."""


class OutOfBounds(IndexError):
    """Raised when a cell outside the grid is accessed."""

    def __init__(self, x: int, y: int, size: int):
        super().__init__(f"Cell ({x}, {y}) is outside a {size}x{size} grid")
        self.x = x
        self.y = y
        self.size = size
