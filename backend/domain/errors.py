"""
Exceptions raised by the game engine.
"""


class SnakeGameError(Exception):
    """Base class for snake game errors."""


class GridFull(SnakeGameError):
    """Raised when food cannot be placed because every cell is occupied."""

    def __init__(self, cell_count: int):
        super().__init__(f"No free cell left on a grid of {cell_count} cells")
        self.cell_count = cell_count
