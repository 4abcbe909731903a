"""
Grid geometry for the game board.
"""

from typing import Iterator, Tuple

from .constants import GRID_WIDTH, GRID_HEIGHT, CELL_SIZE

Cell = Tuple[int, int]


class GridGeometry:
    """
    Fixed-size board of width x height cells.

    Attributes:
        width, height: board dimensions in cells
        cell_size: size of one cell in pixels, used by renderers
    """

    def __init__(self, width: int = GRID_WIDTH, height: int = GRID_HEIGHT, cell_size: int = CELL_SIZE):
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}.")
        if cell_size <= 0:
            raise ValueError(f"Cell size must be positive, got {cell_size}.")
        self.width = width
        self.height = height
        self.cell_size = cell_size

    @property
    def pixel_width(self) -> int:
        return self.width * self.cell_size

    @property
    def pixel_height(self) -> int:
        return self.height * self.cell_size

    def is_in_bounds(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height

    def cell_count(self) -> int:
        return self.width * self.height

    def cells(self) -> Iterator[Cell]:
        """Yield every cell, row by row."""
        for y in range(self.height):
            for x in range(self.width):
                yield (x, y)

    def __repr__(self):
        return f"<GridGeometry {self.width}x{self.height} cell_size={self.cell_size}>"
