"""
Food placement on the board.
"""

import random
from typing import Iterable, Optional

from .errors import GridFull
from .grid import Cell, GridGeometry


class FoodPlacer:
    """
    Picks a uniformly random free cell for the next food item.

    The random source is injected so placement can be made deterministic;
    anything exposing ``choice(sequence)`` works (e.g. ``random.Random(seed)``).
    """

    def __init__(self, grid: GridGeometry, rng: Optional[random.Random] = None):
        self.grid = grid
        self.rng = rng if rng is not None else random.Random()

    def place(self, excluding: Iterable[Cell] = ()) -> Cell:
        """
        Return a random cell that is not in ``excluding``.

        Raises:
            GridFull: if every cell of the grid is excluded
        """
        occupied = set(excluding)
        free_cells = [cell for cell in self.grid.cells() if cell not in occupied]
        if not free_cells:
            raise GridFull(self.grid.cell_count())
        return self.rng.choice(free_cells)
