"""
Snake entity for the game engine.
"""

from collections import deque
from typing import List, Tuple, Optional


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: deque of (x, y) from head at index 0 to tail at the end
        alive: whether the snake is still alive
        death_reason: 'wall' or 'self'
        death_tick: the tick number on which the snake died
    """

    def __init__(self, positions: List[Tuple[int, int]]):
        if not positions:
            raise ValueError("A snake needs at least one cell.")
        self.positions = deque(positions)
        self.alive = True
        self.death_reason: Optional[str] = None
        self.death_tick: Optional[int] = None

    @property
    def head(self) -> Tuple[int, int]:
        """Return the head position (first element)."""
        return self.positions[0]

    @property
    def tail(self) -> Tuple[int, int]:
        """Return the tail position (last element)."""
        return self.positions[-1]

    def hits_body(self, cell: Tuple[int, int]) -> bool:
        """True if ``cell`` lies on any segment after the head."""
        return any(segment == cell for segment in list(self.positions)[1:])

    def kill(self, reason: str, tick: int):
        self.alive = False
        self.death_reason = reason
        self.death_tick = tick

    def __len__(self):
        return len(self.positions)

    def __repr__(self):
        return f"<Snake head={self.head} length={len(self)} alive={self.alive}>"
