"""
Direction handling for the snake.
"""

from .constants import INITIAL_DIRECTION, OPPOSITES, VALID_MOVES


class DirectionController:
    """
    Holds the current heading and rejects 180 degree reversals.

    There is no queue of pending turns: each request is checked against the
    current direction and the latest accepted one is what the next tick uses.
    """

    def __init__(self, initial: str = INITIAL_DIRECTION):
        if initial not in VALID_MOVES:
            raise ValueError(f"Invalid direction: {initial!r}")
        self._initial = initial
        self.current = initial

    def request_direction(self, proposed: str) -> bool:
        """
        Switch to ``proposed`` unless it reverses the current direction.

        Returns:
            True if the direction was accepted, False if it was ignored
        """
        if proposed not in VALID_MOVES:
            raise ValueError(f"Invalid direction: {proposed!r}")
        if OPPOSITES[self.current] == proposed:
            return False
        self.current = proposed
        return True

    def reset(self):
        self.current = self._initial
