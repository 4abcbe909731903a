"""
GameState entity - a snapshot of the game at a point in time.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class GameState:
    """
    A read-only snapshot of the session, handed to render collaborators.

    Attributes:
        tick_number: how many ticks have been applied since start
        snake: tuple of (x, y) from head to tail
        food: (x, y) of the food
        score: food eaten so far
        is_game_over: whether the game has ended
        direction: heading the next tick will use
        width, height: board dimensions
        death_reason: 'wall', 'self' or None
    """

    tick_number: int
    snake: Tuple[Tuple[int, int], ...]
    food: Tuple[int, int]
    score: int
    is_game_over: bool
    direction: str
    width: int
    height: int
    death_reason: Optional[str] = None

    @property
    def head(self) -> Tuple[int, int]:
        return self.snake[0]

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        F = food
        H = snake head
        o = snake body
        (0,0) is the top left, matching the screen layout.
        """
        board = [['.' for _ in range(self.width)] for _ in range(self.height)]

        fx, fy = self.food
        board[fy][fx] = 'F'

        for pos_idx, (x, y) in enumerate(self.snake):
            board[y][x] = 'H' if pos_idx == 0 else 'o'

        result = []
        for y in range(self.height):
            result.append(f"{y:2d} {' '.join(board[y])}")

        # Last digit only so the columns stay aligned
        result.append("   " + " ".join(str(i % 10) for i in range(self.width)))

        return "\n".join(result)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tick_number": self.tick_number,
            "snake": [list(cell) for cell in self.snake],
            "food": list(self.food),
            "score": self.score,
            "is_game_over": self.is_game_over,
            "direction": self.direction,
            "death_reason": self.death_reason,
            "width": self.width,
            "height": self.height,
        }

    def __repr__(self):
        return (
            f"<GameState tick={self.tick_number}, head={self.head}, length={len(self.snake)}, "
            f"food={self.food}, score={self.score}, game_over={self.is_game_over}>"
        )
