"""
Simulation engine - advances the snake one cell per tick.
"""

import logging
from collections import deque
from typing import List, Optional, Tuple

from .constants import (
    ATE,
    DELTAS,
    GAME_OVER,
    HALTED,
    INITIAL_FOOD,
    INITIAL_SNAKE,
    MOVED,
    RUNNING,
    SELF_COLLISION,
    WALL_COLLISION,
)
from .food import FoodPlacer
from .grid import GridGeometry
from .snake import Snake

logger = logging.getLogger(__name__)


class SimulationEngine:
    """
    Manages:
      - Snake body
      - Food position
      - Score
      - Running / game-over state

    The engine never schedules itself; a timer collaborator calls tick()
    once per interval and must stop doing so after game over.
    """

    def __init__(
        self,
        grid: GridGeometry,
        food_placer: FoodPlacer,
        snake: Optional[List[Tuple[int, int]]] = None,
        food: Optional[Tuple[int, int]] = None
    ):
        self.grid = grid
        self.food_placer = food_placer

        body = list(snake) if snake is not None else list(INITIAL_SNAKE)
        for cell in body:
            if not grid.is_in_bounds(cell):
                raise ValueError(f"Snake cell out of bounds at {cell}.")
        food = food if food is not None else INITIAL_FOOD
        if not grid.is_in_bounds(food):
            raise ValueError(f"Food out of bounds at {food}.")

        self.snake = Snake(body)
        self.food: Tuple[int, int] = food
        self.score = 0
        self.tick_count = 0
        self.state = RUNNING

    @property
    def is_game_over(self) -> bool:
        return self.state == GAME_OVER

    def next_head(self, direction: str) -> Tuple[int, int]:
        dx, dy = DELTAS[direction]
        hx, hy = self.snake.head
        return (hx + dx, hy + dy)

    def tick(self, direction: str) -> str:
        """
        Execute one step:
          1) If the game is over, do nothing
          2) Compute the new head from the current direction
          3) Check wall and self collisions against the pre-move body
          4) Prepend the head; on food, respawn it and score, else drop the tail

        Returns:
            One of MOVED, ATE, WALL_COLLISION, SELF_COLLISION or HALTED
        """
        if self.is_game_over:
            return HALTED

        head = self.next_head(direction)

        if not self.grid.is_in_bounds(head):
            return self._end_game(WALL_COLLISION, head)
        # The tail cell still counts even though it would move away this tick
        if self.snake.hits_body(head):
            return self._end_game(SELF_COLLISION, head)

        if head == self.food:
            new_body = [head] + list(self.snake.positions)
            # Placed before committing so GridFull leaves the tick unapplied
            new_food = self.food_placer.place(excluding=new_body)
            self.snake.positions = deque(new_body)
            self.food = new_food
            self.score += 1
            outcome = ATE
            logger.debug(f"Ate food at {head}; score {self.score}, next food at {new_food}")
        else:
            self.snake.positions.appendleft(head)
            self.snake.positions.pop()
            outcome = MOVED

        self.tick_count += 1
        return outcome

    def _end_game(self, reason: str, head: Tuple[int, int]) -> str:
        self.state = GAME_OVER
        self.snake.kill(reason, self.tick_count)
        logger.info(
            f"Game over on tick {self.tick_count}: {reason} collision at {head}. "
            f"Final score: {self.score}"
        )
        return reason

    def __repr__(self):
        return (
            f"<SimulationEngine state={self.state}, tick={self.tick_count}, "
            f"snake={self.snake!r}, food={self.food}, score={self.score}>"
        )
