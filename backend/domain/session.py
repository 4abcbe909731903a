"""
GameSession - owns every piece of mutable game state for one player.
"""

import logging
import random
from typing import Optional, Tuple

from .constants import TICK_INTERVAL_MS
from .direction import DirectionController
from .engine import SimulationEngine
from .food import FoodPlacer
from .game_state import GameState
from .grid import GridGeometry

logger = logging.getLogger(__name__)


class GameSession:
    """
    Holds score, game-over flag and speed, and orchestrates start/restart.

    Timer, input and render collaborators share a single handle to the
    session: the timer calls tick(), input calls request_direction(), and
    renderers read snapshot().
    """

    def __init__(self, grid: Optional[GridGeometry] = None, rng: Optional[random.Random] = None):
        self.grid = grid if grid is not None else GridGeometry()
        self.food_placer = FoodPlacer(self.grid, rng)
        self.direction_controller = DirectionController()
        self.engine: Optional[SimulationEngine] = None
        self.tick_interval_ms = TICK_INTERVAL_MS
        self.start()

    def start(self):
        """Reset everything to the fixed initial configuration."""
        self.engine = SimulationEngine(self.grid, self.food_placer)
        self.direction_controller.reset()
        self.tick_interval_ms = TICK_INTERVAL_MS
        logger.info(f"Game started on a {self.grid.width}x{self.grid.height} grid")

    def restart(self):
        self.start()

    @property
    def score(self) -> int:
        return self.engine.score

    @property
    def is_game_over(self) -> bool:
        return self.engine.is_game_over

    @property
    def direction(self) -> str:
        return self.direction_controller.current

    @property
    def snake(self) -> Tuple[Tuple[int, int], ...]:
        return tuple(self.engine.snake.positions)

    @property
    def food(self) -> Tuple[int, int]:
        return self.engine.food

    def request_direction(self, direction: str) -> bool:
        """Forward a turn request; ignored once the game is over."""
        if self.is_game_over:
            return False
        return self.direction_controller.request_direction(direction)

    def tick(self) -> str:
        return self.engine.tick(self.direction_controller.current)

    def snapshot(self) -> GameState:
        engine = self.engine
        return GameState(
            tick_number=engine.tick_count,
            snake=tuple(engine.snake.positions),
            food=engine.food,
            score=engine.score,
            is_game_over=engine.is_game_over,
            direction=self.direction_controller.current,
            width=self.grid.width,
            height=self.grid.height,
            death_reason=engine.snake.death_reason
        )
