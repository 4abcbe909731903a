"""
Domain entities for the snake game engine.

This module contains the core game simulation, independent of any
rendering, input or timing concerns.
"""

from .constants import UP, DOWN, LEFT, RIGHT, VALID_MOVES, OPPOSITES, TICK_INTERVAL_MS
from .errors import SnakeGameError, GridFull
from .grid import GridGeometry
from .food import FoodPlacer
from .snake import Snake
from .direction import DirectionController
from .engine import SimulationEngine
from .game_state import GameState
from .session import GameSession

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'OPPOSITES', 'TICK_INTERVAL_MS',
    'SnakeGameError', 'GridFull',
    'GridGeometry',
    'FoodPlacer',
    'Snake',
    'DirectionController',
    'SimulationEngine',
    'GameState',
    'GameSession',
]
