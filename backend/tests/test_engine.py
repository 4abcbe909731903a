"""
Tests for the simulation engine tick.
"""

import os
import random
import sys
from unittest.mock import Mock

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain import UP, DOWN, LEFT, RIGHT, FoodPlacer, GridFull, GridGeometry, SimulationEngine
from domain.constants import (
    ATE,
    GAME_OVER,
    HALTED,
    MOVED,
    RUNNING,
    SELF_COLLISION,
    WALL_COLLISION,
)


def make_engine(snake=None, food=None, grid=None, placer=None):
    grid = grid or GridGeometry()
    placer = placer or FoodPlacer(grid, random.Random(0))
    return SimulationEngine(grid, placer, snake=snake, food=food)


def scripted_placer(*cells):
    """A FoodPlacer stand-in that hands out the given cells in order."""
    placer = Mock(spec=FoodPlacer)
    placer.place.side_effect = list(cells)
    return placer


class TestInitialState:
    """Tests for the engine's starting configuration."""

    def test_defaults(self):
        engine = make_engine()
        assert list(engine.snake.positions) == [(8, 8)]
        assert engine.food == (15, 15)
        assert engine.score == 0
        assert engine.tick_count == 0
        assert engine.state == RUNNING
        assert engine.is_game_over is False

    def test_snake_out_of_bounds_raises(self):
        with pytest.raises(ValueError):
            make_engine(snake=[(20, 8)])

    def test_food_out_of_bounds_raises(self):
        with pytest.raises(ValueError):
            make_engine(food=(-1, 3))


class TestMovement:
    """Tests for plain movement without food."""

    def test_tick_moves_head_right(self):
        """(8,8) moving RIGHT lands on (9,8) and stays length 1."""
        engine = make_engine()

        outcome = engine.tick(RIGHT)

        assert outcome == MOVED
        assert list(engine.snake.positions) == [(9, 8)]
        assert engine.food == (15, 15)
        assert engine.score == 0
        assert engine.tick_count == 1

    @pytest.mark.parametrize("direction,expected", [
        (UP, (8, 7)),
        (DOWN, (8, 9)),
        (LEFT, (7, 8)),
        (RIGHT, (9, 8)),
    ])
    def test_head_shift_per_direction(self, direction, expected):
        engine = make_engine()
        engine.tick(direction)
        assert engine.snake.head == expected

    def test_body_follows_head(self):
        """Without food, the tail is dropped and length is unchanged."""
        engine = make_engine(snake=[(5, 5), (4, 5), (3, 5)])

        engine.tick(UP)

        assert list(engine.snake.positions) == [(5, 4), (5, 5), (4, 5)]


class TestCollisions:
    """Tests for wall and self collisions."""

    def test_wall_collision_on_right_edge(self):
        """Head at (19,8) moving RIGHT ends the game with the score unchanged."""
        engine = make_engine(snake=[(19, 8)])

        outcome = engine.tick(RIGHT)

        assert outcome == WALL_COLLISION
        assert engine.state == GAME_OVER
        assert engine.score == 0
        assert list(engine.snake.positions) == [(19, 8)]
        assert engine.snake.alive is False
        assert engine.snake.death_reason == "wall"

    @pytest.mark.parametrize("snake,direction", [
        ([(0, 5)], LEFT),
        ([(5, 0)], UP),
        ([(5, 19)], DOWN),
    ])
    def test_wall_collision_on_other_edges(self, snake, direction):
        engine = make_engine(snake=snake)
        assert engine.tick(direction) == WALL_COLLISION
        assert engine.is_game_over is True

    def test_self_collision(self):
        engine = make_engine(snake=[(5, 5), (6, 5), (6, 6), (5, 6), (4, 6), (4, 7)])

        outcome = engine.tick(DOWN)

        assert outcome == SELF_COLLISION
        assert engine.is_game_over is True
        assert engine.snake.death_reason == "self"

    def test_moving_into_current_tail_is_a_collision(self):
        """The tail cell still counts even though it would move away."""
        engine = make_engine(snake=[(5, 5), (6, 5), (6, 6), (5, 6)])

        assert engine.tick(DOWN) == SELF_COLLISION

    def test_reversing_into_neck_is_a_collision(self):
        engine = make_engine(snake=[(5, 5), (4, 5)])
        assert engine.tick(LEFT) == SELF_COLLISION

    def test_single_cell_snake_cannot_hit_itself(self):
        engine = make_engine(snake=[(5, 5)])
        for direction in (RIGHT, DOWN, LEFT, UP):
            assert engine.tick(direction) == MOVED
        assert engine.is_game_over is False

    def test_game_over_freezes_state(self):
        """Ticks after game over change nothing."""
        engine = make_engine(snake=[(19, 8), (18, 8)], food=(3, 3))
        engine.tick(RIGHT)
        frozen = (list(engine.snake.positions), engine.food, engine.score, engine.tick_count)

        for direction in (UP, DOWN, LEFT, RIGHT):
            assert engine.tick(direction) == HALTED

        assert (list(engine.snake.positions), engine.food, engine.score, engine.tick_count) == frozen


class TestFood:
    """Tests for eating, growth and respawn."""

    def test_eating_grows_snake_and_scores(self):
        placer = scripted_placer((0, 0))
        engine = make_engine(snake=[(8, 8)], food=(9, 8), placer=placer)

        outcome = engine.tick(RIGHT)

        assert outcome == ATE
        assert list(engine.snake.positions) == [(9, 8), (8, 8)]
        assert engine.score == 1
        assert engine.food == (0, 0)

    def test_respawn_excludes_updated_body(self):
        placer = scripted_placer((0, 0))
        engine = make_engine(snake=[(8, 8), (7, 8)], food=(9, 8), placer=placer)

        engine.tick(RIGHT)

        excluded = placer.place.call_args.kwargs["excluding"]
        assert list(excluded) == [(9, 8), (8, 8), (7, 8)]

    def test_respawned_food_is_never_on_snake(self):
        grid = GridGeometry(3, 3)
        engine = make_engine(
            snake=[(0, 0)], food=(1, 0), grid=grid, placer=FoodPlacer(grid, random.Random(7))
        )
        engine.tick(RIGHT)
        assert engine.food not in engine.snake.positions

    def test_length_is_one_plus_food_events(self):
        """Body length after N ticks = 1 + number of foods eaten."""
        placer = scripted_placer((5, 2), (8, 2), (0, 0))
        engine = make_engine(snake=[(2, 2)], food=(3, 2), placer=placer)

        eaten = 0
        for _ in range(6):
            if engine.tick(RIGHT) == ATE:
                eaten += 1
            assert len(engine.snake) == 1 + eaten

        assert eaten == 3
        assert engine.score == 3
        assert engine.snake.head == (8, 2)

    def test_grid_full_leaves_tick_unapplied(self):
        """If no cell is left for food, GridFull propagates and nothing changes."""
        grid = GridGeometry(2, 1)
        engine = make_engine(snake=[(0, 0)], food=(1, 0), grid=grid, placer=FoodPlacer(grid, random.Random(0)))

        with pytest.raises(GridFull):
            engine.tick(RIGHT)

        assert list(engine.snake.positions) == [(0, 0)]
        assert engine.food == (1, 0)
        assert engine.score == 0
        assert engine.tick_count == 0
        assert engine.is_game_over is False
