"""
Tests for the domain entities: Grid, Snake, GameSnapshot, GameConfig.
"""

import pytest
import sys
import os
from collections import deque

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain import Grid, Snake, GameSnapshot, GameState, GameConfig, ConfigurationError, RIGHT, UP


class TestGrid:
    """Tests for the Grid class."""

    def test_center(self):
        """Center of a 17x17 grid is (8, 8)."""
        assert Grid(17, 17).center == (8, 8)

    def test_contains(self):
        """contains() checks both axes against cols and rows."""
        grid = Grid(rows=3, cols=5)
        assert grid.contains((4, 2))
        assert not grid.contains((5, 0))
        assert not grid.contains((0, 3))
        assert not grid.contains((-1, 0))

    def test_step_walled_returns_none_off_board(self):
        """Stepping off a walled grid returns None."""
        grid = Grid(rows=3, cols=3)
        assert grid.step((2, 1), RIGHT) is None
        assert grid.step((1, 1), RIGHT) == (2, 1)

    def test_step_wrapping(self):
        """Stepping off a wrapping grid comes back on the other side."""
        grid = Grid(rows=3, cols=4, wrap_walls=True)
        assert grid.step((3, 1), RIGHT) == (0, 1)
        assert grid.step((1, 0), UP) == (1, 2)

    def test_grid_is_immutable(self):
        """Grid dimensions cannot be changed after construction."""
        grid = Grid(3, 3)
        with pytest.raises(Exception):
            grid.rows = 4


class TestSnake:
    """Tests for the Snake class."""

    def test_snake_initialization_with_single_position(self):
        """Snake initializes with a single position."""
        snake = Snake([(5, 5)])
        assert list(snake.positions) == [(5, 5)]
        assert snake.alive is True
        assert snake.death_reason is None

    def test_snake_requires_a_cell(self):
        """An empty snake is rejected."""
        with pytest.raises(ValueError):
            Snake([])

    def test_head_and_membership(self):
        """head is the first cell; membership covers every cell."""
        snake = Snake([(5, 5), (4, 5), (3, 5)])
        assert snake.head == (5, 5)
        assert len(snake) == 3
        assert (4, 5) in snake

    def test_snake_positions_is_deque(self):
        """Snake positions are stored as a deque for efficient operations."""
        assert isinstance(Snake([(5, 5)]).positions, deque)

    def test_move_to_drops_tail(self):
        """move_to() without growth returns the removed tail."""
        snake = Snake([(5, 5), (4, 5)])
        assert snake.move_to((6, 5)) == (4, 5)
        assert list(snake.positions) == [(6, 5), (5, 5)]

    def test_move_to_grows(self):
        """move_to() with growth keeps the tail."""
        snake = Snake([(5, 5)])
        assert snake.move_to((6, 5), grow=True) is None
        assert list(snake.positions) == [(6, 5), (5, 5)]

    def test_kill_and_revive(self):
        """kill() records the death; revive() clears it."""
        snake = Snake([(5, 5)])
        snake.kill("wall")
        assert snake.alive is False
        assert snake.death_reason == "wall"
        snake.revive()
        assert snake.alive is True
        assert snake.death_reason is None


class TestGameSnapshot:
    """Tests for the GameSnapshot class."""

    def _snapshot(self, **overrides):
        fields = dict(
            tick_number=3,
            rows=3,
            cols=4,
            snake=[(1, 1), (0, 1)],
            food=(3, 0),
            score=2,
            speed=68,
            state=GameState.RUNNING,
            direction=RIGHT,
        )
        fields.update(overrides)
        return GameSnapshot(**fields)

    def test_print_board(self):
        """print_board() draws head, body and food with row 0 on top."""
        assert self._snapshot().print_board() == "...F\nSH..\n...."

    def test_print_board_without_food(self):
        """A missing food cell is simply not drawn."""
        board = self._snapshot(food=None).print_board()
        assert "F" not in board

    def test_to_dict(self):
        """to_dict() is JSON friendly."""
        data = self._snapshot().to_dict()
        assert data["snake"] == [[1, 1], [0, 1]]
        assert data["food"] == [3, 0]
        assert data["state"] == "running"
        assert data["direction"] == [1, 0]

    def test_repr(self):
        """GameSnapshot has a useful string representation."""
        text = repr(self._snapshot())
        assert "tick=3" in text
        assert "score=2" in text


class TestGameConfig:
    """Tests for GameConfig validation."""

    def test_defaults_are_valid(self):
        """The default config validates and returns itself."""
        config = GameConfig()
        assert config.validate() is config
        assert (config.rows, config.cols, config.initial_speed, config.die_from_walls) == (17, 17, 70, True)

    def test_bool_is_not_a_dimension(self):
        """True is not accepted as a grid dimension."""
        with pytest.raises(ConfigurationError):
            GameConfig(rows=True).validate()
