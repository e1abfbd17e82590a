"""
Tests for input sources: autopilot players, the keyboard map and the registry.
"""

import pytest
import random
import sys
import os
from unittest.mock import Mock

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain import GameEngine, GameSnapshot, GameState, UP, DOWN, LEFT, RIGHT, STILL, VALID_DIRECTIONS
from players import (
    RandomPlayer,
    GreedyPlayer,
    KeyboardInput,
    Command,
    get_player_class,
    list_players,
    AVAILABLE_PLAYERS,
)


def make_snapshot(snake, food=(5, 5), direction=STILL, rows=10, cols=10):
    return GameSnapshot(
        tick_number=0,
        rows=rows,
        cols=cols,
        snake=snake,
        food=food,
        score=0,
        speed=70,
        state=GameState.RUNNING,
        direction=direction,
    )


class TestRandomPlayer:
    """Tests for the RandomPlayer class."""

    def test_returns_valid_direction(self):
        """get_direction() returns one of the four moves."""
        player = RandomPlayer(rng=random.Random(0))
        assert player.get_direction(make_snapshot([(5, 5)])) in VALID_DIRECTIONS

    def test_avoids_walls_when_possible(self):
        """In the top-left corner only RIGHT and DOWN are safe."""
        player = RandomPlayer(rng=random.Random(1))
        snapshot = make_snapshot([(0, 0)])
        for _ in range(20):
            assert player.get_direction(snapshot) in {RIGHT, DOWN}

    def test_wrapping_makes_edges_safe(self):
        """With wrapping walls every direction from a corner is safe."""
        player = RandomPlayer(wrap_walls=True, rng=random.Random(2))
        snapshot = make_snapshot([(0, 0)])
        seen = {player.get_direction(snapshot) for _ in range(100)}
        assert seen == VALID_DIRECTIONS

    def test_avoids_own_body(self):
        """The random player never steers into its body or reverses."""
        player = RandomPlayer(rng=random.Random(3))
        snapshot = make_snapshot([(5, 5), (4, 5), (4, 4), (5, 4)], direction=RIGHT)
        for _ in range(20):
            assert player.get_direction(snapshot) in {RIGHT, DOWN}

    def test_no_safe_move_still_returns_direction(self):
        """When boxed in, some direction is still returned."""
        player = RandomPlayer(rng=random.Random(4))
        snapshot = make_snapshot([(0, 0), (1, 0), (1, 1), (0, 1)], rows=2, cols=2, direction=LEFT)
        assert player.get_direction(snapshot) in VALID_DIRECTIONS


class TestGreedyPlayer:
    """Tests for the GreedyPlayer class."""

    def test_moves_toward_food(self):
        """The greedy player closes the distance to the food."""
        player = GreedyPlayer()
        assert player.get_direction(make_snapshot([(2, 5)], food=(7, 5))) == RIGHT
        assert player.get_direction(make_snapshot([(5, 8)], food=(5, 1))) == UP

    def test_keeps_direction_on_tie(self):
        """Equal distances prefer the current direction."""
        player = GreedyPlayer()
        snapshot = make_snapshot([(2, 2)], food=(5, 5), direction=DOWN)
        assert player.get_direction(snapshot) == DOWN

    def test_uses_wrap_shortcut(self):
        """With wrapping, crossing the edge can be the shortest route."""
        player = GreedyPlayer(wrap_walls=True)
        assert player.get_direction(make_snapshot([(1, 5)], food=(9, 5))) == LEFT

    def test_avoids_body(self):
        """The greedy player will not take a shorter path through its body."""
        player = GreedyPlayer()
        snapshot = make_snapshot([(5, 5), (5, 4), (6, 4), (6, 5)], food=(8, 5), direction=DOWN)
        assert player.get_direction(snapshot) == DOWN

    def test_boxed_in_returns_none(self):
        """No safe move means no opinion."""
        player = GreedyPlayer()
        snapshot = make_snapshot([(0, 0), (1, 0), (1, 1), (0, 1)], rows=2, cols=2, direction=LEFT, food=None)
        assert player.get_direction(snapshot) is None

    def test_eats_in_engine(self):
        """Driving a real engine, the greedy player eats the food."""
        engine = GameEngine(rows=9, cols=9, rng=random.Random(11))
        engine.start()
        engine.set_food((7, 4))
        player = GreedyPlayer()
        now = 0
        for _ in range(10):
            direction = player.get_direction(engine.snapshot())
            engine.set_direction(*direction)
            engine.advance(now)
            now += 70
            if engine.get_score():
                break
        assert engine.get_score() == 1


class TestKeyboardInput:
    """Tests for the keyboard key map."""

    @pytest.mark.parametrize("key,direction", [
        ("w", UP), ("ArrowUp", UP),
        ("a", LEFT), ("ArrowLeft", LEFT),
        ("s", DOWN), ("ArrowDown", DOWN),
        ("d", RIGHT), ("ArrowRight", RIGHT),
    ])
    def test_direction_keys(self, key, direction):
        """Movement keys map to direction vectors."""
        assert KeyboardInput().parse(key) == (Command.MOVE, direction)

    def test_pause_and_reset_keys(self):
        """p/P toggle pause and space resets."""
        keyboard = KeyboardInput()
        assert keyboard.parse("p") == (Command.TOGGLE_PAUSE, None)
        assert keyboard.parse("P") == (Command.TOGGLE_PAUSE, None)
        assert keyboard.parse(" ") == (Command.RESET, None)

    def test_unknown_key_not_consumed(self):
        """Unknown keys are left for the host."""
        engine = Mock()
        assert KeyboardInput().handle_key(engine, "x") is False
        engine.assert_not_called()

    def test_handle_key_forwards_to_engine(self):
        """Consumed keys call the matching engine operation."""
        engine = Mock()
        keyboard = KeyboardInput()

        assert keyboard.handle_key(engine, "d") is True
        engine.set_direction.assert_called_once_with(1, 0)

        keyboard.handle_key(engine, "p")
        engine.toggle_pause.assert_called_once()

        keyboard.handle_key(engine, " ")
        engine.reset.assert_called_once()

    def test_reversal_key_ignored_by_engine(self):
        """A reversal key reaches the engine, which ignores it."""
        engine = GameEngine(rng=random.Random(0))
        engine.start()
        engine.set_direction(*RIGHT)
        engine.set_food((9, 8))
        engine.advance(0)
        KeyboardInput().handle_key(engine, "a")
        assert engine.get_direction() == RIGHT


class TestRegistry:
    """Tests for the player registry."""

    def test_lookup(self):
        """Known names resolve to player classes."""
        assert get_player_class("random") is RandomPlayer
        assert get_player_class(" Greedy ") is GreedyPlayer

    def test_default_is_greedy(self):
        """An empty name falls back to the greedy player."""
        assert get_player_class(None) is GreedyPlayer
        assert get_player_class("") is GreedyPlayer

    def test_unknown_raises(self):
        """Unknown names raise ValueError listing the options."""
        with pytest.raises(ValueError, match="random"):
            get_player_class("minimax")

    def test_list_players_matches_registry(self):
        """list_players() describes every registered player."""
        assert [entry["key"] for entry in list_players()] == AVAILABLE_PLAYERS
