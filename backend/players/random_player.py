"""
Random player implementation - picks random safe moves.
"""

import random

from domain.constants import VALID_DIRECTIONS
from domain.game_state import GameSnapshot
from .base import Player, Direction, safe_directions


class RandomPlayer(Player):
    """
    A random AI that picks a direction that avoids walls and self-collisions.
    """

    name = "random"

    def __init__(self, wrap_walls: bool = False, rng=None):
        self.wrap_walls = wrap_walls
        self._rng = rng if rng is not None else random.Random()

    def get_direction(self, snapshot: GameSnapshot) -> Direction:
        valid_moves = safe_directions(snapshot, self.wrap_walls)

        # If no valid moves, just return a random move (we'll die anyway)
        if not valid_moves:
            return self._rng.choice(sorted(VALID_DIRECTIONS))

        return self._rng.choice(valid_moves)
