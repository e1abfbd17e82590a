"""
Greedy player implementation - heads for the food along the shortest safe step.
"""

from typing import Optional

from domain.game_state import GameSnapshot
from .base import Player, Direction, next_cell, safe_directions


class GreedyPlayer(Player):
    """
    Picks the safe move that brings the head closest to the food.

    Distance is Manhattan, measured around the edges when walls wrap. Ties
    keep the current direction.
    """

    name = "greedy"

    def __init__(self, wrap_walls: bool = False):
        self.wrap_walls = wrap_walls

    def _distance(self, a, b, rows: int, cols: int) -> int:
        dx = abs(a[0] - b[0])
        dy = abs(a[1] - b[1])
        if self.wrap_walls:
            dx = min(dx, cols - dx)
            dy = min(dy, rows - dy)
        return dx + dy

    def get_direction(self, snapshot: GameSnapshot) -> Optional[Direction]:
        candidates = safe_directions(snapshot, self.wrap_walls)
        if not candidates:
            return None
        if snapshot.food is None:
            return candidates[0]

        def score(direction):
            cell = next_cell(snapshot, direction, self.wrap_walls)
            distance = self._distance(cell, snapshot.food, snapshot.rows, snapshot.cols)
            return (distance, direction != snapshot.direction)

        return min(candidates, key=score)
