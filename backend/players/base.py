"""
Base player interface for autopilots that steer the snake.
"""

from typing import List, Optional, Tuple

from domain.constants import VALID_DIRECTIONS
from domain.game_state import GameSnapshot

Direction = Tuple[int, int]


class Player:
    """
    Base class/interface for autopilot logic.

    A player looks at a snapshot and returns the direction to steer in next.
    """

    name = "base"

    def get_direction(self, snapshot: GameSnapshot) -> Optional[Direction]:
        """
        Return a move direction given the current snapshot.

        Args:
            snapshot: Current state of the game

        Returns:
            One of UP, DOWN, LEFT, RIGHT, or None to keep the current direction
        """
        raise NotImplementedError


def next_cell(snapshot: GameSnapshot, direction: Direction, wrap_walls: bool) -> Optional[Tuple[int, int]]:
    """Cell the head would reach moving in direction, or None off a walled board."""
    head_x, head_y = snapshot.head
    x, y = head_x + direction[0], head_y + direction[1]
    if wrap_walls:
        return (x % snapshot.cols, y % snapshot.rows)
    if x < 0 or x >= snapshot.cols or y < 0 or y >= snapshot.rows:
        return None
    return (x, y)


def safe_directions(snapshot: GameSnapshot, wrap_walls: bool) -> List[Direction]:
    """
    Directions that avoid walls (when lethal), body cells and reversals.
    """
    body = set(snapshot.snake) if len(snapshot.snake) > 1 else set()
    reverse = (-snapshot.direction[0], -snapshot.direction[1])
    safe: List[Direction] = []
    for direction in sorted(VALID_DIRECTIONS):
        if len(snapshot.snake) > 1 and direction == reverse:
            continue
        cell = next_cell(snapshot, direction, wrap_walls)
        if cell is None or cell in body:
            continue
        safe.append(direction)
    return safe
