"""
Snake entity for the game engine.
"""

from collections import deque
from typing import List, Optional, Tuple

Position = Tuple[int, int]


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: deque of (x, y) from head at index 0 to tail at the end
        alive: whether the snake is still alive
        death_reason: e.g., 'wall', 'self', 'board_full'
    """

    def __init__(self, positions: List[Position]):
        if not positions:
            raise ValueError("A snake needs at least one cell.")
        self.positions = deque(positions)
        self.alive = True
        self.death_reason: Optional[str] = None

    @property
    def head(self) -> Position:
        """Return the head position (first element)."""
        return self.positions[0]

    def __len__(self) -> int:
        return len(self.positions)

    def __contains__(self, position) -> bool:
        return position in self.positions

    def move_to(self, new_head: Position, grow: bool = False) -> Optional[Position]:
        """
        Prepend new_head and drop the tail unless growing.

        Returns the removed tail cell, or None when the snake grew.
        """
        self.positions.appendleft(new_head)
        if grow:
            return None
        return self.positions.pop()

    def kill(self, reason: str):
        self.alive = False
        self.death_reason = reason

    def revive(self):
        self.alive = True
        self.death_reason = None
