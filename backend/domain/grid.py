"""
Grid entity - the fixed-size board the snake moves on.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

Position = Tuple[int, int]


@dataclass(frozen=True)
class Grid:
    """
    Board dimensions and wall policy.

    Attributes:
        rows, cols: board dimensions (positive)
        wrap_walls: if True, crossing an edge re-enters from the opposite one;
            if False, leaving the board is lethal
    """

    rows: int
    cols: int
    wrap_walls: bool = False

    @property
    def cell_count(self) -> int:
        return self.rows * self.cols

    @property
    def center(self) -> Position:
        return (self.cols // 2, self.rows // 2)

    def contains(self, position: Position) -> bool:
        x, y = position
        return 0 <= x < self.cols and 0 <= y < self.rows

    def step(self, position: Position, direction: Position) -> Optional[Position]:
        """
        Return the cell reached by moving one step from position.

        Returns None when the step leaves a walled board.
        """
        x = position[0] + direction[0]
        y = position[1] + direction[1]
        if self.wrap_walls:
            return ((x + self.cols) % self.cols, (y + self.rows) % self.rows)
        if not self.contains((x, y)):
            return None
        return (x, y)
