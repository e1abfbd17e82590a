"""
Game lifecycle states and the GameSnapshot entity - a read-only view of the
game at a point in time.
"""

from enum import Enum
from typing import List, Optional, Tuple


class GameState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class GameSnapshot:
    """
    A snapshot of the game at a specific point in time.

    Attributes:
        tick_number: number of moves performed since the last reset
        rows, cols: board dimensions
        snake: list of (x, y) from head to tail
        food: (x, y) of the food, or None when the board is full
        score: food eaten since the last reset
        speed: current tick interval in milliseconds
        state: GameState at snapshot time
        direction: current (dx, dy)
        death_reason: why the game ended, if it did
    """

    def __init__(
        self,
        tick_number: int,
        rows: int,
        cols: int,
        snake: List[Tuple[int, int]],
        food: Optional[Tuple[int, int]],
        score: int,
        speed: int,
        state: GameState,
        direction: Tuple[int, int],
        death_reason: Optional[str] = None
    ):
        self.tick_number = tick_number
        self.rows = rows
        self.cols = cols
        self.snake = list(snake)
        self.food = food
        self.score = score
        self.speed = speed
        self.state = state
        self.direction = direction
        self.death_reason = death_reason

    @property
    def head(self) -> Tuple[int, int]:
        return self.snake[0]

    def to_dict(self) -> dict:
        return {
            "tick_number": self.tick_number,
            "rows": self.rows,
            "cols": self.cols,
            "snake": [list(cell) for cell in self.snake],
            "food": list(self.food) if self.food is not None else None,
            "score": self.score,
            "speed": self.speed,
            "state": self.state.value,
            "direction": list(self.direction),
            "death_reason": self.death_reason,
        }

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty cell
        F = food
        S = snake body
        H = snake head
        Row 0 is printed first (top of the board).
        """
        board = [['.' for _ in range(self.cols)] for _ in range(self.rows)]

        if self.food is not None:
            fx, fy = self.food
            board[fy][fx] = 'F'

        for idx, (x, y) in enumerate(self.snake):
            board[y][x] = 'H' if idx == 0 else 'S'

        return "\n".join(''.join(row) for row in board)

    def __repr__(self):
        return (
            f"<GameSnapshot tick={self.tick_number}, state={self.state.value}, "
            f"length={len(self.snake)}, food={self.food}, score={self.score}>"
        )
