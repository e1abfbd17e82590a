"""
GameEngine - the single-player snake state machine.

The engine never schedules itself. A host calls advance(now) from its own
timer with a non-decreasing timestamp, then reads the result (or the query
methods) to update its view.
"""

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from .config import GameConfig
from .constants import (
    DEFAULT_ROWS, DEFAULT_COLS, DEFAULT_SPEED, DEFAULT_DIE_FROM_WALLS,
    MIN_SPEED, STILL, VALID_DIRECTIONS,
    DEATH_WALL, DEATH_SELF, DEATH_BOARD_FULL,
)
from .game_state import GameState, GameSnapshot
from .grid import Grid, Position
from .snake import Snake

logger = logging.getLogger(__name__)


class AdvanceOutcome(Enum):
    MOVED = "moved"
    SKIPPED = "skipped"
    COLLIDED = "collided"


@dataclass(frozen=True)
class AdvanceResult:
    """
    What happened during one advance() call.

    Attributes:
        outcome: MOVED, SKIPPED or COLLIDED
        snake: snake cells after the call, head first
        previous_head: head before the move (MOVED only)
        removed_tail: cell vacated by the tail, None when the snake grew
        ate_food: whether the move landed on the food
        food: food cell after the call
        board_full: the snake ate and no empty cell is left for new food
        death_reason: set when the call ended the game
    """

    outcome: AdvanceOutcome
    snake: Tuple[Position, ...] = ()
    previous_head: Optional[Position] = None
    removed_tail: Optional[Position] = None
    ate_food: bool = False
    food: Optional[Position] = None
    board_full: bool = False
    death_reason: Optional[str] = None

    @property
    def moved(self) -> bool:
        return self.outcome is AdvanceOutcome.MOVED

    @property
    def skipped(self) -> bool:
        return self.outcome is AdvanceOutcome.SKIPPED

    @property
    def collided(self) -> bool:
        return self.outcome is AdvanceOutcome.COLLIDED

    @property
    def head(self) -> Optional[Position]:
        return self.snake[0] if self.snake else None


SKIPPED = AdvanceResult(AdvanceOutcome.SKIPPED)


class GameEngine:
    """
    Manages:
      - Grid (rows, cols, wall policy)
      - Snake and food
      - Direction, score and speed
      - Lifecycle state (idle, running, paused, game over)
    """

    def __init__(
        self,
        rows: int = DEFAULT_ROWS,
        cols: int = DEFAULT_COLS,
        initial_speed: int = DEFAULT_SPEED,
        die_from_walls: bool = DEFAULT_DIE_FROM_WALLS,
        rng=None
    ):
        GameConfig(rows, cols, initial_speed, die_from_walls).validate()
        self.grid = Grid(rows, cols, wrap_walls=not die_from_walls)
        self.initial_speed = initial_speed
        # Any object with randint(a, b).
        self._rng = rng if rng is not None else random.Random()
        self.state = GameState.IDLE
        self._new_round()

    @classmethod
    def from_config(cls, config: GameConfig, rng=None) -> "GameEngine":
        return cls(
            rows=config.rows,
            cols=config.cols,
            initial_speed=config.initial_speed,
            die_from_walls=config.die_from_walls,
            rng=rng
        )

    def _new_round(self):
        self.snake = Snake([self.grid.center])
        self.direction: Position = STILL
        self._moved_direction: Position = STILL
        self.score = 0
        self.speed = self.initial_speed
        self.tick_count = 0
        self._last_tick: Optional[float] = None
        self.food = self._random_free_cell()

    def _random_free_cell(self) -> Optional[Position]:
        """
        Return a random cell (x, y) not occupied by the snake.

        Rejects and resamples occupied cells; returns None when the snake
        covers the whole board.
        """
        if len(self.snake) >= self.grid.cell_count:
            return None
        while True:
            x = self._rng.randint(0, self.grid.cols - 1)
            y = self._rng.randint(0, self.grid.rows - 1)
            if (x, y) not in self.snake:
                return (x, y)

    # ------------------------------------------------------------------
    # Control operations
    # ------------------------------------------------------------------

    def set_direction(self, dx: int, dy: int) -> bool:
        """
        Queue a new direction for the next tick.

        Reversing the direction of the last move is ignored unless the snake
        is a single cell, as is (0, 0). Only honoured while running or paused.

        Returns:
            True if the direction changed.
        """
        direction = (dx, dy)
        if direction == STILL:
            return False
        if direction not in VALID_DIRECTIONS:
            raise ValueError(f"Invalid direction {direction}; expected one of {sorted(VALID_DIRECTIONS)}")
        if self.state not in (GameState.RUNNING, GameState.PAUSED):
            return False
        reverse = (-self._moved_direction[0], -self._moved_direction[1])
        if len(self.snake) > 1 and direction == reverse:
            logger.debug(f"Ignoring reversal from {self._moved_direction} to {direction}")
            return False
        self.direction = direction
        return True

    def start(self):
        if self.state in (GameState.RUNNING, GameState.PAUSED):
            return
        if not self.snake.alive:
            self.snake.revive()
        self.state = GameState.RUNNING
        # None lets the first advance() after start move without waiting.
        self._last_tick = None
        logger.info(f"Game started (speed={self.speed})")

    def pause(self):
        if self.state is GameState.RUNNING:
            self.state = GameState.PAUSED
            logger.info("Game paused")

    def resume(self):
        if self.state is GameState.PAUSED:
            self.state = GameState.RUNNING
            logger.info("Game resumed")

    def toggle_pause(self):
        if self.state is GameState.PAUSED:
            self.resume()
        else:
            self.pause()

    def stop(self):
        self.state = GameState.IDLE
        logger.info(f"Game stopped (score={self.score})")

    def reset(self):
        self._new_round()
        self.state = GameState.IDLE
        logger.info("Game reset")
        self.start()

    def set_food(self, cell: Position):
        """Place the food at a specific cell instead of a random one."""
        cell = tuple(cell)
        if not self.grid.contains(cell):
            raise ValueError(f"Food out of bounds at {cell}.")
        if cell in self.snake:
            raise ValueError(f"Food cannot be placed on the snake at {cell}.")
        self.food = cell

    def _game_over(self, reason: str):
        self.state = GameState.GAME_OVER
        self.snake.kill(reason)
        logger.info(f"Game over ({reason}). Score: {self.score}")

    # ------------------------------------------------------------------
    # Simulation
    # ------------------------------------------------------------------

    def advance(self, now: float) -> AdvanceResult:
        """
        Execute one tick if the game is running and the speed gate allows:
          1) Skip unless running and due with a direction set
          2) Compute the new head (wrapping or dying at walls)
          3) Check self collision
          4) Move, growing and re-placing food if the food was eaten
        """
        if self.state is not GameState.RUNNING:
            return SKIPPED
        if self._last_tick is not None and now - self._last_tick < self.speed:
            return SKIPPED
        if self.direction == STILL:
            return SKIPPED

        self._last_tick = now
        cells = tuple(self.snake.positions)

        new_head = self.grid.step(self.snake.head, self.direction)
        if new_head is None:
            self._game_over(DEATH_WALL)
            return AdvanceResult(AdvanceOutcome.COLLIDED, snake=cells, food=self.food, death_reason=DEATH_WALL)

        # A single cell cannot hit itself: the new head replaces it.
        if len(self.snake) > 1 and new_head in self.snake:
            self._game_over(DEATH_SELF)
            return AdvanceResult(AdvanceOutcome.COLLIDED, snake=cells, food=self.food, death_reason=DEATH_SELF)

        previous_head = self.snake.head
        ate_food = new_head == self.food
        removed_tail = self.snake.move_to(new_head, grow=ate_food)
        self.tick_count += 1
        self._moved_direction = self.direction

        board_full = False
        death_reason = None
        if ate_food:
            self.score += 1
            self.speed = max(MIN_SPEED, self.speed - 1)
            self.food = self._random_free_cell()
            if self.food is None:
                board_full = True
                death_reason = DEATH_BOARD_FULL
                self._game_over(DEATH_BOARD_FULL)

        logger.debug(
            f"Tick {self.tick_count}: head={new_head} ate={ate_food} "
            f"score={self.score} speed={self.speed}"
        )

        return AdvanceResult(
            AdvanceOutcome.MOVED,
            snake=tuple(self.snake.positions),
            previous_head=previous_head,
            removed_tail=removed_tail,
            ate_food=ate_food,
            food=self.food,
            board_full=board_full,
            death_reason=death_reason
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_score(self) -> int:
        return self.score

    def get_snake_length(self) -> int:
        return len(self.snake)

    def get_snake_cells(self) -> List[Position]:
        return list(self.snake.positions)

    def get_food_cell(self) -> Optional[Position]:
        return self.food

    def get_speed(self) -> int:
        return self.speed

    def get_direction(self) -> Position:
        return self.direction

    def get_tick_count(self) -> int:
        return self.tick_count

    def get_death_reason(self) -> Optional[str]:
        return self.snake.death_reason

    def get_state(self) -> GameState:
        return self.state

    def is_running(self) -> bool:
        """True while a game is in progress, paused or not."""
        return self.state in (GameState.RUNNING, GameState.PAUSED)

    def is_paused(self) -> bool:
        return self.state is GameState.PAUSED

    def snapshot(self) -> GameSnapshot:
        """
        Return a snapshot of the current board as a GameSnapshot.
        """
        return GameSnapshot(
            tick_number=self.tick_count,
            rows=self.grid.rows,
            cols=self.grid.cols,
            snake=list(self.snake.positions),
            food=self.food,
            score=self.score,
            speed=self.speed,
            state=self.state,
            direction=self.direction,
            death_reason=self.snake.death_reason
        )

    def __repr__(self):
        return (
            f"<GameEngine {self.grid.cols}x{self.grid.rows} state={self.state.value}, "
            f"length={len(self.snake)}, score={self.score}>"
        )
