"""
Renderer interface and a character-grid renderer.

Renderers never touch the engine. They are handed snapshots (full redraw)
or AdvanceResults (incremental update) by the host.
"""

from typing import List, Optional, Tuple

from domain.engine import AdvanceResult
from domain.game_state import GameSnapshot

EMPTY = "."
BODY = "S"
HEAD = "H"
FOOD = "F"


class Renderer:
    """Base class for visual surfaces."""

    def draw_full(self, snapshot: GameSnapshot):
        raise NotImplementedError

    def draw_tick(self, result: AdvanceResult, snapshot: GameSnapshot):
        raise NotImplementedError

    def close(self):
        pass


class TextRenderer(Renderer):
    """
    Keeps a rows x cols character grid in sync with the game.

    draw_tick only repaints the cells that changed: the vacated tail, the old
    head (now body), the new head and the food.
    """

    def __init__(self):
        self.cells: List[List[str]] = []

    def _set(self, cell: Optional[Tuple[int, int]], char: str):
        if cell is None:
            return
        x, y = cell
        if 0 <= y < len(self.cells) and 0 <= x < len(self.cells[y]):
            self.cells[y][x] = char

    def draw_full(self, snapshot: GameSnapshot):
        self.cells = [[EMPTY for _ in range(snapshot.cols)] for _ in range(snapshot.rows)]
        for cell in snapshot.snake[1:]:
            self._set(cell, BODY)
        self._set(snapshot.head, HEAD)
        self._set(snapshot.food, FOOD)

    def draw_tick(self, result: AdvanceResult, snapshot: GameSnapshot = None):
        if not result.moved:
            return
        self._set(result.removed_tail, EMPTY)
        if len(result.snake) > 1:
            self._set(result.previous_head, BODY)
        self._set(result.head, HEAD)
        self._set(result.food, FOOD)

    def render(self) -> str:
        return "\n".join("".join(row) for row in self.cells)

    def close(self):
        self.cells = []
