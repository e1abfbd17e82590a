"""
GameSession - the host loop that drives a GameEngine.

Wires the engine to its collaborators:
  - an input source (keyboard key map and/or an autopilot player)
  - a renderer that paints the board
  - a clock that supplies advance() timestamps
"""

import logging
import time
from typing import List, Optional

from domain.constants import STILL
from domain.engine import GameEngine, AdvanceResult
from domain.game_state import GameSnapshot, GameState
from players.base import Player
from players.keyboard import KeyboardInput, RESET_KEYS
from .clock import Clock, ManualClock, MonotonicClock
from .renderer import Renderer

logger = logging.getLogger(__name__)


class GameSession:
    """
    Owns one engine and its collaborators for the lifetime of a game window.

    Attributes:
        engine: the GameEngine being driven
        renderer: visual surface, may be None for headless runs
        clock: timestamp source for advance()
        player: optional autopilot asked for a direction every frame
        keyboard: optional key map; None after destroy()
        history: snapshots recorded after every move, for replay
    """

    def __init__(
        self,
        engine: GameEngine,
        renderer: Optional[Renderer] = None,
        clock: Optional[Clock] = None,
        player: Optional[Player] = None,
        keyboard: Optional[KeyboardInput] = None,
        record_history: bool = True
    ):
        self.engine = engine
        self.renderer = renderer
        self.clock = clock if clock is not None else MonotonicClock()
        self.player = player
        self.keyboard = keyboard
        self.record_history = record_history
        self.history: List[GameSnapshot] = []
        self.frames = 0
        self.destroyed = False

    def begin(self):
        """Paint the initial board and start the engine."""
        self.engine.start()
        self._redraw()
        self._record()

    def _redraw(self):
        if self.renderer is not None:
            self.renderer.draw_full(self.engine.snapshot())

    def _record(self):
        if self.record_history:
            self.history.append(self.engine.snapshot())

    def handle_key(self, key: str) -> bool:
        """
        Forward a key event to the engine.

        Returns:
            True if the key was consumed
        """
        if self.keyboard is None:
            return False
        consumed = self.keyboard.handle_key(self.engine, key)
        if consumed and key in RESET_KEYS:
            self._after_reset()
        return consumed

    def reset(self):
        self.engine.reset()
        self._after_reset()

    def _after_reset(self):
        self.history = []
        self._redraw()
        self._record()

    def step(self) -> AdvanceResult:
        """
        Run one frame:
          1) Let the autopilot steer (if any)
          2) Advance the engine with the clock's current time
          3) Repaint and record on a move, or on the move that ended the game
        """
        self.frames += 1
        if self.player is not None and self.engine.get_state() is GameState.RUNNING:
            direction = self.player.get_direction(self.engine.snapshot())
            if direction is not None:
                self.engine.set_direction(*direction)

        result = self.engine.advance(self.clock.now())

        if result.moved:
            if self.renderer is not None:
                self.renderer.draw_tick(result, self.engine.snapshot())
            self._record()
        elif result.collided:
            self._redraw()
            self._record()

        if result.collided or result.board_full:
            logger.info(
                f"Game over after {self.engine.get_tick_count()} ticks: "
                f"{result.death_reason}, score {self.engine.get_score()}"
            )

        return result

    def run(self, max_frames: Optional[int] = None, frame_ms: float = 16.0) -> GameSnapshot:
        """
        Step until the game ends, is stopped, or max_frames frames have run.

        Without a frame limit or an autopilot nothing can steer or unpause the
        snake, so a still or paused game returns at once.

        A ManualClock is ticked forward by one frame per step; any other clock
        is real time, so the loop sleeps frame_ms between steps.
        """
        if self.engine.get_state() is GameState.IDLE:
            self.begin()

        frames_run = 0
        while self.engine.is_running():
            if max_frames is not None and frames_run >= max_frames:
                logger.info(f"Stopping after {frames_run} frames")
                break
            if max_frames is None and self.player is None and self._stalled():
                logger.info("Snake cannot move without input; stopping the loop")
                break
            self.step()
            frames_run += 1
            if isinstance(self.clock, ManualClock):
                self.clock.tick(frame_ms)
            else:
                time.sleep(frame_ms / 1000.0)

        return self.engine.snapshot()

    def _stalled(self) -> bool:
        return self.engine.is_paused() or self.engine.get_direction() == STILL

    def destroy(self):
        """Stop the game and release the renderer and key bindings."""
        self.engine.stop()
        if self.renderer is not None:
            self.renderer.close()
        self.keyboard = None
        self.destroyed = True
