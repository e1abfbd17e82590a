"""
Keyboard input source - maps raw key names to engine commands.
"""

from enum import Enum
from typing import Dict, Optional, Tuple

from domain.constants import UP, DOWN, LEFT, RIGHT
from domain.engine import GameEngine


class Command(Enum):
    MOVE = "move"
    TOGGLE_PAUSE = "toggle_pause"
    RESET = "reset"


KEY_MAP: Dict[str, Tuple[int, int]] = {
    "w": UP,
    "ArrowUp": UP,
    "a": LEFT,
    "ArrowLeft": LEFT,
    "s": DOWN,
    "ArrowDown": DOWN,
    "d": RIGHT,
    "ArrowRight": RIGHT,
}
PAUSE_KEYS = {"p", "P"}
RESET_KEYS = {" "}


class KeyboardInput:
    """
    Translates key events into engine calls.

    Unknown keys are ignored so the host can pass every key event through.
    """

    def __init__(self, key_map: Optional[Dict[str, Tuple[int, int]]] = None):
        self.key_map = dict(KEY_MAP if key_map is None else key_map)

    def parse(self, key: str) -> Optional[Tuple[Command, Optional[Tuple[int, int]]]]:
        if key in RESET_KEYS:
            return Command.RESET, None
        if key in PAUSE_KEYS:
            return Command.TOGGLE_PAUSE, None
        if key in self.key_map:
            return Command.MOVE, self.key_map[key]
        return None

    def handle_key(self, engine: GameEngine, key: str) -> bool:
        """
        Forward a key press to the engine.

        Returns:
            True if the key was consumed (the host should suppress its default action)
        """
        parsed = self.parse(key)
        if parsed is None:
            return False

        command, direction = parsed
        if command is Command.RESET:
            engine.reset()
        elif command is Command.TOGGLE_PAUSE:
            engine.toggle_pause()
        else:
            engine.set_direction(*direction)
        return True
