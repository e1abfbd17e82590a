"""
Engine configuration.
"""

from dataclasses import dataclass

from .constants import DEFAULT_ROWS, DEFAULT_COLS, DEFAULT_SPEED, DEFAULT_DIE_FROM_WALLS
from .errors import ConfigurationError


@dataclass
class GameConfig:
    """Construction parameters for a GameEngine."""

    rows: int = DEFAULT_ROWS
    cols: int = DEFAULT_COLS
    initial_speed: int = DEFAULT_SPEED
    die_from_walls: bool = DEFAULT_DIE_FROM_WALLS

    def validate(self) -> "GameConfig":
        for name in ("rows", "cols", "initial_speed"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ConfigurationError(f"{name} must be a positive integer, got {value!r}")
        return self
