"""
Environment-driven configuration.

Reads SNAKE_* variables (optionally from a .env file) into a GameConfig.
"""

import os
from typing import Optional

from dotenv import load_dotenv

from domain.config import GameConfig
from domain.constants import DEFAULT_ROWS, DEFAULT_COLS, DEFAULT_SPEED, DEFAULT_DIE_FROM_WALLS
from domain.errors import ConfigurationError

load_dotenv()

TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off"}


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}")


def _bool_env(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise ConfigurationError(f"{name} must be a boolean, got {raw!r}")


def get_log_level() -> str:
    return os.getenv("SNAKE_LOG_LEVEL", "INFO").upper()


def load_game_config(
    rows: Optional[int] = None,
    cols: Optional[int] = None,
    initial_speed: Optional[int] = None,
    die_from_walls: Optional[bool] = None
) -> GameConfig:
    """
    Build a GameConfig from the environment, letting explicit arguments win.

    Raises:
        ConfigurationError: If a value is missing its expected type or is not positive.
    """
    config = GameConfig(
        rows=rows if rows is not None else _int_env("SNAKE_ROWS", DEFAULT_ROWS),
        cols=cols if cols is not None else _int_env("SNAKE_COLS", DEFAULT_COLS),
        initial_speed=(
            initial_speed if initial_speed is not None
            else _int_env("SNAKE_INITIAL_SPEED", DEFAULT_SPEED)
        ),
        die_from_walls=(
            die_from_walls if die_from_walls is not None
            else _bool_env("SNAKE_DIE_FROM_WALLS", DEFAULT_DIE_FROM_WALLS)
        ),
    )
    return config.validate()
