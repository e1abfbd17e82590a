"""
Domain entities for the snake game engine.

This module contains the core game entities that are independent of
rendering, input and timing concerns.
"""

from .constants import UP, DOWN, LEFT, RIGHT, STILL, VALID_DIRECTIONS, MIN_SPEED
from .errors import ConfigurationError
from .config import GameConfig
from .grid import Grid, Position
from .snake import Snake
from .game_state import GameState, GameSnapshot
from .engine import GameEngine, AdvanceResult, AdvanceOutcome

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'STILL', 'VALID_DIRECTIONS', 'MIN_SPEED',
    'ConfigurationError',
    'GameConfig',
    'Grid',
    'Position',
    'Snake',
    'GameState',
    'GameSnapshot',
    'GameEngine',
    'AdvanceResult',
    'AdvanceOutcome',
]
