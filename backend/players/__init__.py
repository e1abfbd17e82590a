"""
Input sources for the snake engine.

This module contains the keyboard key map and the autopilot players
that steer the snake without a human at the keys.
"""

from .base import Player
from .random_player import RandomPlayer
from .greedy_player import GreedyPlayer
from .keyboard import KeyboardInput, Command, KEY_MAP
from .variant_registry import get_player_class, list_players, AVAILABLE_PLAYERS

__all__ = [
    'Player',
    'RandomPlayer',
    'GreedyPlayer',
    'KeyboardInput',
    'Command',
    'KEY_MAP',
    'get_player_class',
    'list_players',
    'AVAILABLE_PLAYERS',
]
