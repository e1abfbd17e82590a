"""
Registry for autopilot players.
Maps player names (e.g., 'random', 'greedy') to player classes.
"""

from typing import Dict, Type, Optional

from .base import Player
from .greedy_player import GreedyPlayer
from .random_player import RandomPlayer


PLAYER_CLASSES: Dict[str, Type[Player]] = {
    "random": RandomPlayer,
    "greedy": GreedyPlayer,
}

AVAILABLE_PLAYERS = list(PLAYER_CLASSES.keys())


def get_player_class(name: Optional[str] = None) -> Type[Player]:
    """
    Get the player class for a given name.

    Args:
        name: One of 'random', 'greedy'. If None or empty, returns the greedy player.

    Returns:
        The player class (subclass of Player).

    Raises:
        ValueError: If name is not recognized.
    """
    if not name or name.strip() == "":
        name = "greedy"

    name = name.strip().lower()

    if name not in PLAYER_CLASSES:
        available = ", ".join(AVAILABLE_PLAYERS)
        raise ValueError(
            f"Unknown player '{name}'. Available players: {available}"
        )

    return PLAYER_CLASSES[name]


def list_players() -> list:
    """
    Return metadata about all available players.
    """
    return [
        {"key": "random", "description": "Random safe moves"},
        {"key": "greedy", "description": "Shortest safe step toward the food"},
    ]
