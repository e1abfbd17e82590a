"""
Game constants for the snake engine.
"""

# Movement directions as (dx, dy); y grows downward (row 0 is the top row)
UP = (0, -1)
DOWN = (0, 1)
LEFT = (-1, 0)
RIGHT = (1, 0)
STILL = (0, 0)
VALID_DIRECTIONS = {UP, DOWN, LEFT, RIGHT}

# Game settings
DEFAULT_ROWS = 17
DEFAULT_COLS = 17
DEFAULT_SPEED = 70  # milliseconds between ticks
MIN_SPEED = 30
DEFAULT_DIE_FROM_WALLS = True

# Death reasons
DEATH_WALL = "wall"
DEATH_SELF = "self"
DEATH_BOARD_FULL = "board_full"
