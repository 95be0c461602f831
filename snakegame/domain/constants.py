"""
Game constants for the Snake engine.
"""

from enum import Enum


class Direction(str, Enum):
    """Movement directions. Screen coordinates: y grows downward."""

    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"

    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    @property
    def delta(self):
        return _DELTAS[self]


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

_DELTAS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


class Key(str, Enum):
    """Logical keys forwarded by the presentation layer."""

    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"
    OTHER = "OTHER"


KEY_TO_DIRECTION = {
    Key.UP: Direction.UP,
    Key.DOWN: Direction.DOWN,
    Key.LEFT: Direction.LEFT,
    Key.RIGHT: Direction.RIGHT,
}

# Timing (seconds)
MOVING_PERIOD = 0.5
RESTART_TIME = 1.0

# Board settings
GAME_WIDTH = 20
GAME_HEIGHT = 20
BLOCK_SIZE = 25  # pixels per cell

# Snake starts as a horizontal line, head on the right
INITIAL_BODY = ((3, 3), (2, 3), (1, 3))
INITIAL_DIRECTION = Direction.RIGHT

# Random draws before food placement falls back to scanning free cells
MAX_FOOD_ATTEMPTS = 1000
