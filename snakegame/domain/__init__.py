"""
Domain entities for the Snake game engine.

This module contains the core game entities that are independent of
presentation concerns (windows, images, video encoding).
"""

from .constants import (
    Direction,
    Key,
    KEY_TO_DIRECTION,
    MOVING_PERIOD,
    RESTART_TIME,
    GAME_WIDTH,
    GAME_HEIGHT,
    BLOCK_SIZE,
)
from .errors import SnakeInvariantError
from .grid import Cell, Board
from .snake import Snake
from .food import Food, find_food_cell
from .game_state import GameState
from .game import Game

__all__ = [
    'Direction', 'Key', 'KEY_TO_DIRECTION',
    'MOVING_PERIOD', 'RESTART_TIME', 'GAME_WIDTH', 'GAME_HEIGHT', 'BLOCK_SIZE',
    'SnakeInvariantError',
    'Cell', 'Board',
    'Snake',
    'Food', 'find_food_cell',
    'GameState',
    'Game',
]
