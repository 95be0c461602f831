"""
Player implementations for the headless session driver.

A player stands in for the keyboard: each tick it looks at the current
GameState and returns the logical key to press.
"""

from .base import Player
from .random_player import RandomPlayer

__all__ = [
    'Player',
    'RandomPlayer',
]
