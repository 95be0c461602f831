"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List, Optional

from ..domain.constants import Direction, Key
from ..domain.game_state import GameState
from .base import Player

DIRECTION_TO_KEY = {
    Direction.UP: Key.UP,
    Direction.DOWN: Key.DOWN,
    Direction.LEFT: Key.LEFT,
    Direction.RIGHT: Key.RIGHT,
}


class RandomPlayer(Player):
    """
    A random AI that picks a direction that avoids the wall ring and self-collisions.

    While going straight is safe it mostly presses nothing and lets the move
    timer drive the snake; `turn_probability` is the chance of turning anyway.
    """

    def __init__(self, rng: Optional[random.Random] = None, turn_probability: float = 0.2):
        self.rng = rng or random.Random()
        self.turn_probability = turn_probability

    def safe_directions(self, game_state: GameState) -> List[Direction]:
        body = game_state.body
        head = game_state.head

        # Filter out moves that:
        # 1. Reverse into the neck
        # 2. Hit the wall ring
        # 3. Hit own body (except tail, which will move)
        safe: List[Direction] = []
        for direction in DIRECTION_TO_KEY:
            if direction == game_state.direction.opposite():
                continue

            new_x, new_y = head.step(direction)
            if (new_x <= 0 or new_x >= game_state.width - 1 or
                new_y <= 0 or new_y >= game_state.height - 1):
                continue

            if (new_x, new_y) in body[:-1]:
                continue

            safe.append(direction)
        return safe

    def get_key(self, game_state: GameState) -> Key:
        if game_state.game_over:
            return Key.OTHER

        safe = self.safe_directions(game_state)

        # If no safe moves, press nothing and let the timer finish the game
        if not safe:
            return Key.OTHER

        if game_state.direction in safe and self.rng.random() >= self.turn_probability:
            return Key.OTHER

        return DIRECTION_TO_KEY[self.rng.choice(safe)]
