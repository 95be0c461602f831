"""
Base player interface for the game engine.
"""

from ..domain.constants import Key
from ..domain.game_state import GameState


class Player:
    """
    Base class/interface for player logic.

    Each player is responsible for returning a key press given the current
    game state.
    """

    def get_key(self, game_state: GameState) -> Key:
        """
        Return the key to press for this tick.

        Args:
            game_state: Current state of the game

        Returns:
            One of Key.UP, Key.DOWN, Key.LEFT, Key.RIGHT, or Key.OTHER for no input
        """
        raise NotImplementedError
