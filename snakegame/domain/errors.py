"""
Errors raised by the game engine.
"""


class SnakeInvariantError(RuntimeError):
    """Raised when the snake's internal state breaks an engine invariant."""
