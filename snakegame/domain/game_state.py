"""
GameState entity - a read-only snapshot of the game at a point in time.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from .constants import Direction
from .grid import Cell


@dataclass(frozen=True)
class GameState:
    """
    A snapshot of the game at a specific point in time.

    Attributes:
        width, height: board dimensions
        body: snake cells from head to tail
        direction: the snake's current heading
        food: the apple cell, or None when no apple is on the board
        game_over: whether the snake has died and is waiting for restart
        waiting_time: seconds since the last move (or since death)
    """

    width: int
    height: int
    body: Tuple[Cell, ...]
    direction: Direction
    food: Optional[Cell]
    game_over: bool
    waiting_time: float

    @property
    def head(self) -> Cell:
        return self.body[0]

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        # = wall
        . = empty space
        A = apple
        H = snake head
        o = snake body
        Rows are printed top to bottom, matching screen coordinates.
        """
        # Create board with the wall ring
        board = []
        for y in range(self.height):
            row = []
            for x in range(self.width):
                on_border = x in (0, self.width - 1) or y in (0, self.height - 1)
                row.append('#' if on_border else '.')
            board.append(row)

        if self.food is not None:
            fx, fy = self.food
            board[fy][fx] = 'A'

        for pos_idx, (x, y) in enumerate(self.body):
            if 0 <= x < self.width and 0 <= y < self.height:
                board[y][x] = 'H' if pos_idx == 0 else 'o'

        result = [f"{y:2d} {' '.join(board[y])}" for y in range(self.height)]
        result.append("   " + " ".join(str(i % 10) for i in range(self.width)))

        return "\n".join(result)

    def __repr__(self):
        return (
            f"<GameState head={self.body[0] if self.body else None}, length={len(self.body)}, "
            f"food={self.food}, game_over={self.game_over}>"
        )
