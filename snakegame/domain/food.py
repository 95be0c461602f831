"""
Food (apple) state and placement.
"""

import logging
import random
from typing import Optional

from .constants import MAX_FOOD_ATTEMPTS
from .grid import Board, Cell
from .snake import Snake

logger = logging.getLogger(__name__)


class Food:
    """A single optional apple on the board."""

    def __init__(self):
        self.cell: Optional[Cell] = None
        self.exists = False

    def place(self, cell: Cell):
        self.cell = Cell(*cell)
        self.exists = True

    def clear(self):
        self.exists = False

    def __repr__(self):
        return f"<Food cell={self.cell}, exists={self.exists}>"


def _is_free(board: Board, snake: Snake, cell: Cell) -> bool:
    return not board.overlaps_border(cell) and not snake.occupies(cell)


def find_food_cell(
    board: Board,
    snake: Snake,
    rng: Optional[random.Random] = None,
    max_attempts: int = MAX_FOOD_ATTEMPTS,
) -> Optional[Cell]:
    """
    Return a random cell that is off the border ring and off the snake.

    Draws uniformly over the whole board and keeps the first acceptable cell.
    After `max_attempts` rejected draws, picks uniformly among the remaining
    free interior cells instead. Returns None when the snake fills the interior.
    """
    rng = rng or random

    for _ in range(max_attempts):
        cell = Cell(rng.randrange(board.width), rng.randrange(board.height))
        if _is_free(board, snake, cell):
            return cell

    free_cells = [cell for cell in board.interior_cells() if not snake.occupies(cell)]
    logger.debug(
        f"Rejection sampling gave up after {max_attempts} draws; "
        f"{len(free_cells)} free cells remain"
    )
    if not free_cells:
        return None
    return rng.choice(free_cells)
