"""
Snake entity for the game engine.
"""

from collections import deque
from typing import Iterable, Iterator, Optional, Tuple

from .constants import Direction, INITIAL_BODY, INITIAL_DIRECTION
from .errors import SnakeInvariantError
from .grid import Cell


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        body: deque of Cell from head at index 0 to tail at the end
        direction: current heading, changed only by accepted moves
        last_removed_tail: the cell popped by the most recent move, kept so an
            eat on the same tick can grow the snake back by one
    """

    def __init__(
        self,
        body: Iterable[Tuple[int, int]] = INITIAL_BODY,
        direction: Direction = INITIAL_DIRECTION,
    ):
        self.body = deque(Cell(x, y) for x, y in body)
        if not self.body:
            raise SnakeInvariantError("Snake body cannot be empty.")
        self.direction = direction
        self.last_removed_tail: Optional[Cell] = None

    @property
    def head(self) -> Cell:
        """Return the head position (first element)."""
        if not self.body:
            raise SnakeInvariantError("Snake body is empty.")
        return self.body[0]

    def heading(self) -> Direction:
        return self.direction

    def position(self) -> Cell:
        return self.head

    def next_head(self, direction: Optional[Direction] = None) -> Cell:
        """
        Cell the head would enter moving one step in `direction`
        (or the current heading when None).

        The result is never wrapped: stepping off the top or left edge yields a
        negative coordinate, which Board.overlaps_border reports as a wall hit.
        """
        moving_direction = direction if direction is not None else self.direction
        return self.head.step(moving_direction)

    def move_forward(self, direction: Optional[Direction] = None):
        """Advance one cell at constant length, adopting `direction` if given."""
        if direction is not None:
            self.direction = direction

        new_head = self.next_head(self.direction)
        self.body.appendleft(new_head)
        self.last_removed_tail = self.body.pop()

    def restore_tail(self):
        """Re-append the tail dropped by the last move (grow by one)."""
        if self.last_removed_tail is None:
            raise SnakeInvariantError("restore_tail called before any move.")
        self.body.append(self.last_removed_tail)

    def overlaps_tail(self, cell: Tuple[int, int]) -> bool:
        """
        True if `cell` is on the body, ignoring the last cell.

        The tail leaves its cell on the same step the head advances, so moving
        into the current tail position is not a collision.
        """
        cell = Cell(*cell)
        last_index = len(self.body) - 1
        for i, block in enumerate(self.body):
            if i == last_index:
                break
            if block == cell:
                return True
        return False

    def occupies(self, cell: Tuple[int, int]) -> bool:
        """True if `cell` is on any body cell, tail included."""
        return Cell(*cell) in self.body

    def cells(self) -> Iterator[Cell]:
        return iter(self.body)

    def __len__(self):
        return len(self.body)

    def __repr__(self):
        return f"<Snake head={self.body[0] if self.body else None}, length={len(self.body)}, direction={self.direction.value}>"
