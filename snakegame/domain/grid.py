"""
Cell and board geometry.
"""

from typing import Iterator, NamedTuple

from .constants import Direction


class Cell(NamedTuple):
    """A board position. Coordinates may go negative after a step off the board."""

    x: int
    y: int

    def step(self, direction: Direction) -> "Cell":
        dx, dy = direction.delta
        return Cell(self.x + dx, self.y + dy)


class Board:
    """
    A width x height grid whose outermost ring of cells is a wall.

    Attributes:
        width, height: board dimensions in cells, each greater than 2
    """

    def __init__(self, width: int, height: int):
        if width <= 2 or height <= 2:
            raise ValueError(
                f"Board must be at least 3x3 to have an interior cell, got {width}x{height}."
            )
        self.width = width
        self.height = height

    def contains(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height

    def overlaps_border(self, cell: Cell) -> bool:
        """True on the wall ring and for any cell that left the board entirely."""
        x, y = cell
        if not self.contains(cell):
            return True
        return x == 0 or x == self.width - 1 or y == 0 or y == self.height - 1

    def interior_cells(self) -> Iterator[Cell]:
        for y in range(1, self.height - 1):
            for x in range(1, self.width - 1):
                yield Cell(x, y)

    def __repr__(self):
        return f"<Board {self.width}x{self.height}>"
