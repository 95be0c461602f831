"""
Game orchestration: input, timed movement, eating, death and restart.
"""

import logging
import random
from typing import Optional

from .constants import Direction, Key, KEY_TO_DIRECTION, MOVING_PERIOD, RESTART_TIME
from .food import Food, find_food_cell
from .game_state import GameState
from .grid import Board, Cell
from .snake import Snake

logger = logging.getLogger(__name__)


class Game:
    """
    Manages:
      - Board (width, height)
      - The snake
      - The apple
      - Game over / restart timing

    The presentation layer drives it with key_pressed() and update() from a
    single thread and reads it back through snapshot().
    """

    def __init__(self, width: int, height: int, rng: Optional[random.Random] = None):
        self.board = Board(width, height)
        self.width = width
        self.height = height
        self.rng = rng or random.Random()

        self.snake = Snake()
        self.food = Food()
        self.game_over = False
        self.death_reason: Optional[str] = None  # 'wall' or 'self'
        self.waiting_time = 0.0

        self.add_food()

    def key_pressed(self, key: Key):
        if self.game_over:
            return

        new_direction = KEY_TO_DIRECTION.get(key)
        if new_direction is None:
            return

        # No instant reversal into the neck
        if new_direction == self.snake.heading().opposite():
            return

        self.update_snake(new_direction)

    def update(self, delta_time: float):
        """Advance the clock by `delta_time` seconds."""
        if delta_time < 0:
            raise ValueError(f"delta_time must be non-negative, got {delta_time}")

        self.waiting_time += delta_time

        if self.game_over:
            if self.waiting_time > RESTART_TIME:
                self.restart()
            return

        if not self.food.exists:
            self.add_food()

        if self.waiting_time > MOVING_PERIOD:
            self.update_snake(None)

    def update_snake(self, direction: Optional[Direction]):
        """Move the snake if the step is safe, otherwise end the game in place."""
        reason = self._collision_reason(direction)
        if reason is None:
            self.snake.move_forward(direction)
            self.check_if_snake_has_eaten()
        else:
            self.game_over = True
            self.death_reason = reason
            logger.info(
                f"Game over: snake hit {'the wall' if reason == 'wall' else 'itself'} "
                f"at length {len(self.snake)}"
            )
        self.waiting_time = 0.0

    def restart(self):
        self.snake = Snake()
        self.food = Food()
        self.add_food()
        self.game_over = False
        self.death_reason = None
        self.waiting_time = 0.0
        logger.info("Game restarted")

    def add_food(self):
        cell = find_food_cell(self.board, self.snake, self.rng)
        if cell is None:
            logger.warning("No free cell left for food; will retry next tick")
            return
        self.food.place(cell)
        logger.debug(f"Placed food at {tuple(cell)}")

    def place_food(self, cell):
        """Put the apple on a specific cell (replacing any current apple)."""
        cell = Cell(*cell)
        if self.board.overlaps_border(cell):
            raise ValueError(f"Food cannot be placed on or beyond the border: {tuple(cell)}")
        if self.snake.occupies(cell):
            raise ValueError(f"Food cannot be placed on the snake: {tuple(cell)}")
        self.food.place(cell)

    def overlaps_border(self, cell) -> bool:
        return self.board.overlaps_border(Cell(*cell))

    def check_if_snake_has_eaten(self):
        if self.food.exists and self.snake.position() == self.food.cell:
            self.food.clear()
            self.snake.restore_tail()
            logger.debug(f"Snake ate food, length is now {len(self.snake)}")

    def check_if_snake_is_alive(self, direction: Optional[Direction] = None) -> bool:
        return self._collision_reason(direction) is None

    def _collision_reason(self, direction: Optional[Direction]) -> Optional[str]:
        next_cell = self.snake.next_head(direction)

        if self.snake.overlaps_tail(next_cell):
            return "self"
        if self.board.overlaps_border(next_cell):
            return "wall"
        return None

    def snapshot(self) -> GameState:
        """
        Return a snapshot of the current board as a GameState.
        """
        return GameState(
            width=self.width,
            height=self.height,
            body=tuple(self.snake.cells()),
            direction=self.snake.heading(),
            food=self.food.cell if self.food.exists else None,
            game_over=self.game_over,
            waiting_time=self.waiting_time,
        )

    def __repr__(self):
        return (
            f"<Game {self.width}x{self.height}, snake={self.snake!r}, "
            f"food={self.food!r}, game_over={self.game_over}>"
        )
