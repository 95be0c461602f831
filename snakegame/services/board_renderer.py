"""
Board Renderer for the Snake engine

Draws a GameState with Pillow. The drawing surface is a PIL ImageDraw opened
in RGBA mode so the game-over overlay blends over the board.

Draw order:
1. Background fill
2. Border strips (top, bottom, left, right)
3. Apple, if one is on the board
4. Snake, head to tail
5. Translucent overlay while the game is over
"""

from typing import Tuple

from PIL import Image, ImageDraw

from ..domain.constants import BLOCK_SIZE
from ..domain.game_state import GameState

Color = Tuple[int, int, int, int]


class ColorScheme:
    """Board palette (RGBA)"""

    BACKGROUND = (128, 128, 128, 255)
    BORDER = (0, 0, 0, 255)
    FOOD = (204, 0, 0, 255)
    FOOD_STEM = (92, 64, 28, 255)
    SNAKE = (0, 204, 0, 255)
    EYE = (255, 255, 255, 255)
    GAME_OVER = (230, 0, 0, 128)


def darken_color(color: Color, amount: float = 0.3) -> Color:
    """Darken an RGBA color by a given amount, keeping alpha"""
    r, g, b, a = color
    return (
        max(0, int(r * (1 - amount))),
        max(0, int(g * (1 - amount))),
        max(0, int(b * (1 - amount))),
        a,
    )


def _draw_rectangle(
    draw: ImageDraw.ImageDraw,
    color: Color,
    x: int,
    y: int,
    width: int,
    height: int,
    cell_size: int
):
    """Fill a block of cells given in board coordinates"""
    draw.rectangle(
        [
            x * cell_size,
            y * cell_size,
            (x + width) * cell_size - 1,
            (y + height) * cell_size - 1
        ],
        fill=color
    )


def _draw_cell(
    draw: ImageDraw.ImageDraw,
    x: int,
    y: int,
    cell_size: int,
    color: Color,
    padding: int = 1
):
    """Draw a single cell (for snake body)"""
    px = x * cell_size
    py = y * cell_size
    draw.rectangle(
        [px + padding, py + padding, px + cell_size - 1 - padding, py + cell_size - 1 - padding],
        fill=color
    )


def _draw_food(draw: ImageDraw.ImageDraw, x: int, y: int, cell_size: int):
    px = x * cell_size
    py = y * cell_size
    inset = max(1, cell_size // 8)
    draw.ellipse(
        [px + inset, py + inset, px + cell_size - 1 - inset, py + cell_size - 1 - inset],
        fill=ColorScheme.FOOD
    )
    # Stem
    stem_width = max(1, cell_size // 10)
    center_x = px + cell_size // 2
    draw.rectangle(
        [center_x - stem_width // 2, py, center_x + stem_width // 2, py + inset + stem_width],
        fill=ColorScheme.FOOD_STEM
    )


def _draw_head(draw: ImageDraw.ImageDraw, state: GameState, cell_size: int):
    head_x, head_y = state.head
    _draw_cell(draw, head_x, head_y, cell_size, darken_color(ColorScheme.SNAKE), padding=0)

    # Eyes sit toward the front of the head, one on each side of the heading
    dx, dy = state.direction.delta
    perp_x, perp_y = -dy, dx
    center_x = head_x * cell_size + cell_size / 2
    center_y = head_y * cell_size + cell_size / 2
    offset = cell_size / 4
    radius = max(1, cell_size // 8)
    for side in (1, -1):
        eye_x = center_x + dx * offset + side * perp_x * offset
        eye_y = center_y + dy * offset + side * perp_y * offset
        draw.ellipse(
            [eye_x - radius, eye_y - radius, eye_x + radius, eye_y + radius],
            fill=ColorScheme.EYE
        )


def render(state: GameState, draw: ImageDraw.ImageDraw, cell_size: int = BLOCK_SIZE):
    """
    Draw the current state onto `draw`.

    Args:
        state: Snapshot to draw; it is only read
        draw: RGBA ImageDraw over an image of at least width x height cells
        cell_size: Pixels per board cell
    """
    width = state.width
    height = state.height

    _draw_rectangle(draw, ColorScheme.BACKGROUND, 0, 0, width, height, cell_size)

    _draw_rectangle(draw, ColorScheme.BORDER, 0, 0, width, 1, cell_size)
    _draw_rectangle(draw, ColorScheme.BORDER, 0, height - 1, width, 1, cell_size)
    _draw_rectangle(draw, ColorScheme.BORDER, 0, 0, 1, height, cell_size)
    _draw_rectangle(draw, ColorScheme.BORDER, width - 1, 0, 1, height, cell_size)

    if state.food is not None:
        _draw_food(draw, state.food.x, state.food.y, cell_size)

    if state.body:
        _draw_head(draw, state, cell_size)
        for block in state.body[1:]:
            _draw_cell(draw, block.x, block.y, cell_size, ColorScheme.SNAKE)

    if state.game_over:
        _draw_rectangle(draw, ColorScheme.GAME_OVER, 0, 0, width, height, cell_size)


def render_frame(state: GameState, cell_size: int = BLOCK_SIZE) -> Image.Image:
    """Render a single frame of the game into a new RGB image"""
    img = Image.new('RGB', (state.width * cell_size, state.height * cell_size))
    draw = ImageDraw.Draw(img, 'RGBA')
    render(state, draw, cell_size)
    return img
