"""
Entry points for the Snake engine.

The presentation layer talks to the engine through four calls:

    game = new_game(width, height)
    on_key(game, key)          # once per key press
    on_tick(game, delta_time)  # once per frame
    render(game, draw)         # once per frame, read-only

run_session() drives the same calls headlessly with an autopilot player and
can write the rendered frames to an MP4.
"""

import argparse
import logging
import os
import random
import sys
from typing import Any, Dict, Optional, Union

from dotenv import load_dotenv
from PIL import ImageDraw

from .domain.constants import BLOCK_SIZE, GAME_HEIGHT, GAME_WIDTH, Direction, Key
from .domain.game import Game
from .players import Player, RandomPlayer
from .services import board_renderer
from .services.video_generator import DEFAULT_FPS, SessionVideoGenerator

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_TICK = 0.1  # seconds of game time per simulated frame
DEFAULT_TICKS = 600


def new_game(width: int, height: int, rng: Optional[random.Random] = None) -> Game:
    """Construct a game; width and height must each exceed 2."""
    return Game(width, height, rng=rng)


def _coerce_key(key: Union[Key, Direction, str]) -> Key:
    if isinstance(key, Key):
        return key
    # Direction members share the Key value names
    value = getattr(key, "value", key)
    try:
        return Key(str(value).upper())
    except ValueError:
        return Key.OTHER


def on_key(game: Game, key: Union[Key, Direction, str]):
    """Forward a key press. Accepts Key or Direction members or names like 'up'; anything else is Other."""
    game.key_pressed(_coerce_key(key))


def on_tick(game: Game, delta_time: float):
    game.update(delta_time)


def render(game: Game, draw: ImageDraw.ImageDraw, cell_size: int = BLOCK_SIZE):
    """Draw the game's current state onto `draw` without changing the game."""
    board_renderer.render(game.snapshot(), draw, cell_size)


def run_session(
    width: int = GAME_WIDTH,
    height: int = GAME_HEIGHT,
    ticks: int = DEFAULT_TICKS,
    tick: float = DEFAULT_TICK,
    seed: Optional[int] = None,
    player: Optional[Player] = None,
    output_path: Optional[str] = None,
    fps: int = DEFAULT_FPS,
) -> Dict[str, Any]:
    """
    Play a headless session.

    Args:
        width, height: Board size in cells
        ticks: Number of frames to simulate
        tick: Seconds of game time per frame
        seed: Seed for food placement and the default player
        player: Input source; defaults to a RandomPlayer
        output_path: If set, write the rendered frames to this MP4 path
        fps: Video frame rate

    Returns:
        A dictionary summarizing the session (ticks, deaths, restarts, best length, video path).
    """
    rng = random.Random(seed)
    game = new_game(width, height, rng=rng)
    player = player or RandomPlayer(random.Random(rng.random()))
    video = SessionVideoGenerator(fps=fps) if output_path else None

    deaths = 0
    restarts = 0
    best_length = len(game.snake)

    for _ in range(ticks):
        was_over = game.game_over

        on_key(game, player.get_key(game.snapshot()))
        on_tick(game, tick)

        if game.game_over and not was_over:
            deaths += 1
            logger.info(f"Snake died ({game.death_reason}) at length {len(game.snake)}")
            logger.debug("\n" + game.snapshot().print_board())
        elif was_over and not game.game_over:
            restarts += 1

        best_length = max(best_length, len(game.snake))

        if video is not None:
            video.add_frame(game.snapshot())

    video_path = video.write(output_path) if video is not None else None

    return {
        "ticks": ticks,
        "deaths": deaths,
        "restarts": restarts,
        "best_length": best_length,
        "final_length": len(game.snake),
        "video_path": video_path,
    }


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Play a headless Snake session with a random autopilot."
    )
    parser.add_argument("--width", type=int, default=None,
                        help="Board width in cells, border included (default: SNAKE_BOARD_WIDTH or 20)")
    parser.add_argument("--height", type=int, default=None,
                        help="Board height in cells, border included (default: SNAKE_BOARD_HEIGHT or 20)")
    parser.add_argument("--ticks", type=int, default=DEFAULT_TICKS,
                        help="Number of frames to simulate")
    parser.add_argument("--tick", type=float, default=DEFAULT_TICK,
                        help="Seconds of game time per frame")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for a reproducible session")
    parser.add_argument("--output", "-o", type=str, default=None,
                        help="Write the session to this MP4 file")
    parser.add_argument("--fps", type=int, default=None,
                        help="Video frames per second (default: SNAKE_VIDEO_FPS or 10)")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Log board snapshots on every death")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        width = args.width if args.width is not None else _env_int("SNAKE_BOARD_WIDTH", GAME_WIDTH)
        height = args.height if args.height is not None else _env_int("SNAKE_BOARD_HEIGHT", GAME_HEIGHT)
        fps = args.fps if args.fps is not None else _env_int("SNAKE_VIDEO_FPS", DEFAULT_FPS)

        result = run_session(
            width=width,
            height=height,
            ticks=args.ticks,
            tick=args.tick,
            seed=args.seed,
            output_path=args.output,
            fps=fps,
        )
    except Exception as e:
        logger.error(f"Session failed: {e}")
        return 1

    logger.info(
        f"Session finished: {result['deaths']} deaths, best length {result['best_length']}"
    )
    if result["video_path"]:
        logger.info(f"Video saved to {result['video_path']}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
