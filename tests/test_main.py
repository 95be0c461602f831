"""
Tests for main.py - the presentation boundary and the headless session driver.
"""

import os
import random
import sys
from unittest.mock import patch

import pytest
from PIL import Image, ImageDraw

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from snakegame.domain import Direction, Key  # noqa: E402
from snakegame.main import main, new_game, on_key, on_tick, render, run_session  # noqa: E402
from snakegame.players import Player  # noqa: E402


class AlwaysUpPlayer(Player):
    """Drives straight into the top wall."""

    def get_key(self, game_state):
        return Key.UP


class TestBoundary:
    """Tests for new_game / on_key / on_tick / render."""

    def test_new_game(self):
        game = new_game(20, 20, rng=random.Random(0))
        assert game.width == 20
        assert game.height == 20
        assert game.food.exists is True

    def test_new_game_rejects_small_board(self):
        with pytest.raises(ValueError):
            new_game(2, 2)

    @pytest.mark.parametrize("key", [Key.DOWN, Direction.DOWN, "DOWN", "down"])
    def test_on_key_accepts_key_direction_or_name(self, key):
        game = new_game(20, 20, rng=random.Random(0))
        game.place_food((10, 10))
        on_key(game, key)
        assert game.snake.position() == (3, 4)
        assert game.snake.heading() == Direction.DOWN

    @pytest.mark.parametrize("key", [Key.OTHER, "space", "", None])
    def test_on_key_ignores_other_keys(self, key):
        game = new_game(20, 20, rng=random.Random(0))
        body_before = list(game.snake.body)
        on_key(game, key)
        assert list(game.snake.body) == body_before

    def test_on_tick_drives_timer(self):
        game = new_game(20, 20, rng=random.Random(0))
        game.place_food((10, 10))
        on_tick(game, 0.6)
        assert game.snake.position() == (4, 3)

    def test_render_does_not_mutate(self):
        game = new_game(20, 20, rng=random.Random(0))
        on_tick(game, 0.2)
        before = game.snapshot()

        img = Image.new("RGB", (20 * 5, 20 * 5))
        render(game, ImageDraw.Draw(img, "RGBA"), cell_size=5)

        assert game.snapshot() == before


class TestRunSession:
    """Tests for the headless driver."""

    def test_counts_deaths_and_restarts(self):
        """Hitting the top wall twice in 20 ticks gives two deaths and one restart."""
        result = run_session(width=20, height=20, ticks=20, tick=0.1, seed=1, player=AlwaysUpPlayer())
        assert result["ticks"] == 20
        assert result["deaths"] == 2
        assert result["restarts"] == 1
        assert result["video_path"] is None

    def test_random_session_runs(self):
        result = run_session(width=12, height=12, ticks=300, tick=0.1, seed=7)
        assert result["best_length"] >= 3
        assert result["final_length"] >= 3
        assert result["deaths"] >= result["restarts"]

    def test_seeded_sessions_are_reproducible(self):
        first = run_session(width=12, height=12, ticks=200, tick=0.1, seed=11)
        second = run_session(width=12, height=12, ticks=200, tick=0.1, seed=11)
        assert first == second

    def test_video_frames_are_collected(self, tmp_path):
        output_path = str(tmp_path / "session.mp4")
        with patch("snakegame.main.SessionVideoGenerator") as mock_generator:
            mock_generator.return_value.write.return_value = output_path
            result = run_session(width=10, height=10, ticks=15, seed=3, output_path=output_path, fps=4)

        mock_generator.assert_called_once_with(fps=4)
        assert mock_generator.return_value.add_frame.call_count == 15
        mock_generator.return_value.write.assert_called_once_with(output_path)
        assert result["video_path"] == output_path


class TestMain:
    """Tests for the CLI entry point."""

    def test_main_passes_arguments(self):
        summary = {"deaths": 0, "restarts": 0, "best_length": 3, "final_length": 3,
                   "ticks": 5, "video_path": None}
        with patch("snakegame.main.run_session", return_value=summary) as mock_run:
            exit_code = main(["--width", "15", "--height", "12", "--ticks", "5", "--seed", "9"])

        assert exit_code == 0
        kwargs = mock_run.call_args.kwargs
        assert kwargs["width"] == 15
        assert kwargs["height"] == 12
        assert kwargs["ticks"] == 5
        assert kwargs["seed"] == 9
        assert kwargs["output_path"] is None

    def test_main_returns_error_code_on_failure(self):
        with patch("snakegame.main.run_session", side_effect=ValueError("bad board")):
            assert main(["--width", "2"]) == 1

    def test_main_reads_board_size_from_environment(self, monkeypatch):
        """Environment values are used when the flags are not given."""
        monkeypatch.setenv("SNAKE_BOARD_WIDTH", "14")
        monkeypatch.setenv("SNAKE_BOARD_HEIGHT", "11")
        monkeypatch.setenv("SNAKE_VIDEO_FPS", "6")
        summary = {"deaths": 0, "restarts": 0, "best_length": 3, "final_length": 3,
                   "ticks": 1, "video_path": None}
        with patch("snakegame.main.run_session", return_value=summary) as mock_run:
            assert main(["--ticks", "1"]) == 0

        kwargs = mock_run.call_args.kwargs
        assert kwargs["width"] == 14
        assert kwargs["height"] == 11
        assert kwargs["fps"] == 6

    def test_flags_override_environment(self, monkeypatch):
        monkeypatch.setenv("SNAKE_BOARD_WIDTH", "14")
        summary = {"deaths": 0, "restarts": 0, "best_length": 3, "final_length": 3,
                   "ticks": 1, "video_path": None}
        with patch("snakegame.main.run_session", return_value=summary) as mock_run:
            assert main(["--ticks", "1", "--width", "9"]) == 0

        assert mock_run.call_args.kwargs["width"] == 9

    @pytest.mark.parametrize("name", ["SNAKE_BOARD_WIDTH", "SNAKE_BOARD_HEIGHT", "SNAKE_VIDEO_FPS"])
    def test_bad_environment_value_returns_error_code(self, monkeypatch, name):
        """A non-integer setting is logged and exits with 1 instead of a traceback."""
        monkeypatch.setenv(name, "wide")
        with patch("snakegame.main.run_session") as mock_run:
            assert main(["--ticks", "1"]) == 1
        mock_run.assert_not_called()
