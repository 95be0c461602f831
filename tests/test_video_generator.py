"""
Tests for the session video generator.
"""

import os
import random
import sys
from unittest.mock import patch

import numpy as np
import pytest

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from snakegame.domain import Game  # noqa: E402
from snakegame.services.video_generator import SessionVideoGenerator  # noqa: E402


def test_add_frame_renders_numpy_array():
    generator = SessionVideoGenerator(fps=5, cell_size=4)
    generator.add_frame(Game(10, 8, rng=random.Random(0)).snapshot())

    assert len(generator.frames) == 1
    frame = generator.frames[0]
    assert isinstance(frame, np.ndarray)
    assert frame.shape == (8 * 4, 10 * 4, 3)


def test_write_encodes_frames_with_moviepy(tmp_path):
    generator = SessionVideoGenerator(fps=5, cell_size=4)
    game = Game(10, 8, rng=random.Random(0))
    generator.add_frame(game.snapshot())
    generator.add_frame(game.snapshot())

    output_path = str(tmp_path / "videos" / "session.mp4")
    with patch("snakegame.services.video_generator.ImageSequenceClip") as mock_clip:
        result = generator.write(output_path)

    assert result == output_path
    assert os.path.isdir(tmp_path / "videos")
    args, kwargs = mock_clip.call_args
    assert len(args[0]) == 2
    assert kwargs["fps"] == 5
    mock_clip.return_value.write_videofile.assert_called_once()
    assert mock_clip.return_value.write_videofile.call_args[0][0] == output_path


def test_write_without_frames_raises(tmp_path):
    generator = SessionVideoGenerator()
    with pytest.raises(ValueError):
        generator.write(str(tmp_path / "empty.mp4"))


def test_non_positive_fps_is_rejected():
    with pytest.raises(ValueError):
        SessionVideoGenerator(fps=0)
