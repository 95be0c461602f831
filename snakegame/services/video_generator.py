"""
Video Generation Service for Snake sessions

This service turns a played session into an MP4 by:
1. Rendering each GameState snapshot using PIL (Pillow)
2. Encoding frames to video using MoviePy/FFmpeg
"""

import logging
import os
from typing import List

import numpy as np
from moviepy import ImageSequenceClip

from ..domain.constants import BLOCK_SIZE
from ..domain.game_state import GameState
from .board_renderer import render_frame

logger = logging.getLogger(__name__)

# Video settings
DEFAULT_FPS = 10


class SessionVideoGenerator:
    """Collect rendered frames of a session and write them as an MP4"""

    def __init__(self, fps: int = DEFAULT_FPS, cell_size: int = BLOCK_SIZE):
        if fps <= 0:
            raise ValueError(f"fps must be positive, got {fps}")
        self.fps = fps
        self.cell_size = cell_size
        self.frames: List[np.ndarray] = []

    def add_frame(self, state: GameState):
        """Render `state` and append it to the frame list"""
        self.frames.append(np.array(render_frame(state, self.cell_size)))

    def write(self, output_path: str) -> str:
        """
        Encode the collected frames

        Args:
            output_path: Destination .mp4 path; parent directories are created

        Returns:
            Path to the generated video file

        Raises:
            ValueError: If no frames were added
        """
        if not self.frames:
            raise ValueError("Cannot write a video with no frames")

        parent = os.path.dirname(output_path)
        if parent:
            os.makedirs(parent, exist_ok=True)

        logger.info(f"Encoding {len(self.frames)} frames at {self.fps} fps to {output_path}")

        clip = ImageSequenceClip(self.frames, fps=self.fps)
        clip.write_videofile(
            output_path,
            codec='libx264',
            audio=False,
            logger=None
        )

        logger.info(f"Video created successfully at {output_path}")
        return output_path

