"""
Replay Video Service for the Snake Game

Collects one rendered frame per snapshot and encodes them to MP4 with
MoviePy/FFmpeg.
"""

import logging
import os
from typing import List, Optional

import numpy as np
from moviepy import ImageSequenceClip

from domain.game_state import GameState
from services.frame_renderer import FrameRenderer

logger = logging.getLogger(__name__)

DEFAULT_FPS = 7  # one frame per 150 ms tick, rounded


class ReplayRecorder:
    """Accumulate frames for a replay video"""

    def __init__(self, renderer: Optional[FrameRenderer] = None):
        self.renderer = renderer or FrameRenderer()
        self.frames: List[np.ndarray] = []

    def add(self, snapshot: GameState):
        """Render ``snapshot`` and keep the frame. Usable as a GameLoop on_frame callback."""
        self.frames.append(np.array(self.renderer.render(snapshot)))

    def __len__(self):
        return len(self.frames)

    def write(self, output_path: str, fps: int = DEFAULT_FPS) -> str:
        """
        Encode the collected frames to an MP4 file

        Args:
            output_path: destination file
            fps: frames per second of the video

        Returns:
            Path to the written video file
        """
        if not self.frames:
            raise ValueError("No frames recorded; nothing to write.")
        if fps <= 0:
            raise ValueError(f"FPS must be positive, got {fps}.")

        directory = os.path.dirname(output_path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        logger.info(f"Encoding {len(self.frames)} frames at {fps} fps to {output_path}")
        clip = ImageSequenceClip(self.frames, fps=fps)
        clip.write_videofile(
            output_path,
            codec='libx264',
            audio=False,
            logger=None
        )
        clip.close()

        logger.info(f"Video created successfully at {output_path}")
        return output_path
