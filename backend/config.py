"""
Runtime settings for the snake game frontends.

Game rules (grid size, speed, starting position) are fixed in
domain/constants.py; only frontend concerns are read from the environment.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_VIDEO_FPS = 7


@dataclass
class Settings:
    log_level: str = DEFAULT_LOG_LEVEL
    seed: Optional[int] = None
    frames_dir: Optional[str] = None
    video_fps: int = DEFAULT_VIDEO_FPS


def _int_env(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


def load_settings() -> Settings:
    """Build Settings from SNAKE_* environment variables (and .env)"""
    return Settings(
        log_level=os.getenv("SNAKE_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        seed=_int_env("SNAKE_SEED", None),
        frames_dir=os.getenv("SNAKE_FRAMES_DIR") or None,
        video_fps=_int_env("SNAKE_VIDEO_FPS", DEFAULT_VIDEO_FPS),
    )
