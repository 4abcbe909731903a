#!/usr/bin/env python3
"""
Headless snake runner

Plays a scripted sequence of moves, one character per tick, and reports the
outcome. Optionally dumps the text board, PNG frames or an MP4 replay.

Usage:
    python simulate.py --moves "....DDDLLL"
    python simulate.py --moves "RRRR" --print-board
    python simulate.py --moves "UUUU....RR" --frames-dir ./frames --video replay.mp4

Move characters:
    U, D, L, R   request that direction before the tick
    .            no input for that tick
"""

import os
import sys
import random
import time
import argparse
import logging
from typing import List, Optional

# Add parent directory to path for imports
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import load_settings
from domain.constants import UP, DOWN, LEFT, RIGHT
from domain.session import GameSession
from services.frame_renderer import FrameRenderer
from services.game_loop import GameLoop

logger = logging.getLogger(__name__)

MOVE_CHARS = {
    'U': UP,
    'D': DOWN,
    'L': LEFT,
    'R': RIGHT,
    '.': None,
}


def parse_moves(text: str) -> List[Optional[str]]:
    """Turn a move string like "..UURR" into per-tick direction requests"""
    moves = []
    for position, char in enumerate(text):
        if char.isspace():
            continue
        key = char.upper()
        if key not in MOVE_CHARS:
            raise ValueError(f"Invalid move character {char!r} at position {position}")
        moves.append(MOVE_CHARS[key])
    return moves


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Run a snake game headlessly from a scripted move sequence',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument(
        '--moves', '-m',
        type=str,
        default='',
        help='Move script, one character per tick (U/D/L/R or . for no input)'
    )
    parser.add_argument(
        '--ticks', '-n',
        type=int,
        default=None,
        help='Maximum number of ticks (default: script length, or until game over when no script is given)'
    )
    parser.add_argument(
        '--seed',
        type=int,
        default=None,
        help='Seed for food placement (default: SNAKE_SEED or random)'
    )
    parser.add_argument(
        '--print-board',
        action='store_true',
        help='Log the text board after every tick'
    )
    parser.add_argument(
        '--frames-dir',
        type=str,
        default=None,
        help='Write one PNG per tick into this directory (default: SNAKE_FRAMES_DIR)'
    )
    parser.add_argument(
        '--video',
        type=str,
        default=None,
        help='Write an MP4 replay to this path'
    )
    parser.add_argument(
        '--fps',
        type=int,
        default=None,
        help='Replay video frame rate (default: SNAKE_VIDEO_FPS or 7)'
    )
    parser.add_argument(
        '--realtime',
        action='store_true',
        help='Sleep for the tick interval between ticks'
    )
    parser.add_argument(
        '--log-level',
        type=str,
        default=None,
        help='Logging level (default: SNAKE_LOG_LEVEL or INFO)'
    )
    return parser


def run_simulation(args: argparse.Namespace) -> dict:
    """Run the game described by ``args`` and return a summary dict"""
    settings = load_settings()
    seed = args.seed if args.seed is not None else settings.seed
    frames_dir = args.frames_dir or settings.frames_dir
    fps = args.fps if args.fps is not None else settings.video_fps

    moves = parse_moves(args.moves)
    if args.ticks is not None:
        max_ticks = args.ticks
    else:
        max_ticks = len(moves) if moves else None

    session = GameSession(rng=random.Random(seed))
    renderer = FrameRenderer()

    recorder = None
    if args.video:
        # Imported lazily so runs without --video don't need MoviePy/FFmpeg
        from services.replay_video import ReplayRecorder
        recorder = ReplayRecorder(renderer)

    frame_index = [0]

    def save_frame(snapshot):
        renderer.save(snapshot, os.path.join(frames_dir, f"frame_{frame_index[0]:05d}.png"))
        frame_index[0] += 1

    def on_frame(snapshot):
        if args.print_board:
            logger.info(f"Tick {snapshot.tick_number} ({snapshot.direction}):\n{snapshot.print_board()}")
        if frames_dir:
            save_frame(snapshot)
        if recorder is not None:
            recorder.add(snapshot)

    if recorder is not None:
        recorder.add(session.snapshot())
    if frames_dir:
        save_frame(session.snapshot())

    loop = GameLoop(session, on_frame=on_frame)
    sleep = time.sleep if args.realtime else (lambda _seconds: None)
    final = loop.run(moves=moves, max_ticks=max_ticks, sleep=sleep)

    if recorder is not None:
        recorder.write(args.video, fps=fps)

    return {
        "ticks": final.tick_number,
        "score": final.score,
        "length": len(final.snake),
        "game_over": final.is_game_over,
        "death_reason": final.death_reason,
    }


def main(argv: Optional[List[str]] = None):
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings()
        log_level = (args.log_level or settings.log_level).upper()
        logging.basicConfig(
            level=getattr(logging, log_level, logging.INFO),
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

        summary = run_simulation(args)
        print(
            f"ticks={summary['ticks']} score={summary['score']} length={summary['length']} "
            f"game_over={summary['game_over']} reason={summary['death_reason']}"
        )

    except KeyboardInterrupt:
        logger.info("\nCancelled by user")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == '__main__':
    main()
