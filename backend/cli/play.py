#!/usr/bin/env python3
"""
Interactive snake game window

Arrow keys steer the snake. When the game is over, press Enter/Space or
click "Play Again" to restart. Escape or closing the window quits.

Usage:
    python play.py
    python play.py --scale 2 --seed 42
"""

import os
import sys
import random
import argparse
import logging
from typing import List, Optional

import pygame

# Add parent directory to path for imports
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import load_settings
from domain.session import GameSession
from services.controls import direction_for_key, is_restart_key
from services.frame_renderer import FrameRenderer
from services.game_loop import GameLoop

logger = logging.getLogger(__name__)

DISPLAY_FPS = 60


def pil_to_surface(image) -> pygame.Surface:
    return pygame.image.frombytes(image.tobytes(), image.size, image.mode)


def run_window(session: GameSession, renderer: FrameRenderer):
    """Drive the session from the pygame event loop until the window closes"""
    loop = GameLoop(session)

    pygame.init()
    try:
        pygame.display.set_caption("Snake Game")
        screen = pygame.display.set_mode(renderer.frame_size(session.snapshot()))
        clock = pygame.time.Clock()

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False

                elif event.type == pygame.KEYDOWN:
                    key_name = pygame.key.name(event.key)
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif session.is_game_over:
                        if is_restart_key(key_name):
                            session.restart()
                            loop.reset()
                    else:
                        direction = direction_for_key(key_name)
                        if direction is not None:
                            session.request_direction(direction)

                elif event.type == pygame.MOUSEBUTTONDOWN and session.is_game_over:
                    x0, y0, x1, y1 = renderer.play_again_bounds(session.snapshot())
                    mx, my = event.pos
                    if x0 <= mx <= x1 and y0 <= my <= y1:
                        session.restart()
                        loop.reset()

            loop.advance(clock.tick(DISPLAY_FPS))

            screen.blit(pil_to_surface(renderer.render(session.snapshot())), (0, 0))
            pygame.display.flip()
    finally:
        pygame.quit()


def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(
        description='Play snake in a window',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument(
        '--seed',
        type=int,
        default=None,
        help='Seed for food placement (default: SNAKE_SEED or random)'
    )
    parser.add_argument(
        '--scale',
        type=int,
        default=1,
        help='Integer window scale factor (default: 1)'
    )
    parser.add_argument(
        '--log-level',
        type=str,
        default=None,
        help='Logging level (default: SNAKE_LOG_LEVEL or INFO)'
    )
    args = parser.parse_args(argv)

    try:
        settings = load_settings()
        log_level = (args.log_level or settings.log_level).upper()
        logging.basicConfig(
            level=getattr(logging, log_level, logging.INFO),
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

        seed = args.seed if args.seed is not None else settings.seed
        session = GameSession(rng=random.Random(seed))
        renderer = FrameRenderer(scale=args.scale)
        run_window(session, renderer)

    except KeyboardInterrupt:
        logger.info("\nCancelled by user")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == '__main__':
    main()
