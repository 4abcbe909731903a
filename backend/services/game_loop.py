"""
Fixed-interval scheduler that drives a GameSession.

The loop is the only thing that calls GameSession.tick(). It runs ticks one
at a time on the caller's thread and stops scheduling them once the game is
over; restarting is left to the caller.
"""

import logging
import time
from typing import Callable, Optional, Sequence

from domain.errors import GridFull
from domain.game_state import GameState
from domain.session import GameSession

logger = logging.getLogger(__name__)

FrameCallback = Callable[[GameState], None]


class GameLoop:
    """Calls tick() every session.tick_interval_ms and publishes snapshots."""

    def __init__(self, session: GameSession, on_frame: Optional[FrameCallback] = None):
        self.session = session
        self.on_frame = on_frame
        self._accumulated_ms = 0.0

    def reset(self):
        self._accumulated_ms = 0.0

    def _step(self) -> str:
        outcome = self.session.tick()
        if self.on_frame is not None:
            self.on_frame(self.session.snapshot())
        return outcome

    def advance(self, elapsed_ms: float) -> int:
        """
        Feed wall-clock time into the loop and run every tick that is due.

        Args:
            elapsed_ms: time since the previous call, in milliseconds

        Returns:
            Number of ticks executed
        """
        if elapsed_ms < 0:
            raise ValueError(f"Elapsed time cannot be negative, got {elapsed_ms}.")
        if self.session.is_game_over:
            self.reset()
            return 0

        self._accumulated_ms += elapsed_ms
        interval = self.session.tick_interval_ms
        ticks = 0
        while self._accumulated_ms >= interval:
            self._accumulated_ms -= interval
            self._step()
            ticks += 1
            if self.session.is_game_over:
                self.reset()
                break
        return ticks

    def run(
        self,
        moves: Optional[Sequence[Optional[str]]] = None,
        max_ticks: Optional[int] = None,
        sleep: Callable[[float], None] = time.sleep
    ) -> GameState:
        """
        Blocking headless loop.

        Args:
            moves: per-tick direction requests; None entries mean no input
            max_ticks: stop after this many ticks even if the game continues
            sleep: called with the interval in seconds between ticks

        Returns:
            Snapshot of the session when the loop stopped
        """
        moves = moves or []
        ticks = 0
        while not self.session.is_game_over:
            if max_ticks is not None and ticks >= max_ticks:
                break
            if ticks < len(moves) and moves[ticks] is not None:
                self.session.request_direction(moves[ticks])
            try:
                self._step()
            except GridFull as e:
                logger.error(f"Stopping loop after {ticks} ticks: {e}")
                raise
            ticks += 1
            if not self.session.is_game_over and (max_ticks is None or ticks < max_ticks):
                sleep(self.session.tick_interval_ms / 1000)

        snapshot = self.session.snapshot()
        logger.info(
            f"Loop finished after {ticks} ticks. Score: {snapshot.score}, "
            f"game over: {snapshot.is_game_over}"
        )
        return snapshot
