"""
Per-session state owned by the game engine.
"""

from dataclasses import dataclass
from enum import Enum

from .constants import INITIAL_TICK_DELAY_MS, MIN_TICK_DELAY_MS, TICK_DELAY_STEP_MS


class GameStatus(Enum):
    MENU = "menu"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"


@dataclass
class SessionState:
    """
    Score, pacing and play status for one run of the game.

    high_score survives across sessions; everything else is reset by reset().
    """

    score: int = 0
    high_score: int = 0
    tick_delay: int = INITIAL_TICK_DELAY_MS
    status: GameStatus = GameStatus.MENU

    @property
    def paused(self) -> bool:
        return self.status is GameStatus.PAUSED

    def reset(self) -> None:
        self.score = 0
        self.tick_delay = INITIAL_TICK_DELAY_MS
        self.status = GameStatus.PLAYING

    def toggle_pause(self) -> None:
        if self.status is GameStatus.PLAYING:
            self.status = GameStatus.PAUSED
        elif self.status is GameStatus.PAUSED:
            self.status = GameStatus.PLAYING

    def add_points(self, points: int) -> None:
        self.score += points

    def speed_up(self) -> None:
        """Shorten the tick delay by one step, never going below the floor."""
        if self.tick_delay > MIN_TICK_DELAY_MS:
            self.tick_delay = max(self.tick_delay - TICK_DELAY_STEP_MS, MIN_TICK_DELAY_MS)

    def record_high_score(self) -> bool:
        """Raise the high score to the current score if it beats it."""
        if self.score > self.high_score:
            self.high_score = self.score
            return True
        return False
