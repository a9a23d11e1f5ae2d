"""
Game constants for CyberSnake.
"""

from enum import Enum
from typing import Dict, Tuple

# A grid position (x, y); y grows downward on screen
Cell = Tuple[int, int]


class Direction(Enum):
    """Cardinal heading, carrying its unit vector and head glyph."""

    UP = ((0, -1), '^')
    DOWN = ((0, 1), 'v')
    LEFT = ((-1, 0), '<')
    RIGHT = ((1, 0), '>')

    def __init__(self, vector: Cell, glyph: str):
        self.vector = vector
        self.glyph = glyph

    @property
    def opposite(self) -> "Direction":
        dx, dy = self.vector
        return Direction.from_vector((-dx, -dy))

    @classmethod
    def from_vector(cls, vector: Cell) -> "Direction":
        for direction in cls:
            if direction.vector == vector:
                return direction
        raise ValueError(f"Not a cardinal vector: {vector}")


class Key(Enum):
    """Symbolic keys understood by the game; everything else is ignored."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    SPACE = "space"
    ESCAPE = "escape"
    ENTER = "enter"
    DIGIT_1 = "1"
    DIGIT_2 = "2"


KEY_DIRECTIONS: Dict[Key, Direction] = {
    Key.UP: Direction.UP,
    Key.DOWN: Direction.DOWN,
    Key.LEFT: Direction.LEFT,
    Key.RIGHT: Direction.RIGHT,
}


class Color(Enum):
    CYAN = "cyan"
    WHITE = "white"
    YELLOW = "yellow"
    GREEN = "green"
    MAGENTA = "magenta"
    RED = "red"
    DARK_GRAY = "dark_gray"


# Board
BOARD_WIDTH = 50
BOARD_HEIGHT = 22

# Scoring
FOOD_POINTS = 10
BONUS_POINTS = 50
BONUS_SPAWN_CHANCE = 0.01

# Pacing (milliseconds)
INITIAL_TICK_DELAY_MS = 140
TICK_DELAY_STEP_MS = 5
MIN_TICK_DELAY_MS = 40
PAUSE_POLL_DELAY_MS = 50

# Glyphs
FOOD_GLYPH = "●"
BONUS_GLYPH = "★"
BODY_GLYPH = "■"
FRAME_GLYPH = "█"

# Audible cues: (frequency Hz, duration ms)
FOOD_CUE = (800, 50)
BONUS_CUE = (1200, 100)
GAME_OVER_CUE = (200, 400)
