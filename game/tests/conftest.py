"""
Shared fixtures: in-memory display and scripted keyboard.
"""

import os
import sys
from collections import deque

import pytest

# Add game directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from services.display import Display  # noqa: E402
from services.keyboard import Keyboard  # noqa: E402
from services.high_score import HighScoreStore  # noqa: E402


class FakeDisplay(Display):
    """Records every write and keeps a cell map of what is on screen."""

    def __init__(self, cols=80, rows=30):
        self.cols = cols
        self.rows = rows
        self.cells = {}
        self.writes = []
        self.clears = 0
        self.refreshes = 0
        self.cursor_visible = True

    def clear(self):
        self.cells.clear()
        self.clears += 1

    def write(self, x, y, text, color=None):
        self.writes.append((x, y, text, color))
        for offset, char in enumerate(text):
            self.cells[(x + offset, y)] = char

    def set_cursor_visible(self, visible):
        self.cursor_visible = visible

    def refresh(self):
        self.refreshes += 1

    def size(self):
        return self.cols, self.rows

    def char_at(self, x, y):
        return self.cells.get((x, y), " ")

    def row_text(self, y):
        return "".join(self.char_at(x, y) for x in range(self.cols))

    def screen_text(self):
        return "\n".join(self.row_text(y) for y in range(self.rows))


class FakeKeyboard(Keyboard):
    """Feeds a fixed script of keys; None entries stand for unmapped keys."""

    def __init__(self, keys=()):
        self.keys = deque(keys)

    def push(self, *keys):
        self.keys.extend(keys)

    def key_available(self):
        return bool(self.keys)

    def read_key(self):
        if not self.keys:
            raise AssertionError("read_key() called with no scripted keys left")
        return self.keys.popleft()


@pytest.fixture
def display():
    return FakeDisplay()


@pytest.fixture
def keyboard():
    return FakeKeyboard()


@pytest.fixture
def store(tmp_path):
    return HighScoreStore(tmp_path / "highscore.txt")
