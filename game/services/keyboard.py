"""
Keyboard input source.

Translates raw key codes into the game's symbolic Key values. Keys the game
does not use come back as None.
"""

import curses
from typing import Dict, Optional

from domain.constants import Key


class Keyboard:
    """
    Base class/interface for key input.
    """

    def key_available(self) -> bool:
        """Return True if a key can be read without blocking."""
        raise NotImplementedError

    def read_key(self) -> Optional[Key]:
        """Block until a key is pressed and return it (None if unmapped)."""
        raise NotImplementedError

    def poll(self) -> Optional[Key]:
        """Return the pending key, if any, without blocking."""
        if self.key_available():
            return self.read_key()
        return None


KEY_CODES: Dict[int, Key] = {
    curses.KEY_UP: Key.UP,
    curses.KEY_DOWN: Key.DOWN,
    curses.KEY_LEFT: Key.LEFT,
    curses.KEY_RIGHT: Key.RIGHT,
    ord('w'): Key.UP,
    ord('W'): Key.UP,
    ord('s'): Key.DOWN,
    ord('S'): Key.DOWN,
    ord('a'): Key.LEFT,
    ord('A'): Key.LEFT,
    ord('d'): Key.RIGHT,
    ord('D'): Key.RIGHT,
    ord(' '): Key.SPACE,
    27: Key.ESCAPE,
    10: Key.ENTER,
    13: Key.ENTER,
    curses.KEY_ENTER: Key.ENTER,
    ord('1'): Key.DIGIT_1,
    ord('2'): Key.DIGIT_2,
}


def translate_key(code: int) -> Optional[Key]:
    return KEY_CODES.get(code)


class CursesKeyboard(Keyboard):
    """Keyboard backed by a curses window with keypad mode enabled."""

    def __init__(self, stdscr):
        self.stdscr = stdscr
        self.stdscr.keypad(True)

    def key_available(self) -> bool:
        self.stdscr.nodelay(True)
        try:
            code = self.stdscr.getch()
        finally:
            self.stdscr.nodelay(False)
        if code == -1:
            return False
        curses.ungetch(code)
        return True

    def read_key(self) -> Optional[Key]:
        self.stdscr.nodelay(False)
        return translate_key(self.stdscr.getch())
