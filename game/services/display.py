"""
Character-grid display surface.

The engine only ever addresses cells by (x, y) and writes short strings
with a color, so any surface that can do that can host the game.
"""

import curses
import logging
from typing import Dict, Optional, Tuple

from domain.constants import Color

logger = logging.getLogger(__name__)


class Display:
    """
    Base class/interface for a fixed-size character surface.
    """

    def clear(self) -> None:
        raise NotImplementedError

    def write(self, x: int, y: int, text: str, color: Optional[Color] = None) -> None:
        """Write text starting at cell (x, y) in the given color."""
        raise NotImplementedError

    def set_cursor_visible(self, visible: bool) -> None:
        raise NotImplementedError

    def refresh(self) -> None:
        """Push pending writes to the screen."""

    def size(self) -> Tuple[int, int]:
        """Return (columns, rows)."""
        raise NotImplementedError


# Foreground color and extra attribute for each game color
_CURSES_COLORS = {
    Color.CYAN: (curses.COLOR_CYAN, curses.A_NORMAL),
    Color.WHITE: (curses.COLOR_WHITE, curses.A_NORMAL),
    Color.YELLOW: (curses.COLOR_YELLOW, curses.A_BOLD),
    Color.GREEN: (curses.COLOR_GREEN, curses.A_BOLD),
    Color.MAGENTA: (curses.COLOR_MAGENTA, curses.A_BOLD),
    Color.RED: (curses.COLOR_RED, curses.A_BOLD),
    Color.DARK_GRAY: (curses.COLOR_WHITE, curses.A_DIM),
}


class CursesDisplay(Display):
    """Display backed by a curses window."""

    def __init__(self, stdscr):
        self.stdscr = stdscr
        self._attrs: Dict[Color, int] = {}
        self._init_colors()

    def _init_colors(self) -> None:
        has_colors = curses.has_colors()
        if has_colors:
            curses.start_color()
            try:
                curses.use_default_colors()
                background = -1
            except curses.error:
                background = curses.COLOR_BLACK

        for pair_number, (color, (foreground, attr)) in enumerate(_CURSES_COLORS.items(), start=1):
            if has_colors:
                curses.init_pair(pair_number, foreground, background)
                self._attrs[color] = curses.color_pair(pair_number) | attr
            else:
                self._attrs[color] = attr

    def clear(self) -> None:
        self.stdscr.erase()

    def write(self, x: int, y: int, text: str, color: Optional[Color] = None) -> None:
        attr = self._attrs.get(color, curses.A_NORMAL) if color is not None else curses.A_NORMAL
        try:
            self.stdscr.addstr(y, x, text, attr)
        except curses.error:
            # addstr reports an error after writing into the last cell of the
            # window; anything else off-screen is a real problem
            rows, cols = self.stdscr.getmaxyx()
            if not (y == rows - 1 and x + len(text) >= cols):
                raise

    def set_cursor_visible(self, visible: bool) -> None:
        try:
            curses.curs_set(1 if visible else 0)
        except curses.error:
            logger.debug("Terminal does not support cursor visibility changes")

    def refresh(self) -> None:
        self.stdscr.refresh()

    def size(self) -> Tuple[int, int]:
        rows, cols = self.stdscr.getmaxyx()
        return cols, rows
