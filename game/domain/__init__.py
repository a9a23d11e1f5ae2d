"""
Domain entities for the CyberSnake game engine.

This module contains the core game entities that are independent of
infrastructure concerns (terminal, keyboard, files, etc.).
"""

from .constants import Cell, Color, Direction, Key, KEY_DIRECTIONS
from .errors import SnakeError, NoFreeCellError, TerminalTooSmallError
from .grid import in_bounds, playable_cells, border_cells
from .snake import Snake
from .item import Item
from .session import GameStatus, SessionState

__all__ = [
    'Cell', 'Color', 'Direction', 'Key', 'KEY_DIRECTIONS',
    'SnakeError', 'NoFreeCellError', 'TerminalTooSmallError',
    'in_bounds', 'playable_cells', 'border_cells',
    'Snake',
    'Item',
    'GameStatus',
    'SessionState',
]
