"""
Infrastructure services for CyberSnake.

Terminal display, keyboard input, audible cues and high score storage.
"""

from .display import Display, CursesDisplay
from .keyboard import Keyboard, CursesKeyboard, translate_key
from .high_score import HighScoreStore
from . import sound

__all__ = [
    'Display',
    'CursesDisplay',
    'Keyboard',
    'CursesKeyboard',
    'translate_key',
    'HighScoreStore',
    'sound',
]
