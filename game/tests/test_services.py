"""
Tests for the terminal services: keyboard, display and sound.

curses is mocked at the module level so these run without a terminal.
"""

import curses
import os
import sys
from unittest.mock import MagicMock, patch

import pytest

# Add game directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.constants import Color, Key
from services import sound
from services.display import CursesDisplay
from services.keyboard import CursesKeyboard, translate_key
from conftest import FakeKeyboard


class TestTranslateKey:
    """Tests for translate_key()."""

    @pytest.mark.parametrize("code,expected", [
        (curses.KEY_UP, Key.UP),
        (curses.KEY_DOWN, Key.DOWN),
        (curses.KEY_LEFT, Key.LEFT),
        (curses.KEY_RIGHT, Key.RIGHT),
        (ord('w'), Key.UP),
        (ord('A'), Key.LEFT),
        (ord(' '), Key.SPACE),
        (27, Key.ESCAPE),
        (10, Key.ENTER),
        (13, Key.ENTER),
        (curses.KEY_ENTER, Key.ENTER),
        (ord('1'), Key.DIGIT_1),
        (ord('2'), Key.DIGIT_2),
    ])
    def test_known_keys(self, code, expected):
        """Game keys map to their symbolic value."""
        assert translate_key(code) is expected

    @pytest.mark.parametrize("code", [ord('x'), ord('3'), ord('q'), curses.KEY_F1])
    def test_unknown_keys_map_to_none(self, code):
        """Keys the game does not use are dropped."""
        assert translate_key(code) is None


class TestKeyboardPoll:
    """Tests for Keyboard.poll()."""

    def test_poll_returns_none_when_idle(self):
        """poll() does not block when no key is waiting."""
        assert FakeKeyboard().poll() is None

    def test_poll_returns_pending_key(self):
        """poll() hands back the waiting key."""
        keyboard = FakeKeyboard([Key.SPACE])
        assert keyboard.poll() is Key.SPACE
        assert keyboard.poll() is None


class TestCursesKeyboard:
    """Tests for CursesKeyboard with a mocked window."""

    def test_enables_keypad(self):
        """Arrow keys need keypad mode."""
        stdscr = MagicMock()
        CursesKeyboard(stdscr)
        stdscr.keypad.assert_called_once_with(True)

    def test_key_available_false_when_no_input(self):
        """A -1 from getch means nothing is waiting."""
        stdscr = MagicMock()
        stdscr.getch.return_value = -1
        with patch('services.keyboard.curses.ungetch') as mock_ungetch:
            assert CursesKeyboard(stdscr).key_available() is False
        mock_ungetch.assert_not_called()

    def test_key_available_pushes_key_back(self):
        """A peeked key is returned to the queue for read_key()."""
        stdscr = MagicMock()
        stdscr.getch.return_value = curses.KEY_UP
        with patch('services.keyboard.curses.ungetch') as mock_ungetch:
            assert CursesKeyboard(stdscr).key_available() is True
        mock_ungetch.assert_called_once_with(curses.KEY_UP)
        stdscr.nodelay.assert_any_call(True)

    def test_read_key_translates(self):
        """read_key() blocks and returns the symbolic key."""
        stdscr = MagicMock()
        stdscr.getch.return_value = 27
        assert CursesKeyboard(stdscr).read_key() is Key.ESCAPE
        stdscr.nodelay.assert_called_with(False)


@pytest.fixture
def mono_curses():
    """curses functions that need a live terminal, mocked; no color support."""
    with patch('services.display.curses.has_colors', return_value=False), \
         patch('services.display.curses.curs_set') as mock_curs_set:
        yield mock_curs_set


class TestCursesDisplay:
    """Tests for CursesDisplay with a mocked window."""

    def test_write_addresses_row_then_column(self, mono_curses):
        """write(x, y) becomes addstr(y, x)."""
        stdscr = MagicMock()
        display = CursesDisplay(stdscr)
        display.write(3, 7, "hi", Color.RED)
        stdscr.addstr.assert_called_once_with(7, 3, "hi", curses.A_BOLD)

    def test_write_to_last_cell_is_tolerated(self, mono_curses):
        """curses complains after writing the bottom-right cell; that is fine."""
        stdscr = MagicMock()
        stdscr.getmaxyx.return_value = (23, 50)
        stdscr.addstr.side_effect = curses.error
        CursesDisplay(stdscr).write(49, 22, "█", Color.DARK_GRAY)

    def test_write_off_screen_raises(self, mono_curses):
        """Other curses write failures propagate."""
        stdscr = MagicMock()
        stdscr.getmaxyx.return_value = (23, 50)
        stdscr.addstr.side_effect = curses.error
        with pytest.raises(curses.error):
            CursesDisplay(stdscr).write(10, 40, "x")

    def test_size_is_columns_then_rows(self, mono_curses):
        """size() reports (columns, rows)."""
        stdscr = MagicMock()
        stdscr.getmaxyx.return_value = (24, 80)
        assert CursesDisplay(stdscr).size() == (80, 24)

    def test_cursor_visibility(self, mono_curses):
        """The cursor can be hidden and shown."""
        display = CursesDisplay(MagicMock())
        display.set_cursor_visible(False)
        display.set_cursor_visible(True)
        assert [c.args for c in mono_curses.call_args_list] == [(0,), (1,)]

    def test_cursor_visibility_unsupported(self, mono_curses):
        """Terminals without cursor control are not an error."""
        mono_curses.side_effect = curses.error
        CursesDisplay(MagicMock()).set_cursor_visible(False)

    def test_clear_and_refresh(self, mono_curses):
        """clear() erases the window and refresh() flushes it."""
        stdscr = MagicMock()
        display = CursesDisplay(stdscr)
        display.clear()
        display.refresh()
        stdscr.erase.assert_called_once()
        stdscr.refresh.assert_called_once()


class TestBeep:
    """Tests for sound.beep()."""

    @patch('services.sound.curses.beep')
    def test_beep_rings_bell(self, mock_beep):
        """A cue rings the terminal bell."""
        sound.beep(800, 50)
        mock_beep.assert_called_once()

    @patch('services.sound.curses.beep', side_effect=curses.error)
    def test_beep_failure_is_swallowed(self, mock_beep):
        """An unsupported bell never interrupts the game."""
        sound.beep(1200, 100)
        mock_beep.assert_called_once()

    @patch('services.sound.curses.beep')
    def test_muted_beep_is_silent(self, mock_beep):
        """With sound disabled no bell is rung."""
        with patch.object(sound, 'enabled', False):
            sound.beep(200, 400)
        mock_beep.assert_not_called()
