#!/usr/bin/env python3
"""
CyberSnake - a terminal Snake game.

Usage:
    python cybersnake.py
    python cybersnake.py --high-score-file ~/.cybersnake_highscore --mute
    python cybersnake.py --log-file snake-debug.log --log-level DEBUG

Controls:
    Arrow keys / WASD: steer
    Space: pause / resume
    Esc: quit
"""

import argparse
import curses
import locale
import logging
import os
import random
import sys
import time
from typing import List, Optional

from snake_config import Settings, load_settings, setup_logging
from domain.constants import (
    BONUS_CUE,
    BONUS_GLYPH,
    BONUS_POINTS,
    BONUS_SPAWN_CHANCE,
    BOARD_HEIGHT,
    BOARD_WIDTH,
    FOOD_CUE,
    FOOD_GLYPH,
    FOOD_POINTS,
    FRAME_GLYPH,
    GAME_OVER_CUE,
    KEY_DIRECTIONS,
    PAUSE_POLL_DELAY_MS,
    Cell,
    Color,
    Key,
)
from domain.errors import NoFreeCellError, TerminalTooSmallError
from domain.grid import border_cells
from domain.item import Item
from domain.session import GameStatus, SessionState
from domain.snake import Snake
from services import sound
from services.display import CursesDisplay, Display
from services.high_score import HighScoreStore
from services.keyboard import CursesKeyboard, Keyboard

logger = logging.getLogger(__name__)

MENU_BANNER = [
    "█▀▀ █▄█ █▄▄ █▀▀ █▀█ █▀ █▄░█ ▄▀█ █▄▀ █▀▀",
    "█▄▄ ░█░ █▄█ ██▄ █▀▄ ▄█ █░▀█ █▀█ █░█ ██▄",
]
FAREWELL = "Thank you for playing CyberSnake Pro!"
PAUSED_LABEL = " PAUSED "
GAME_OVER_LABEL = " G A M E   O V E R "
GAME_OVER_HINT = " ENTER: Menu | ESC: Exit "

# Room for the status line with five-digit scores
MIN_TERMINAL_COLS = 64


class GameEngine:
    """
    Manages:
      - Board (width, height)
      - The snake, the food and the bonus star
      - Session state: score, high score, pacing, pause
      - Menu and game-over screens
    """

    def __init__(
        self,
        display: Display,
        keyboard: Keyboard,
        high_score_store: HighScoreStore,
        width: int = BOARD_WIDTH,
        height: int = BOARD_HEIGHT,
    ):
        self.display = display
        self.keyboard = keyboard
        self.high_score_store = high_score_store
        self.width = width
        self.height = height
        self.state = SessionState()
        self.snake: Optional[Snake] = None
        self.food: Optional[Item] = None
        self.bonus: Optional[Item] = None

    # -------------------------------
    # Session shell
    # -------------------------------
    def run(self) -> None:
        """Menu -> play -> game over, forever; leaves only via exit_gracefully()."""
        self.check_terminal_size()
        self.display.set_cursor_visible(False)
        self.state.high_score = self.high_score_store.load()

        while True:
            self.show_menu()
            self.play()
            self.game_over()

    def check_terminal_size(self) -> None:
        cols, rows = self.display.size()
        needed_cols = max(self.width, MIN_TERMINAL_COLS)
        needed_rows = self.height + 1
        if cols < needed_cols or rows < needed_rows:
            raise TerminalTooSmallError(needed_cols, needed_rows, cols, rows)

    def show_menu(self) -> None:
        """Draw the menu and wait for 1/Enter (start) or 2/Esc (exit)."""
        self.state.status = GameStatus.MENU
        self.display.clear()
        for row, line in enumerate(MENU_BANNER, start=1):
            self.display.write(13, row, line, Color.CYAN)
        self.display.write(11, 6, f"[ HIGH SCORE: {self.state.high_score} ]", Color.WHITE)
        self.display.write(11, 8, "1. START GAME", Color.WHITE)
        self.display.write(11, 9, "2. EXIT (or press ESC)", Color.WHITE)
        self.display.refresh()

        while True:
            key = self.keyboard.read_key()
            if key in (Key.DIGIT_2, Key.ESCAPE):
                self.exit_gracefully()
            if key in (Key.DIGIT_1, Key.ENTER):
                return

    def game_over(self) -> None:
        """Record the score, show the banner, then wait for Enter (menu) or Esc (exit)."""
        self.state.status = GameStatus.GAME_OVER
        if self.state.record_high_score():
            logger.info(f"New high score: {self.state.high_score}")
            self.high_score_store.save(self.state.high_score)

        sound.beep(*GAME_OVER_CUE)
        self.draw_status()
        self.display.write(self.width // 3, self.height // 2, GAME_OVER_LABEL, Color.RED)
        self.display.write(self.width // 3, self.height // 2 + 1, GAME_OVER_HINT, Color.RED)
        self.display.refresh()

        while True:
            key = self.keyboard.read_key()
            if key is Key.ESCAPE:
                self.exit_gracefully()
            if key is Key.ENTER:
                self.state.status = GameStatus.MENU
                return

    def exit_gracefully(self) -> None:
        logger.info(f"Exiting (high score {self.state.high_score})")
        self.display.clear()
        self.display.write(11, 2, FAREWELL, Color.CYAN)
        self.display.refresh()
        time.sleep(1)
        sys.exit(0)

    # -------------------------------
    # Game loop
    # -------------------------------
    def start_session(self) -> None:
        """Reset score and pacing, then lay out a fresh board."""
        self.state.reset()
        self.display.clear()
        self.draw_frame()

        self.snake = Snake(self.width // 2, self.height // 2 - 1, display=self.display)
        self.snake.draw()

        self.food = Item(Color.GREEN, FOOD_GLYPH, display=self.display)
        self.bonus = Item(Color.MAGENTA, BONUS_GLYPH, display=self.display)
        self.bonus.deactivate()
        self.food.spawn(self.width, self.height, self.snake.positions)

        self.draw_status()
        self.display.refresh()
        logger.info(f"Session started on a {self.width}x{self.height} board")

    def play(self) -> None:
        self.start_session()
        while self.tick():
            pass

    def tick(self) -> bool:
        """
        Run one step of active play.

        Returns:
            False once the snake has crashed and the session is over,
            True otherwise (including while paused).
        """
        key = self.keyboard.poll()
        if key is Key.ESCAPE:
            self.exit_gracefully()
        elif key is Key.SPACE:
            self.toggle_pause()
        elif key in KEY_DIRECTIONS:
            self.snake.change_direction(KEY_DIRECTIONS[key])

        if self.state.paused:
            self.draw_paused()
            self.display.refresh()
            time.sleep(PAUSE_POLL_DELAY_MS / 1000)
            return True

        if not self.snake.move(self.width, self.height):
            self.state.status = GameStatus.GAME_OVER
            logger.info(
                f"Snake hit {self.snake.death_reason} at {self.snake.head} heading "
                f"{self.snake.heading.name}, score {self.state.score}"
            )
            return False

        head = self.snake.head

        if self.food.is_at(head):
            self.state.add_points(FOOD_POINTS)
            self.snake.grow()
            self.state.speed_up()
            sound.beep(*FOOD_CUE)
            logger.debug(f"Food eaten at {head}, score {self.state.score}, delay {self.state.tick_delay}ms")
            try:
                self.food.spawn(self.width, self.height, self._occupied(self.bonus))
            except NoFreeCellError:
                logger.info("Board is full")
                self.state.status = GameStatus.GAME_OVER
                return False

        if self.bonus.is_at(head):
            self.state.add_points(BONUS_POINTS)
            self.bonus.deactivate()
            sound.beep(*BONUS_CUE)
            logger.debug(f"Bonus eaten at {head}, score {self.state.score}")

        if not self.bonus.active and random.random() < BONUS_SPAWN_CHANCE:
            try:
                self.bonus.spawn(self.width, self.height, self._occupied(self.food))
            except NoFreeCellError:
                logger.debug("No room for a bonus this tick")

        self.draw_status()
        self.display.refresh()
        time.sleep(self.state.tick_delay / 1000)
        return True

    def toggle_pause(self) -> None:
        self.state.toggle_pause()
        logger.debug(f"Pause toggled, status {self.state.status.value}")
        if not self.state.paused:
            self.clear_paused()

    def _occupied(self, other: Item) -> List[Cell]:
        """Cells a newly spawned item must avoid: the snake and the other item."""
        cells = list(self.snake.positions)
        if other.active and other.position is not None:
            cells.append(other.position)
        return cells

    # -------------------------------
    # Drawing
    # -------------------------------
    def draw_frame(self) -> None:
        for x, y in border_cells(self.width, self.height):
            self.display.write(x, y, FRAME_GLYPH, Color.DARK_GRAY)

    def status_text(self) -> str:
        return f" SCORE: {self.state.score}  |  HIGH: {self.state.high_score}  | [SPACE] PAUSE  | [ESC] QUIT "

    def draw_status(self) -> None:
        self.display.write(2, self.height, self.status_text(), Color.YELLOW)

    def draw_paused(self) -> None:
        self.display.write(self.width // 2 - 4, self.height // 2, PAUSED_LABEL, Color.YELLOW)

    def clear_paused(self) -> None:
        """Erase the paused label and repaint whatever it covered."""
        self.display.write(self.width // 2 - 4, self.height // 2, " " * len(PAUSED_LABEL))
        self.draw_frame()
        self.snake.draw()
        self.food.draw()
        if self.bonus.active:
            self.bonus.draw()
        self.display.refresh()


def run_game(stdscr, settings: Settings) -> None:
    """curses.wrapper target: wire the terminal services into an engine and run it."""
    engine = GameEngine(
        display=CursesDisplay(stdscr),
        keyboard=CursesKeyboard(stdscr),
        high_score_store=HighScoreStore(settings.high_score_file),
    )
    engine.run()


# -------------------------------
# Main Entry Point
# -------------------------------
def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Play CyberSnake in the terminal."
    )
    parser.add_argument("--high-score-file", type=str, default=None,
                        help="File holding the high score (default: $SNAKE_HIGHSCORE_FILE or highscore.txt)")
    parser.add_argument("--log-file", type=str, default=None,
                        help="Write logs to this file (default: $SNAKE_LOG_FILE or cybersnake.log)")
    parser.add_argument("--log-level", type=str, default=None,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Log level (default: $SNAKE_LOG_LEVEL or INFO)")
    parser.add_argument("--mute", action="store_true",
                        help="Do not ring the terminal bell")
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> Settings:
    """Environment settings with command line overrides applied."""
    settings = load_settings()
    if args.high_score_file:
        settings.high_score_file = args.high_score_file
    if args.log_file:
        settings.log_file = args.log_file
    if args.log_level:
        settings.log_level = args.log_level
    if args.mute:
        settings.sound = False
    return settings


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    settings = build_settings(args)
    setup_logging(settings)
    sound.enabled = settings.sound

    # Unicode glyphs need the user's locale; a short ESCDELAY keeps Esc responsive
    locale.setlocale(locale.LC_ALL, "")
    os.environ.setdefault("ESCDELAY", "25")

    try:
        curses.wrapper(run_game, settings)
    except TerminalTooSmallError as e:
        logger.error(str(e))
        print(e, file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        print("\nGame interrupted. Goodbye!")


if __name__ == "__main__":
    main()
