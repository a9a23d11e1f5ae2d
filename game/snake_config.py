"""
Runtime configuration for CyberSnake.

Settings come from environment variables (optionally loaded from a .env
file by python-dotenv) and can be overridden on the command line.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class Settings:
    high_score_file: str = "highscore.txt"
    log_file: Optional[str] = "cybersnake.log"
    log_level: str = "INFO"
    sound: bool = True


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() not in _FALSE_VALUES


def load_settings(dotenv: bool = True) -> Settings:
    """
    Build Settings from the environment.

    Args:
        dotenv: whether to read a .env file first (existing variables win)

    Returns:
        Settings with defaults for anything unset
    """
    if dotenv:
        load_dotenv()

    defaults = Settings()
    high_score_file = os.getenv("SNAKE_HIGHSCORE_FILE", "").strip() or defaults.high_score_file

    # An explicitly empty SNAKE_LOG_FILE turns file logging off
    log_file = os.getenv("SNAKE_LOG_FILE")
    if log_file is None:
        log_file = defaults.log_file
    else:
        log_file = log_file.strip() or None

    log_level = os.getenv("SNAKE_LOG_LEVEL", defaults.log_level).strip().upper() or defaults.log_level

    return Settings(
        high_score_file=high_score_file,
        log_file=log_file,
        log_level=log_level,
        sound=_env_flag("SNAKE_SOUND", defaults.sound),
    )


def setup_logging(settings: Settings) -> None:
    """
    Configure the root logger.

    Logs go to a file because curses owns the terminal while the game runs.
    With no log file, records are dropped.
    """
    level = getattr(logging, settings.log_level.upper(), None)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {settings.log_level}")

    if settings.log_file:
        logging.basicConfig(
            level=level,
            format=LOG_FORMAT,
            filename=settings.log_file,
        )
    else:
        logging.basicConfig(level=level, format=LOG_FORMAT, handlers=[logging.NullHandler()])
