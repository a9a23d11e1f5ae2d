"""
Fire-and-forget audible cues.
"""

import curses
import logging

logger = logging.getLogger(__name__)

# Flipped off by the --mute flag / SNAKE_SOUND=0
enabled = True


def beep(frequency: int, duration: int) -> None:
    """
    Ring the terminal bell for a game event.

    Terminals cannot play a tone of a given pitch, so frequency and duration
    only show up in the log. Failures are never raised to the caller.
    """
    if not enabled:
        return
    try:
        curses.beep()
    except (curses.error, OSError) as e:
        logger.debug(f"Beep {frequency}Hz/{duration}ms failed: {e}")
