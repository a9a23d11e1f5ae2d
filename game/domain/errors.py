"""
Exceptions raised by the game engine.
"""


class SnakeError(Exception):
    """Base class for game errors."""


class NoFreeCellError(SnakeError, ValueError):
    """Raised when an item cannot be placed because the board is full."""


class TerminalTooSmallError(SnakeError):
    """Raised when the terminal cannot fit the board and status line."""

    def __init__(self, needed_cols: int, needed_rows: int, cols: int, rows: int):
        self.needed_cols = needed_cols
        self.needed_rows = needed_rows
        self.cols = cols
        self.rows = rows
        super().__init__(
            f"Terminal too small: need at least {needed_cols}x{needed_rows}, "
            f"got {cols}x{rows}"
        )
