"""
Snake entity for the game engine.
"""

from collections import deque
from typing import TYPE_CHECKING, Optional

from .constants import BODY_GLYPH, Cell, Color, Direction
from .grid import in_bounds

if TYPE_CHECKING:
    from services.display import Display


class Snake:
    """
    Represents the player's snake on the board.

    Attributes:
        positions: deque of (x, y) from head at index 0 to tail at the end
        heading: direction applied on the next move
        pending_tail: the cell vacated by the last move, kept so grow() can
            re-attach it
        display: optional surface the snake draws itself on while moving
        death_reason: "wall" or "self" once a move has been refused
    """

    def __init__(self, start_x: int, start_y: int, display: Optional["Display"] = None):
        self.positions = deque([(start_x, start_y), (start_x - 1, start_y), (start_x - 2, start_y)])
        self.heading = Direction.RIGHT
        self.pending_tail: Optional[Cell] = None
        self.display = display
        self.death_reason: Optional[str] = None

    @property
    def head(self) -> Cell:
        """Return the head position (first element)."""
        return self.positions[0]

    @property
    def tail(self) -> Cell:
        return self.positions[-1]

    def __len__(self) -> int:
        return len(self.positions)

    def __contains__(self, cell: Cell) -> bool:
        return cell in self.positions

    def change_direction(self, requested: Direction) -> None:
        """
        Turn toward the requested heading.

        A request for the exact opposite of the current heading is ignored,
        as is anything that is not a Direction.
        """
        if not isinstance(requested, Direction):
            return
        if requested is self.heading.opposite:
            return
        self.heading = requested

    def move(self, width: int, height: int) -> bool:
        """
        Advance the head one cell along the heading.

        Returns False without changing anything if the new head would leave
        the playfield or land on any current body cell. The current tail
        counts as occupied even though it is about to move away.
        """
        hx, hy = self.head
        dx, dy = self.heading.vector
        new_head = (hx + dx, hy + dy)

        if not in_bounds(new_head, width, height):
            self.death_reason = "wall"
            return False
        if new_head in self.positions:
            self.death_reason = "self"
            return False

        old_head = self.head
        self.pending_tail = self.positions[-1]
        self.positions.appendleft(new_head)
        self.positions.pop()

        if self.display is not None:
            self.display.write(new_head[0], new_head[1], self.heading.glyph, Color.YELLOW)
            self.display.write(old_head[0], old_head[1], BODY_GLYPH, Color.WHITE)
            self.display.write(self.pending_tail[0], self.pending_tail[1], " ")

        return True

    def grow(self) -> None:
        """Re-attach the tail cell vacated by the last move."""
        if self.pending_tail is None:
            raise RuntimeError("grow() called before any move")
        self.positions.append(self.pending_tail)
        if self.display is not None:
            self.display.write(self.pending_tail[0], self.pending_tail[1], BODY_GLYPH, Color.WHITE)
        self.pending_tail = None

    def draw(self) -> None:
        """Draw the whole snake; used when a session starts."""
        if self.display is None:
            return
        for index, (x, y) in enumerate(self.positions):
            if index == 0:
                self.display.write(x, y, self.heading.glyph, Color.YELLOW)
            else:
                self.display.write(x, y, BODY_GLYPH, Color.WHITE)
