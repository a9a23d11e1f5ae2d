"""
Point items the snake can eat: the food and the bonus star.
"""

import random
from typing import TYPE_CHECKING, Collection, Optional

from .constants import Cell, Color
from .errors import NoFreeCellError
from .grid import in_bounds

if TYPE_CHECKING:
    from services.display import Display


class Item:
    """
    A single consumable on the board.

    Attributes:
        color, glyph: how the item is drawn
        position: where it sits; only meaningful while active
        active: whether the item is on the board
    """

    def __init__(self, color: Color, glyph: str, display: Optional["Display"] = None):
        self.color = color
        self.glyph = glyph
        self.display = display
        self.position: Optional[Cell] = None
        self.active = True

    def spawn(self, width: int, height: int, occupied_cells: Collection[Cell]) -> Cell:
        """
        Place the item on a random free cell inside the frame and activate it.

        Keeps sampling until a free cell turns up. Raises NoFreeCellError if
        the playfield has no free cell at all.
        """
        occupied_inside = {cell for cell in occupied_cells if in_bounds(cell, width, height)}
        if len(occupied_inside) >= max(width - 2, 0) * max(height - 2, 0):
            raise NoFreeCellError(f"No free cell left on a {width}x{height} board")

        while True:
            cell = (random.randint(1, width - 2), random.randint(1, height - 2))
            if cell not in occupied_inside:
                break

        self.position = cell
        self.active = True
        self.draw()
        return cell

    def deactivate(self) -> None:
        self.active = False

    def is_at(self, cell: Cell) -> bool:
        return self.active and self.position == cell

    def draw(self) -> None:
        if self.display is None or self.position is None:
            return
        x, y = self.position
        self.display.write(x, y, self.glyph, self.color)

    def __repr__(self):
        return f"<Item glyph={self.glyph!r} position={self.position} active={self.active}>"
