"""
Playfield geometry.

The outermost ring of cells is reserved for the frame and is never playable.
"""

from typing import Iterator

from .constants import Cell


def in_bounds(cell: Cell, width: int, height: int) -> bool:
    """Return True if the cell lies strictly inside the frame."""
    x, y = cell
    return 0 < x < width - 1 and 0 < y < height - 1


def playable_cells(width: int, height: int) -> Iterator[Cell]:
    """Yield every cell inside the frame, row by row."""
    for y in range(1, height - 1):
        for x in range(1, width - 1):
            yield (x, y)


def border_cells(width: int, height: int) -> Iterator[Cell]:
    """Yield every frame cell exactly once."""
    for x in range(width):
        yield (x, 0)
        if height > 1:
            yield (x, height - 1)
    for y in range(1, height - 1):
        yield (0, y)
        if width > 1:
            yield (width - 1, y)
