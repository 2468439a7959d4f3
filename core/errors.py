# core/errors.py
from __future__ import annotations


class OutOfBounds(IndexError):
    """A coordinate outside the board reached the grid. Always a bug in the caller."""
    def __init__(self, coord, size: int):
        super().__init__(f"cell {coord} is outside a {size}x{size} grid")
        self.coord = coord
        self.size = size


class NoEmptyCellAvailable(RuntimeError):
    """Food or snake placement was requested on a board with no empty cell left."""
