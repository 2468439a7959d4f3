# core/grid.py  (board state, no pygame)
from __future__ import annotations
from typing import Optional
import random
import numpy as np
from .interfaces import Cell, Coord
from .errors import OutOfBounds, NoEmptyCellAvailable

class Grid:
    """Square board of Cell values stored as an int8 array indexed [row, col]."""
    def __init__(self, size: int, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()
        self.reset(size)

    def reset(self, size: Optional[int] = None) -> None:
        if size is not None:
            if size < 1:
                raise ValueError(f"grid size must be positive, got {size}")
            self.size = size
        self.cells = np.full((self.size, self.size), int(Cell.EMPTY), dtype=np.int8)

    def in_bounds(self, coord: Coord) -> bool:
        r, c = coord
        return 0 <= r < self.size and 0 <= c < self.size

    def get(self, coord: Coord) -> Cell:
        if not self.in_bounds(coord):
            raise OutOfBounds(coord, self.size)
        return Cell(int(self.cells[coord[0], coord[1]]))

    def set(self, coord: Coord, cell: Cell) -> None:
        if not self.in_bounds(coord):
            raise OutOfBounds(coord, self.size)
        self.cells[coord[0], coord[1]] = int(cell)

    def count(self, cell: Cell) -> int:
        return int(np.count_nonzero(self.cells == int(cell)))

    def find_random_empty_cell(self) -> Coord:
        # rejection sampling is uniform over empty cells; guard first so it terminates
        if self.count(Cell.EMPTY) == 0:
            raise NoEmptyCellAvailable(f"no empty cell on a {self.size}x{self.size} grid")
        while True:
            r = self.rng.randrange(self.size)
            c = self.rng.randrange(self.size)
            if self.cells[r, c] == Cell.EMPTY:
                return (r, c)

    def snapshot(self) -> np.ndarray:
        """Read-only copy for render sinks."""
        out = self.cells.copy()
        out.flags.writeable = False
        return out
