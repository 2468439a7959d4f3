# core/snake_model.py
from __future__ import annotations
from collections import deque
from typing import Deque, Iterable, Iterator, Optional, Tuple
from .interfaces import Cell, Coord
from .grid import Grid

class Snake:
    """
    Segments ordered head first. Movement always extends from index 0, so
    turning back on itself is done by flipping the order (reverse_order),
    which makes the old tail the new head.
    """
    def __init__(self, segments: Optional[Iterable[Coord]] = None):
        self._segs: Deque[Coord] = deque(tuple(s) for s in (segments or ()))

    def spawn(self, coord: Coord, grid: Grid) -> None:
        grid.set(coord, Cell.SNAKE)
        self._segs = deque([tuple(coord)])

    def push_head(self, coord: Coord) -> None:
        # grid bookkeeping is the caller's job
        self._segs.appendleft(tuple(coord))

    def pop_tail(self) -> Coord:
        return self._segs.pop()

    def reverse_order(self) -> None:
        self._segs.reverse()

    @property
    def head(self) -> Coord:
        return self._segs[0]

    @property
    def tail(self) -> Coord:
        return self._segs[-1]

    def segments(self) -> Tuple[Coord, ...]:
        return tuple(self._segs)

    def __len__(self) -> int:
        return len(self._segs)

    def __iter__(self) -> Iterator[Coord]:
        return iter(self._segs)

    def __contains__(self, coord) -> bool:
        return tuple(coord) in self._segs

    def __repr__(self) -> str:
        return f"Snake({list(self._segs)!r})"
