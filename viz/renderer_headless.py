# viz/renderer_headless.py
from __future__ import annotations
from typing import List, Optional, Sequence
import numpy as np
from config import AppConfig
from core.interfaces import Cell, CellChange
from viz.render_iface import Renderer

GLYPHS = {int(Cell.EMPTY): ".", int(Cell.FOOD): "F", int(Cell.SNAKE): "o"}

class HeadlessRenderer(Renderer):
    """Keeps its own copy of the board, updated from diffs. Used for terminal runs and tests."""
    def __init__(self):
        self.frame: Optional[np.ndarray] = None
        self.status = ""
        self.full_renders = 0
        self.diffs: List[Sequence[CellChange]] = []

    def open(self, cfg: AppConfig) -> None:
        self.cfg = cfg
        self.frame = np.zeros((cfg.grid_size, cfg.grid_size), dtype=np.int8)

    def render_full(self, cells: np.ndarray) -> None:
        self.frame = np.array(cells, dtype=np.int8, copy=True)
        self.full_renders += 1

    def apply_diff(self, changes: Sequence[CellChange]) -> None:
        assert self.frame is not None, "Renderer not opened"
        for (r, c), cell in changes:
            self.frame[r, c] = int(cell)
        self.diffs.append(tuple(changes))

    def set_status(self, text: str) -> None:
        self.status = text

    def tick(self, fps: int) -> None:
        pass

    def close(self) -> None:
        pass

    def to_ascii(self) -> List[str]:
        if self.frame is None:
            return []
        return ["".join(GLYPHS[int(v)] for v in row) for row in self.frame]
