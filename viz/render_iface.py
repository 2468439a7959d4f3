# viz/render_iface.py
from __future__ import annotations
from typing import Protocol, Sequence
import numpy as np
from config import AppConfig
from core.interfaces import CellChange

class Renderer(Protocol):
    """A RenderSink that also owns a window (or pretends to) and a frame clock."""
    def open(self, cfg: AppConfig) -> None: ...
    def render_full(self, cells: np.ndarray) -> None: ...
    def apply_diff(self, changes: Sequence[CellChange]) -> None: ...
    def set_status(self, text: str) -> None: ...
    def tick(self, fps: int) -> None: ...
    def close(self) -> None: ...
