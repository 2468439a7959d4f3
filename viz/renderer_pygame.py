# viz/renderer_pygame.py
from __future__ import annotations
import pygame as pg
from typing import Optional, Sequence
import numpy as np
from config import AppConfig
from core.interfaces import Cell, CellChange
import viz.renderer_colors as theme

HUD_H = 28

class PygameRenderer:
    """Draws the board into a window (or an attached surface), repainting only cells that changed."""
    def __init__(self):
        self.cell = 24
        self.cfg: Optional[AppConfig] = None
        self.surf: Optional[pg.Surface] = None
        self.clock: Optional[pg.time.Clock] = None
        self._auto_flip = True
        self._size = 0
        self._frame: Optional[np.ndarray] = None
        self._status = ""
        self._font: Optional[pg.font.Font] = None

    def open(self, cfg: AppConfig) -> None:
        # Guard: ensure instance, not class
        if isinstance(cfg, type):
            raise TypeError("Pass an AppConfig instance (use AppConfig()), not the class.")
        self.cfg = cfg
        self._size = cfg.grid_size
        self.cell = cfg.render_cell

        pg.init()
        pg.display.set_caption(cfg.render_title)
        self.surf = pg.display.set_mode(self._surface_size())
        self.clock = pg.time.Clock()
        self._auto_flip = True

    def attach_surface(self, surface: pg.Surface, cfg: AppConfig) -> None:
        """Draw into a caller-owned surface; the caller flips and keeps time."""
        if not pg.get_init():
            pg.init()
        self.cfg = cfg
        self._size = cfg.grid_size
        self.cell = cfg.render_cell
        self.surf = surface
        self.clock = None
        self._auto_flip = False

    def _surface_size(self) -> tuple[int, int]:
        assert self.cfg is not None
        hud = HUD_H if self.cfg.render_show_hud else 0
        return (self._size * self.cell, self._size * self.cell + hud)

    # RenderSink
    def render_full(self, cells: np.ndarray) -> None:
        assert self.surf is not None, "Renderer not opened"
        self._frame = np.array(cells, dtype=np.int8, copy=True)
        self.surf.fill(theme.BG)
        for r in range(self._size):
            for c in range(self._size):
                self._paint((r, c), Cell(int(self._frame[r, c])))
        self._draw_hud()
        self._present()

    def apply_diff(self, changes: Sequence[CellChange]) -> None:
        assert self.surf is not None, "Renderer not opened"
        for coord, cell in changes:
            if self._frame is not None:
                self._frame[coord[0], coord[1]] = int(cell)
            self._paint(coord, cell)
        self._present()

    def set_status(self, text: str) -> None:
        self._status = text
        if self.cfg is not None and self._auto_flip:
            pg.display.set_caption(f"{self.cfg.render_title} - {text}")
        if self.surf is not None:
            self._draw_hud()
            self._present()

    def tick(self, fps: int) -> None:
        if self.clock:
            self.clock.tick(fps)

    def close(self) -> None:
        try:
            pg.quit()
        finally:
            self.surf = None
            self.clock = None
            self._font = None

    # internals
    def _paint(self, coord, cell: Cell) -> None:
        assert self.surf is not None and self.cfg is not None
        r, col = coord
        c = self.cell
        rect = pg.Rect(col * c, r * c, c, c)
        pg.draw.rect(self.surf, theme.CELL_COLORS[Cell(cell)], rect)
        if self.cfg.render_grid_lines:
            pg.draw.rect(self.surf, theme.GRID, rect, width=1)

    def _draw_hud(self) -> None:
        assert self.surf is not None and self.cfg is not None
        if not self.cfg.render_show_hud:
            return
        top = self._size * self.cell
        bar = pg.Rect(0, top, self._size * self.cell, HUD_H)
        pg.draw.rect(self.surf, theme.HUD_BG, bar)
        if self._status:
            if self._font is None:
                self._font = pg.font.SysFont(None, 22)
            txt = self._font.render(self._status, True, theme.TEXT)
            self.surf.blit(txt, (6, top + 6))

    def _present(self) -> None:
        if self._auto_flip:
            pg.display.flip()
