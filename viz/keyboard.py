# viz/keyboard.py
import pygame as pg
from core.interfaces import UP, DOWN, LEFT, RIGHT

ARROWS = {
    pg.K_UP: UP,
    pg.K_DOWN: DOWN,
    pg.K_LEFT: LEFT,
    pg.K_RIGHT: RIGHT,
}
START_KEYS = (pg.K_SPACE, pg.K_RETURN)

def map_event(e):
    """Heading tuple, "start", "quit", or None for events we don't care about."""
    if e.type == pg.QUIT:
        return "quit"
    if e.type == pg.KEYDOWN:
        if e.key == pg.K_ESCAPE: return "quit"
        if e.key in START_KEYS:  return "start"
        return ARROWS.get(e.key)
    return None

class Keyboard:
    def poll(self):
        """All commands since the last frame, in arrival order."""
        out = []
        for e in pg.event.get():
            cmd = map_event(e)
            if cmd is not None:
                out.append(cmd)
        return out
