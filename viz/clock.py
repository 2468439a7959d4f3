# viz/clock.py
import pygame as pg

class PygameClock:
    """Milliseconds since pygame.init(), the same timebase the display loop runs on."""
    def now_ms(self) -> float:
        return float(pg.time.get_ticks())
